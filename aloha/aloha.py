"""
Game Console - plays a game module over stdin/stdout
Run this with: python aloha.py
"""

import importlib
import sys
from pathlib import Path

# Store loaded game modules
games = {}
GAMES_DIR = Path(__file__).parent / "games"
DEFAULT_GAME = "number"
EXIT_FAILURE = 101


class InputReadError(Exception):
    """Raised when a line could not be read from the input stream"""


def load_game(game_name):
    """Load a game module once and remember it"""
    if game_name in games:
        return games[game_name]

    module_path = f"games.{game_name}"
    module = importlib.import_module(module_path)
    games[game_name] = module
    print(f"✅ Loaded game: {game_name}", file=sys.stderr)
    return module


def read_line(stream):
    """Read one line, failing on end of stream or an unreadable stream"""
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Failed to read line: {e}") from e

    if not line:
        raise InputReadError("Failed to read line: end of input stream")
    return line


def expect_text(game_name, function_name, result):
    """Game functions must hand back a string to show the player"""
    if not isinstance(result, str):
        raise TypeError(
            f"{function_name}() must return a string, got {type(result).__name__}. "
            f"In games/{game_name}.py, make sure {function_name}() returns a string message"
        )
    return result


def format_error_message(game_name, function_name, error):
    """Format the diagnostic printed before a fatal exit"""
    return "\n".join([
        f"❌ Error in {game_name}.{function_name}()",
        f"type: {type(error).__name__}",
        f"message: {error}",
    ])


def write(stream, text):
    print(text, file=stream, flush=True)


def run(game_module, stdin, stdout):
    """Start the game and answer every input line, forever"""
    game_name = game_module.__name__.rsplit(".", 1)[-1]

    write(stdout, expect_text(game_name, "start", game_module.start()))

    while True:
        line = read_line(stdin)
        reply = game_module.message(line)
        write(stdout, expect_text(game_name, "message", reply))


def main():
    games_root = str(GAMES_DIR.parent)
    if games_root not in sys.path:
        sys.path.insert(0, games_root)

    game_module = load_game(DEFAULT_GAME)

    try:
        run(game_module, sys.stdin, sys.stdout)
    except InputReadError as e:
        print(format_error_message(DEFAULT_GAME, "read_line", e), file=sys.stderr)
        return EXIT_FAILURE
    except game_module.ParseError as e:
        print(format_error_message(DEFAULT_GAME, "message", e), file=sys.stderr)
        return EXIT_FAILURE


if __name__ == '__main__':
    sys.exit(main())
