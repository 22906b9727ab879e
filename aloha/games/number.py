import random
import re
from enum import Enum

LOWEST = 1
HIGHEST = 100
U32_MAX = 2**32 - 1

secret_number = None

# unicode White_Space only, \x1c-\x1f are not trimmed
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# optional plus, ascii digits only
GUESS_PATTERN = re.compile(r"\+?[0-9]+")


class ParseError(ValueError):
    """Raised when a guess is not an unsigned 32-bit integer"""

    def __init__(self, text):
        super().__init__(f"not a number: {text!r}")
        self.text = text


class Outcome(Enum):
    """How a guess compares to the secret, valued by the line shown for it"""
    EQUAL = "you winn"
    GREATER = "too big"
    LESS = "too small"


def start():
    global secret_number
    secret_number = random.randint(LOWEST, HIGHEST)
    return "\n".join([
        "Guess the number!",
        f"The secret number is: {secret_number}",
        "Please input your guess.",
    ])


def parse_guess(user_input: str) -> int:
    text = user_input.strip(WHITESPACE)

    if not GUESS_PATTERN.fullmatch(text):
        raise ParseError(text)

    guess = int(text)
    if guess > U32_MAX:
        raise ParseError(text)

    return guess


def compare(guess: int, secret: int) -> Outcome:
    if guess < secret:
        return Outcome.LESS
    if guess > secret:
        return Outcome.GREATER
    return Outcome.EQUAL


def message(user_input):
    if secret_number is None:
        raise RuntimeError("start() must be called before message()")

    guess = parse_guess(user_input)
    return compare(guess, secret_number).value
