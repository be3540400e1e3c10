# automaton_engine/alphabet.py

from typing import Iterable, List

# The automata only ever see the 128 ASCII code points.
ALPHABET_SIZE = 128

WHITESPACE = frozenset(" \t\n\r\f\v")


def is_letter(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def is_identifier_char(c: str) -> bool:
    return is_letter(c) or is_digit(c) or c == "_"


def is_whitespace(c: str) -> bool:
    return c in WHITESPACE


def is_printable(c: str) -> bool:
    return 32 <= ord(c) < 127


def char_range(first: str, last: str) -> List[str]:
    """Inclusive range of characters, e.g. char_range('a', 'z')."""
    return [chr(i) for i in range(ord(first), ord(last) + 1)]


def symbols() -> Iterable[str]:
    """Every input symbol, in code point order."""
    return (chr(i) for i in range(ALPHABET_SIZE))
