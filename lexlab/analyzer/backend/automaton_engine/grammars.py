# automaton_engine/grammars.py

from .alphabet import char_range
from .nfa import Nfa, NfaBuilder


LETTERS = char_range('a', 'z') + char_range('A', 'Z') + ['_']
DIGITS = char_range('0', '9')
IDENTIFIER_CHARS = LETTERS + DIGITS


# identifier: [a-zA-Z_][a-zA-Z0-9_]*
def build_identifier_automaton() -> Nfa:
    b = NfaBuilder()
    head = b.char_class(LETTERS)
    tail = b.star(b.char_class(IDENTIFIER_CHARS))
    return b.build(b.concat(head, tail))


# number: [0-9]+(\.[0-9]+)?
def build_number_automaton() -> Nfa:
    b = NfaBuilder()
    int_part = b.plus(b.char_class(DIGITS))
    frac = b.concat(b.char('.'), b.plus(b.char_class(DIGITS)))
    return b.build(b.concat(int_part, b.optional(frac)))
