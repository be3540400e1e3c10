from .alphabet import (
    ALPHABET_SIZE, is_digit, is_identifier_char, is_letter, is_printable, is_whitespace,
)
from .nfa import EPSILON, Fragment, Nfa, NfaBuilder, NfaState
from .grammars import build_identifier_automaton, build_number_automaton
from .dfa import Dfa, DfaBuilder, DfaMatcher, determinize
from .tokenizer import KEYWORDS, TokenItem, TokenKind, Tokenizer, tokenize
from .delimiters import check_balanced
from .describe import chars_to_label, describe_dfa, describe_state, symbol_classes
from .engine import (
    IDENTIFIER, KINDS, NUMBER, Analysis, AutomatonEngine, Trace, UnknownAutomatonError,
)
