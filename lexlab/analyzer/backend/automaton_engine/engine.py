# automaton_engine/engine.py

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .alphabet import is_whitespace
from .delimiters import check_balanced
from .dfa import Dfa, DfaMatcher, determinize
from .grammars import build_identifier_automaton, build_number_automaton
from .tokenizer import TokenItem, TokenKind, tokenize

logger = logging.getLogger(__name__)

IDENTIFIER = "identifier"
NUMBER = "number"
KINDS = (IDENTIFIER, NUMBER)

# which automaton recognized a token of the given kind
TRACE_KIND = {
    TokenKind.KEYWORD: IDENTIFIER,
    TokenKind.IDENTIFIER: IDENTIFIER,
    TokenKind.NUMBER: NUMBER,
}


class UnknownAutomatonError(KeyError):
    def __init__(self, kind):
        super().__init__(kind)
        self.kind = kind

    def __str__(self):
        return f"unknown automaton {self.kind!r}, expected one of {', '.join(KINDS)}"


@dataclass(frozen=True)
class Trace:
    kind: str
    offset: int
    length: int
    path: List[int]


@dataclass(frozen=True)
class Analysis:
    tokens: List[TokenItem]
    balanced: bool
    trace: Optional[Trace] = None


@dataclass
class AutomatonEngine:
    """Both lexical automata, built fresh for each engine instance."""
    dfas: Dict[str, Dfa] = field(default_factory=dict)

    def __post_init__(self):
        if not self.dfas:
            self.dfas = {
                IDENTIFIER: determinize(build_identifier_automaton()),
                NUMBER: determinize(build_number_automaton()),
            }
        for kind, dfa in self.dfas.items():
            logger.debug("%s automaton: %d states, accepts %s",
                         kind, len(dfa), sorted(dfa.accepts))

    def dfa(self, kind: str) -> Dfa:
        try:
            return self.dfas[kind]
        except KeyError:
            raise UnknownAutomatonError(kind) from None

    def tokenize(self, text: str) -> List[TokenItem]:
        return tokenize(text, self.dfa(IDENTIFIER), self.dfa(NUMBER))

    def check_balanced(self, text: str) -> bool:
        return check_balanced(text)

    def trace(self, kind: str, text: str, offset: int = 0) -> Trace:
        length, path = DfaMatcher.longestMatchWithTrace(self.dfa(kind), text, offset)
        return Trace(kind, offset, length, path)

    def analyze(self, text: str) -> Analysis:
        tokens = self.tokenize(text)
        trace = None
        if tokens and tokens[0].kind in TRACE_KIND:
            # the first token always starts at the first non-blank character
            offset = next(i for i, c in enumerate(text) if not is_whitespace(c))
            trace = self.trace(TRACE_KIND[tokens[0].kind], text, offset)
        return Analysis(tokens, self.check_balanced(text), trace)
