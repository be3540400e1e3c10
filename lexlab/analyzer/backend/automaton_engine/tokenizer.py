# automaton_engine/tokenizer.py

from dataclasses import dataclass
from enum import Enum
from typing import List

from .alphabet import is_whitespace
from .dfa import Dfa, DfaMatcher


class TokenKind(Enum):
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    OPERATOR = "Operator"
    DELIMITER = "Delimiter"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class TokenItem:
    kind: TokenKind
    text: str
    line: int     # 1-based
    column: int   # 1-based

    def __repr__(self):
        return f"{self.kind.value}({self.text!r})@{self.line}:{self.column}"


KEYWORDS = frozenset({
    "int", "float", "if", "else", "while", "for",
    "break", "continue", "return",
})

OPERATORS = frozenset("+-*/=<>!&|%")
DELIMITERS = frozenset("(){}[],;:")


class Cursor:
    """Scan position for one tokenize() call, with 1-based line/column."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.col = 1

    def emit(self, kind: TokenKind, length: int) -> TokenItem:
        tok = TokenItem(kind, self.text[self.pos:self.pos + length], self.line, self.col)
        self.advance(length)
        return tok

    def advance(self, count: int):
        for _ in range(count):
            c = self.text[self.pos]
            if c == '\n':
                self.line += 1
                self.col = 1
            elif c == '\r':
                # lone CR: back to column 1 on the same line
                self.col = 1
            else:
                self.col += 1
            self.pos += 1


class Tokenizer:
    """
    Greedy left-to-right scanner driven by the identifier and number DFAs.

    Holds only the automata; scan state lives in a per-call Cursor.
    """

    def __init__(self, identifier_dfa: Dfa, number_dfa: Dfa):
        self.identifier_dfa = identifier_dfa
        self.number_dfa = number_dfa

    def tokenize(self, text: str) -> List[TokenItem]:
        cur = Cursor(text)
        out: List[TokenItem] = []

        while cur.pos < len(text):
            c = text[cur.pos]

            # whitespace is skipped, but still moves line/col
            if is_whitespace(c):
                cur.advance(1)
                continue

            if c in OPERATORS:
                out.append(cur.emit(TokenKind.OPERATOR, 1))
                continue
            if c in DELIMITERS:
                out.append(cur.emit(TokenKind.DELIMITER, 1))
                continue

            len_id = DfaMatcher.longestMatch(self.identifier_dfa, text, cur.pos)
            len_num = DfaMatcher.longestMatch(self.number_dfa, text, cur.pos)

            if len_id == 0 and len_num == 0:
                # always make progress on unrecognized input
                out.append(cur.emit(TokenKind.UNKNOWN, 1))
            elif len_id >= len_num:
                word = text[cur.pos:cur.pos + len_id]
                kind = TokenKind.KEYWORD if word in KEYWORDS else TokenKind.IDENTIFIER
                out.append(cur.emit(kind, len_id))
            else:
                out.append(cur.emit(TokenKind.NUMBER, len_num))

        return out


def tokenize(text: str, identifier_dfa: Dfa, number_dfa: Dfa) -> List[TokenItem]:
    return Tokenizer(identifier_dfa, number_dfa).tokenize(text)
