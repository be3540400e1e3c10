# automaton_engine/nfa.py

from typing import Dict, Iterable, List, Set


# Passing this to NfaBuilder.char() yields an epsilon edge instead of a labeled one.
EPSILON = '\0'


# =========================================================
# NfaState
# =========================================================

class NfaState:
    """NFA state; identified by its index in the owning Nfa."""
    def __init__(self, id_: int):
        self.id = id_
        self.trans: Dict[str, Set[int]] = {}   # symbol -> destination ids
        self.eps: Set[int] = set()             # epsilon destination ids

    def targets(self, c: str) -> Set[int]:
        return self.trans.get(c, set())

    def __repr__(self):
        return f"NfaState({self.id})"


# =========================================================
# Nfa (append-only state list + start + accept set)
# =========================================================

class Nfa:
    def __init__(self):
        self.states: List[NfaState] = []
        self.start: int = -1
        self.accepts: Set[int] = set()

    def new_state(self) -> int:
        s = NfaState(len(self.states))
        self.states.append(s)
        return s.id

    def add_trans(self, from_: int, c: str, to: int):
        self.states[from_].trans.setdefault(c, set()).add(to)

    def add_eps(self, from_: int, to: int):
        self.states[from_].eps.add(to)

    def __len__(self):
        return len(self.states)

    def __repr__(self):
        return f"NFA(states={len(self.states)}, start={self.start}, accepts={sorted(self.accepts)})"


# =========================================================
# Fragment (start + accept of a sub-automaton)
# =========================================================

class Fragment:
    """
    Sub-automaton under construction.

    `accept` has no outgoing edges yet and `start` has no incoming ones,
    so combinators can wire fragments together with epsilon edges.
    """
    def __init__(self, start: int, accept: int):
        self.start = start
        self.accept = accept

    def __repr__(self):
        return f"Fragment({self.start}->{self.accept})"


# =========================================================
# NFA Builder (Thompson construction)
# =========================================================

class NfaBuilder:

    def __init__(self):
        self.nfa = Nfa()

    # entry point: fragment becomes the whole automaton
    def build(self, frag: Fragment) -> Nfa:
        self.nfa.start = frag.start
        self.nfa.accepts = {frag.accept}
        return self.nfa

    # ============= fragment operations ==================

    # single character (EPSILON gives an epsilon edge)
    def char(self, c: str) -> Fragment:
        s = self.nfa.new_state()
        t = self.nfa.new_state()
        if c == EPSILON:
            self.nfa.add_eps(s, t)
        else:
            self.nfa.add_trans(s, c, t)
        return Fragment(s, t)

    # character class; an empty class never matches
    def char_class(self, allowed: Iterable[str]) -> Fragment:
        s = self.nfa.new_state()
        t = self.nfa.new_state()
        for c in allowed:
            self.nfa.add_trans(s, c, t)
        return Fragment(s, t)

    # concat
    def concat(self, X: Fragment, Y: Fragment) -> Fragment:
        self.nfa.add_eps(X.accept, Y.start)
        return Fragment(X.start, Y.accept)

    # alternation
    def alt(self, X: Fragment, Y: Fragment) -> Fragment:
        s = self.nfa.new_state()
        t = self.nfa.new_state()

        # branch
        self.nfa.add_eps(s, X.start)
        self.nfa.add_eps(s, Y.start)

        # merge
        self.nfa.add_eps(X.accept, t)
        self.nfa.add_eps(Y.accept, t)

        return Fragment(s, t)

    # star
    def star(self, X: Fragment) -> Fragment:
        s = self.nfa.new_state()
        t = self.nfa.new_state()

        self.nfa.add_eps(s, X.start)
        self.nfa.add_eps(s, t)

        self.nfa.add_eps(X.accept, X.start)
        self.nfa.add_eps(X.accept, t)

        return Fragment(s, t)

    # X+ => X · (X)*, the loop reuses X's states
    def plus(self, X: Fragment) -> Fragment:
        return self.concat(X, self.star(X))

    # optional
    def optional(self, X: Fragment) -> Fragment:
        s = self.nfa.new_state()
        t = self.nfa.new_state()

        self.nfa.add_eps(s, X.start)
        self.nfa.add_eps(s, t)
        self.nfa.add_eps(X.accept, t)

        return Fragment(s, t)
