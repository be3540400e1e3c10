# automaton_engine/dfa.py

from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple
from collections import deque

from .alphabet import ALPHABET_SIZE, symbols
from .nfa import Nfa


# Marks a missing transition in a transition row.
NO_STATE = -1


# =========================================================
# Dfa container
# =========================================================

class Dfa:
    """
    Deterministic automaton over the ASCII alphabet.

    State i keeps the set of NFA states it stands for (`nfa_sets[i]`) and a
    transition row of ALPHABET_SIZE destinations indexed by code point.
    """
    def __init__(self):
        self.start = 0
        self.accepts: Set[int] = set()
        self.nfa_sets: List[FrozenSet[int]] = []
        self.trans: List[List[int]] = []

    def add_state(self, nfa_set: FrozenSet[int], accept: bool) -> int:
        idx = len(self.nfa_sets)
        self.nfa_sets.append(nfa_set)
        self.trans.append([NO_STATE] * ALPHABET_SIZE)
        if accept:
            self.accepts.add(idx)
        return idx

    def add_transition(self, from_: int, c: str, to: int):
        self.trans[from_][ord(c)] = to

    def next(self, state: int, c: str) -> Optional[int]:
        code = ord(c)
        if code >= ALPHABET_SIZE:
            return None
        to = self.trans[state][code]
        return None if to == NO_STATE else to

    def transitions(self, state: int) -> Dict[str, int]:
        row = self.trans[state]
        return {chr(code): to for code, to in enumerate(row) if to != NO_STATE}

    def is_accept(self, state: int) -> bool:
        return state in self.accepts

    def reachable_states(self) -> Set[int]:
        seen = {self.start}
        q = deque([self.start])
        while q:
            u = q.popleft()
            for v in self.trans[u]:
                if v != NO_STATE and v not in seen:
                    seen.add(v)
                    q.append(v)
        return seen

    def __len__(self):
        return len(self.nfa_sets)

    def __repr__(self):
        return f"DFA(states={len(self)}, start={self.start}, accepts={sorted(self.accepts)})"


# =========================================================
# DfaBuilder: NFA → DFA (subset construction)
# =========================================================

class DfaBuilder:

    def build(self, nfa: Nfa) -> Dfa:
        # 1) start set = epsilon closure(start state)
        start_set = self.epsilon_closure(nfa, {nfa.start})

        subset_to_id: Dict[FrozenSet[int], int] = {start_set: 0}
        subsets: List[FrozenSet[int]] = [start_set]
        edges: List[Dict[str, int]] = [{}]

        # 2) BFS over subsets, in discovery order
        work = deque([start_set])
        while work:
            T = work.popleft()
            from_id = subset_to_id[T]

            for c in symbols():
                moved = self.move(nfa, T, c)
                if not moved:
                    continue
                U = self.epsilon_closure(nfa, moved)

                if U not in subset_to_id:
                    subset_to_id[U] = len(subsets)
                    subsets.append(U)
                    edges.append({})
                    work.append(U)

                edges[from_id][c] = subset_to_id[U]

        # 3) reachable-state pruning + compaction
        return self.compact(nfa, subsets, edges)

    # ========== helper functions ==========

    def epsilon_closure(self, nfa: Nfa, seeds: Iterable[int]) -> FrozenSet[int]:
        result = set(seeds)
        stack = list(result)

        while stack:
            s = stack.pop()
            for nxt in nfa.states[s].eps:
                if nxt not in result:
                    result.add(nxt)
                    stack.append(nxt)
        return frozenset(result)

    def move(self, nfa: Nfa, T: Iterable[int], c: str) -> Set[int]:
        res: Set[int] = set()
        for s in T:
            res.update(nfa.states[s].targets(c))
        return res

    def contains_accept(self, nfa: Nfa, subset: FrozenSet[int]) -> bool:
        return not nfa.accepts.isdisjoint(subset)

    def compact(self, nfa: Nfa, subsets: List[FrozenSet[int]],
                edges: List[Dict[str, int]]) -> Dfa:
        seen = [False] * len(subsets)
        seen[0] = True
        q = deque([0])
        while q:
            u = q.popleft()
            for v in edges[u].values():
                if not seen[v]:
                    seen[v] = True
                    q.append(v)

        # survivors keep their relative discovery order
        remap: Dict[int, int] = {}
        dfa = Dfa()
        for old, subset in enumerate(subsets):
            if seen[old]:
                remap[old] = dfa.add_state(subset, self.contains_accept(nfa, subset))

        for old, new in remap.items():
            for c, to in edges[old].items():
                if to in remap:
                    dfa.add_transition(new, c, remap[to])

        dfa.start = remap[0]
        return dfa


def determinize(nfa: Nfa) -> Dfa:
    return DfaBuilder().build(nfa)


# =========================================================
# DfaMatcher: run DFA on input
# =========================================================

class DfaMatcher:
    @staticmethod
    def matches(dfa: Dfa, s: str) -> bool:
        cur = dfa.start
        for ch in s:
            cur = dfa.next(cur, ch)
            if cur is None:
                return False
        return dfa.is_accept(cur)

    @staticmethod
    def longestMatch(dfa: Dfa, s: str, start: int) -> int:
        cur = dfa.start
        best_len = 0
        length = 0

        for i in range(start, len(s)):
            cur = dfa.next(cur, s[i])
            if cur is None:
                break
            length += 1
            if dfa.is_accept(cur):
                best_len = length

        return best_len

    @staticmethod
    def longestMatchWithTrace(dfa: Dfa, s: str, start: int) -> Tuple[int, List[int]]:
        """
        Same match as longestMatch, plus every state visited on the way.

        The path starts with the start state and gains one entry per consumed
        character, including characters read past the last accepting state.
        """
        cur = dfa.start
        path = [cur]
        best_len = 0

        for i in range(start, len(s)):
            nxt = dfa.next(cur, s[i])
            if nxt is None:
                break
            cur = nxt
            path.append(cur)
            if dfa.is_accept(cur):
                best_len = len(path) - 1

        return best_len, path
