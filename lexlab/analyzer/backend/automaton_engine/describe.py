# automaton_engine/describe.py

from typing import Dict, Iterable, List, Optional

from .alphabet import ALPHABET_SIZE, is_printable
from .dfa import NO_STATE, Dfa

MAX_LABEL = 80


def chars_to_label(chars: Iterable[str]) -> str:
    """
    Compact edge label: printable runs become `a-z` (or `a,b` for a pair),
    everything else is listed as 0xHH after them.
    """
    printable = sorted({ord(c) for c in chars if is_printable(c)})
    other = sorted({ord(c) for c in chars if not is_printable(c)})

    parts: List[str] = []
    i = 0
    while i < len(printable):
        a = b = printable[i]
        j = i + 1
        while j < len(printable) and printable[j] == b + 1:
            b = printable[j]
            j += 1
        if a == b:
            parts.append(chr(a))
        elif b == a + 1:
            parts.append(f"{chr(a)},{chr(b)}")
        else:
            parts.append(f"{chr(a)}-{chr(b)}")
        i = j
    parts.extend(f"0x{c:02X}" for c in other)

    out = ",".join(parts)
    if len(out) > MAX_LABEL:
        out = out[:MAX_LABEL - 3] + "..."
    return out


def grouped_edges(dfa: Dfa, state: int) -> Dict[int, List[str]]:
    out: Dict[int, List[str]] = {}
    for c, to in dfa.transitions(state).items():
        out.setdefault(to, []).append(c)
    return out


def describe_state(dfa: Dfa, state: int) -> Optional[dict]:
    if not 0 <= state < len(dfa):
        return None
    edges = grouped_edges(dfa, state)
    return {
        "state": state,
        "accept": dfa.is_accept(state),
        "nfa_set": sorted(dfa.nfa_sets[state]),
        "outgoing": [
            {"to": to, "label": chars_to_label(edges[to])}
            for to in sorted(edges)
        ],
    }


def describe_dfa(dfa: Dfa) -> dict:
    return {
        "start": dfa.start,
        "accepts": sorted(dfa.accepts),
        "states": [describe_state(dfa, i) for i in range(len(dfa))],
    }


def symbol_classes(dfa: Dfa) -> List[List[str]]:
    """
    Partition the alphabet into symbols that behave identically in every
    state. Symbols with no transition anywhere are left out.
    """
    groups: Dict[tuple, List[str]] = {}
    for code in range(ALPHABET_SIZE):
        column = tuple(row[code] for row in dfa.trans)
        if any(to != NO_STATE for to in column):
            groups.setdefault(column, []).append(chr(code))
    return sorted(groups.values(), key=lambda g: ord(g[0]))
