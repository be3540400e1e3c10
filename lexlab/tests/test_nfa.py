from analyzer.backend.automaton_engine.nfa import EPSILON, NfaBuilder
from analyzer.backend.automaton_engine.grammars import (
    build_identifier_automaton, build_number_automaton,
)


def all_targets(nfa):
    for st in nfa.states:
        for dests in st.trans.values():
            yield from dests
        yield from st.eps


def test_char_allocates_two_states_with_one_labeled_edge():
    b = NfaBuilder()
    f = b.char('a')
    nfa = b.build(f)
    assert len(nfa) == 2
    assert nfa.states[f.start].trans == {'a': {f.accept}}
    assert not nfa.states[f.start].eps
    assert nfa.start == f.start and nfa.accepts == {f.accept}


def test_char_epsilon_sentinel_gives_epsilon_edge():
    b = NfaBuilder()
    f = b.char(EPSILON)
    assert b.nfa.states[f.start].trans == {}
    assert b.nfa.states[f.start].eps == {f.accept}


def test_char_class_points_every_symbol_at_single_exit():
    b = NfaBuilder()
    f = b.char_class("xyz")
    trans = b.nfa.states[f.start].trans
    assert trans == {'x': {f.accept}, 'y': {f.accept}, 'z': {f.accept}}


def test_concat_links_with_epsilon():
    b = NfaBuilder()
    x, y = b.char('a'), b.char('b')
    f = b.concat(x, y)
    assert (f.start, f.accept) == (x.start, y.accept)
    assert b.nfa.states[x.accept].eps == {y.start}
    assert len(b.nfa) == 4


def test_alt_star_optional_shapes():
    b = NfaBuilder()
    x, y = b.char('a'), b.char('b')
    u = b.alt(x, y)
    assert b.nfa.states[u.start].eps == {x.start, y.start}
    assert b.nfa.states[x.accept].eps == {u.accept}
    assert b.nfa.states[y.accept].eps == {u.accept}

    z = b.char('c')
    s = b.star(z)
    assert b.nfa.states[s.start].eps == {z.start, s.accept}
    assert b.nfa.states[z.accept].eps == {z.start, s.accept}

    w = b.char('d')
    o = b.optional(w)
    assert b.nfa.states[o.start].eps == {w.start, o.accept}
    assert b.nfa.states[w.accept].eps == {o.accept}


def test_plus_reuses_operand_states():
    b = NfaBuilder()
    x = b.char('a')
    before = len(b.nfa)
    p = b.plus(x)
    # only the star wrapper adds states; the symbol edge is not duplicated
    assert len(b.nfa) == before + 2
    assert p.start == x.start
    labeled = sum(len(st.trans) for st in b.nfa.states)
    assert labeled == 1


def test_grammar_automata_are_well_formed():
    for nfa in (build_identifier_automaton(), build_number_automaton()):
        assert 0 <= nfa.start < len(nfa)
        assert len(nfa.accepts) == 1
        assert all(0 <= t < len(nfa) for t in all_targets(nfa))
        assert [st.id for st in nfa.states] == list(range(len(nfa)))
