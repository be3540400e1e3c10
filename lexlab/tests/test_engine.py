import pytest

from analyzer.backend.automaton_engine.engine import (
    IDENTIFIER, NUMBER, AutomatonEngine, UnknownAutomatonError,
)
from analyzer.backend.automaton_engine.tokenizer import TokenKind


@pytest.fixture
def engine():
    return AutomatonEngine()


def test_engines_do_not_share_automata():
    a, b = AutomatonEngine(), AutomatonEngine()
    assert a.dfa(IDENTIFIER) is not b.dfa(IDENTIFIER)


def test_unknown_kind(engine):
    with pytest.raises(UnknownAutomatonError) as exc:
        engine.dfa("string")
    assert exc.value.kind == "string"
    assert isinstance(exc.value, KeyError)
    assert "identifier" in str(exc.value)


def test_analyze_traces_first_token(engine):
    result = engine.analyze("  count1 = 7;")
    assert result.tokens[0].kind is TokenKind.IDENTIFIER
    assert result.balanced is True
    assert result.trace.kind == IDENTIFIER
    assert result.trace.offset == 2
    assert result.trace.length == 6
    # the trace continues until the DFA has no move for ' '
    assert result.trace.path == [0, 1, 2, 2, 2, 2, 2]


def test_analyze_number_first(engine):
    result = engine.analyze("3.5)")
    assert result.trace.kind == NUMBER
    assert result.trace.length == 3
    assert result.balanced is False


def test_analyze_without_trace(engine):
    assert engine.analyze("").trace is None
    assert engine.analyze("").tokens == []
    assert engine.analyze("(x)").trace is None


def test_trace_from_offset(engine):
    t = engine.trace(NUMBER, "x = 12", 4)
    assert (t.offset, t.length, t.path) == (4, 2, [0, 1, 1])
