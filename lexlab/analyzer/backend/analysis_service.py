import logging

from analyzer.backend.automaton_engine.engine import AutomatonEngine
from analyzer.backend.automaton_engine.describe import describe_dfa

logger = logging.getLogger(__name__)


def token_to_dict(tok):
    return {
        "kind": tok.kind.value,
        "text": tok.text,
        "line": tok.line,
        "column": tok.column,
    }


def trace_to_dict(trace):
    return {
        "kind": trace.kind,
        "offset": trace.offset,
        "length": trace.length,
        "path": list(trace.path),
    }


class AnalysisService:
    """JSON-ready views of the automaton engine; each call owns a fresh engine."""

    @staticmethod
    def analyze(text: str):
        engine = AutomatonEngine()
        result = engine.analyze(text)

        logger.debug("analyzed %d chars into %d tokens", len(text), len(result.tokens))

        return {
            "tokens": [token_to_dict(t) for t in result.tokens],
            "balanced": result.balanced,
            "trace": trace_to_dict(result.trace) if result.trace else None,
        }

    @staticmethod
    def automaton(kind: str):
        # raises UnknownAutomatonError for anything but identifier/number
        dfa = AutomatonEngine().dfa(kind)
        out = describe_dfa(dfa)
        out["kind"] = kind
        return out

    @staticmethod
    def trace(kind: str, text: str, offset: int = 0):
        return trace_to_dict(AutomatonEngine().trace(kind, text, offset))

    @staticmethod
    def balance(text: str):
        return {"balanced": AutomatonEngine().check_balanced(text)}
