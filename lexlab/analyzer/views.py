import logging
import time

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from analyzer.backend.analysis_service import AnalysisService
from analyzer.backend.automaton_engine.engine import UnknownAutomatonError

logger = logging.getLogger(__name__)


def timed(payload, start):
    payload["elapsed_ms"] = (time.time() - start) * 1000.0
    return JsonResponse(payload)


@require_GET
def analyze_api(request):
    """
    GET /api/analyze?q=...
    Token table, bracket balance and the trace of the first token.
    """
    q = request.GET.get("q", "")
    start = time.time()
    return timed(AnalysisService.analyze(q), start)


@require_GET
def automaton_api(request, kind):
    """GET /api/automaton/<identifier|number>"""
    start = time.time()
    try:
        payload = AnalysisService.automaton(kind)
    except UnknownAutomatonError as e:
        logger.info("automaton request for unknown kind %r", kind)
        return JsonResponse({"error": str(e)}, status=404)
    return timed(payload, start)


@require_GET
def trace_api(request):
    """GET /api/trace?kind=identifier&q=...&offset=0"""
    kind = request.GET.get("kind", "identifier")
    q = request.GET.get("q", "")

    try:
        offset = int(request.GET.get("offset", 0))
    except ValueError:
        return JsonResponse({"error": "offset must be an integer"}, status=400)
    if offset < 0:
        return JsonResponse({"error": "offset must not be negative"}, status=400)

    start = time.time()
    try:
        payload = AnalysisService.trace(kind, q, offset)
    except UnknownAutomatonError as e:
        return JsonResponse({"error": str(e)}, status=404)
    return timed(payload, start)


@require_GET
def balance_api(request):
    """GET /api/balance?q=..."""
    start = time.time()
    return timed(AnalysisService.balance(request.GET.get("q", "")), start)
