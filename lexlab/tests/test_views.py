import pytest
from django.urls import reverse


def test_analyze_api(client):
    resp = client.get(reverse("api-analyze"), {"q": "int x = 42;"})
    assert resp.status_code == 200
    data = resp.json()
    assert [t["kind"] for t in data["tokens"]] == [
        "Keyword", "Identifier", "Operator", "Number", "Delimiter",
    ]
    assert data["tokens"][3] == {"kind": "Number", "text": "42", "line": 1, "column": 9}
    assert data["balanced"] is True
    assert data["trace"]["kind"] == "identifier"
    assert data["trace"]["length"] == 3
    assert "elapsed_ms" in data


def test_analyze_api_empty(client):
    data = client.get(reverse("api-analyze")).json()
    assert data["tokens"] == []
    assert data["trace"] is None


def test_automaton_api(client):
    resp = client.get(reverse("api-automaton", args=["identifier"]))
    assert resp.status_code == 200
    data = resp.json()
    assert data["kind"] == "identifier"
    assert data["accepts"] == [1, 2]
    assert len(data["states"]) == 3


def test_automaton_api_unknown_kind(client):
    resp = client.get(reverse("api-automaton", args=["string"]))
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_trace_api(client):
    resp = client.get(reverse("api-trace"), {"kind": "number", "q": "3.14.15"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["length"] == 4
    assert data["path"] == [0, 1, 2, 3, 3]


@pytest.mark.parametrize("offset", ["abc", "-1"])
def test_trace_api_bad_offset(client, offset):
    resp = client.get(reverse("api-trace"), {"q": "x", "offset": offset})
    assert resp.status_code == 400


def test_trace_api_unknown_kind(client):
    resp = client.get(reverse("api-trace"), {"kind": "float", "q": "1"})
    assert resp.status_code == 404


def test_balance_api(client):
    assert client.get(reverse("api-balance"), {"q": "(a[b]{c})"}).json()["balanced"] is True
    assert client.get(reverse("api-balance"), {"q": "(a[b)]"}).json()["balanced"] is False


def test_post_not_allowed(client):
    assert client.post(reverse("api-balance"), {"q": "()"}).status_code == 405
