from io import StringIO

import networkx as nx
import pandas as pd
import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


def test_export_dfa_csv(tmp_path):
    out = StringIO()
    call_command("export_dfa_csv", "--out-dir", str(tmp_path), stdout=out)

    ident = pd.read_csv(tmp_path / "identifier_dfa.csv", dtype=str, keep_default_na=False)
    assert list(ident.columns) == ["state", "accepting", "nfa_set", "0-9", "A-Z,_,a-z"]
    assert list(ident["accepting"]) == ["0", "1", "1"]
    assert list(ident["A-Z,_,a-z"]) == ["1", "2", "2"]
    assert list(ident["0-9"]) == ["", "2", "2"]

    assert (tmp_path / "number_dfa.csv").exists()
    assert "Transition tables exported" in out.getvalue()


def test_export_single_kind(tmp_path):
    call_command("export_dfa_csv", "--kind", "number", "--out-dir", str(tmp_path), stdout=StringIO())
    assert (tmp_path / "number_dfa.csv").exists()
    assert not (tmp_path / "identifier_dfa.csv").exists()


def test_export_dfa_graph(tmp_path):
    call_command("export_dfa_graph", "--kind", "number", "--out-dir", str(tmp_path), stdout=StringIO())
    G = nx.read_graphml(tmp_path / "number_dfa.graphml")
    assert G.number_of_nodes() == 4
    assert G.number_of_edges() == 5
    assert G.edges["1", "2"]["label"] == "."


def test_tokenize_source(tmp_path):
    src = tmp_path / "prog.c"
    src.write_text("while (i < 10) { i = i + 1; }\n", encoding="utf8")
    out = StringIO()
    call_command("tokenize_source", str(src), "--check-balance", stdout=out)
    text = out.getvalue()
    assert "Keyword" in text
    assert "14 tokens." in text
    assert "balanced" in text


def test_tokenize_source_missing_file(tmp_path):
    with pytest.raises(CommandError):
        call_command("tokenize_source", str(tmp_path / "nope.c"), stdout=StringIO())


def test_tokenize_source_undecodable_bytes(tmp_path):
    src = tmp_path / "latin1.c"
    src.write_bytes(b"int caf\xe9 = 1;\n")
    out = StringIO()
    call_command("tokenize_source", str(src), stdout=out)
    text = out.getvalue()
    assert "'caf'" in text
    assert "Unknown" in text
    assert "6 tokens." in text
