from django.core.management.base import BaseCommand, CommandError
from analyzer.backend.automaton_engine.engine import AutomatonEngine, KINDS
from analyzer.backend.automaton_engine.describe import chars_to_label, grouped_edges
from pathlib import Path
import networkx as nx


def dfa_to_graph(dfa) -> nx.DiGraph:
    G = nx.DiGraph()

    for s in range(len(dfa)):
        G.add_node(
            s,
            accept=dfa.is_accept(s),
            start=(s == dfa.start),
            nfa_set=" ".join(str(x) for x in sorted(dfa.nfa_sets[s])),
        )

    # one edge per destination, labeled with every symbol leading there
    for s in range(len(dfa)):
        for to, chars in grouped_edges(dfa, s).items():
            G.add_edge(s, to, label=chars_to_label(chars), symbols=len(chars))

    return G


class Command(BaseCommand):
    help = "Export DFAs as GraphML graphs after checking every state is reachable."

    def add_arguments(self, parser):
        parser.add_argument("--kind", choices=list(KINDS) + ["all"], default="all")
        parser.add_argument("--out-dir", default="test")

    def handle(self, *args, **opts):

        out_dir = Path(opts["out_dir"])
        out_dir.mkdir(parents=True, exist_ok=True)
        kinds = KINDS if opts["kind"] == "all" else (opts["kind"],)

        engine = AutomatonEngine()

        for kind in kinds:
            dfa = engine.dfa(kind)

            self.stdout.write(self.style.SUCCESS(f"Building {kind} graph..."))
            G = dfa_to_graph(dfa)
            self.stdout.write(
                self.style.SUCCESS(
                    f"Graph built: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges"
                )
            )

            reachable = nx.descendants(G, dfa.start) | {dfa.start}
            unreachable = set(G.nodes()) - reachable
            if unreachable:
                raise CommandError(f"{kind} DFA has unreachable states: {sorted(unreachable)}")

            out_path = out_dir / f"{kind}_dfa.graphml"
            nx.write_graphml(G, out_path)
            self.stdout.write(f"{kind} graph written to {out_path}")

        self.stdout.write(self.style.SUCCESS("Graphs exported!"))
