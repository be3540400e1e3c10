from django.core.management.base import BaseCommand
from analyzer.backend.automaton_engine.engine import AutomatonEngine, KINDS
from analyzer.backend.automaton_engine.describe import chars_to_label, symbol_classes
from pathlib import Path
import pandas as pd


def transition_table(dfa) -> pd.DataFrame:
    classes = symbol_classes(dfa)
    rows = []
    for s in range(len(dfa)):
        row = {
            "state": s,
            "accepting": 1 if dfa.is_accept(s) else 0,
            "nfa_set": " ".join(str(x) for x in sorted(dfa.nfa_sets[s])),
        }
        for group in classes:
            to = dfa.next(s, group[0])
            row[chars_to_label(group)] = "" if to is None else to
        rows.append(row)
    columns = ["state", "accepting", "nfa_set"] + [chars_to_label(g) for g in classes]
    return pd.DataFrame(rows, columns=columns)


class Command(BaseCommand):
    help = "Export DFA transition tables (one CSV per automaton)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--kind",
            choices=list(KINDS) + ["all"],
            default="all",
            help="Which automaton to export (default: all)"
        )
        parser.add_argument(
            "--out-dir",
            default="test",
            help="Output directory (default: test)"
        )

    def handle(self, *args, **opts):

        out_dir = Path(opts["out_dir"])
        out_dir.mkdir(parents=True, exist_ok=True)
        kinds = KINDS if opts["kind"] == "all" else (opts["kind"],)

        engine = AutomatonEngine()

        for kind in kinds:
            dfa = engine.dfa(kind)
            out_path = out_dir / f"{kind}_dfa.csv"
            self.stdout.write(f"Exporting {kind} DFA to {out_path} ...")

            df = transition_table(dfa)
            df.to_csv(out_path, index=False, encoding="utf8")

            self.stdout.write(f"Done. Exported {len(df)} states to {out_path}.")

        self.stdout.write(self.style.SUCCESS("Transition tables exported!"))
