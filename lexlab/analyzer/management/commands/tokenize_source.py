from django.core.management.base import BaseCommand, CommandError
from analyzer.backend.automaton_engine.engine import AutomatonEngine
from pathlib import Path


class Command(BaseCommand):
    help = "Tokenize a source file and print the token table (kind, text, line, column)."

    def add_arguments(self, parser):
        parser.add_argument("path", help="Source file to tokenize")
        parser.add_argument(
            "--check-balance",
            action="store_true",
            help="Also report whether brackets are balanced"
        )

    def handle(self, *args, **opts):

        path = Path(opts["path"])
        try:
            # undecodable bytes become U+FFFD and come out as Unknown tokens
            src = path.read_text(encoding="utf8", errors="replace")
        except OSError as e:
            raise CommandError(f"Cannot read {path}: {e}")

        engine = AutomatonEngine()
        tokens = engine.tokenize(src)

        self.stdout.write(f"{'kind':<11} {'text':<20} {'line':>5} {'col':>5}")
        for t in tokens:
            self.stdout.write(f"{t.kind.value:<11} {t.text!r:<20} {t.line:>5} {t.column:>5}")

        self.stdout.write(f"{len(tokens)} tokens.")

        if opts["check_balance"]:
            if engine.check_balanced(src):
                self.stdout.write(self.style.SUCCESS("Brackets: balanced"))
            else:
                self.stdout.write(self.style.WARNING("Brackets: NOT balanced"))
