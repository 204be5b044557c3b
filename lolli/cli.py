"""
lolli — narzędzie CLI workbencha logiki liniowej.

Użycie:
  lolli [--verbose] <komenda> [opcje]

Komendy:
  parse     Parsuje formułę i pokazuje jej postaci (notacje, negacja, polaryzacja).
  prove     Szuka dowodu sekwentu i wypisuje go (drzewo / LaTeX / DOT / JSON).
  extract   Ekstrahuje term z dowodu (Curry–Howard), opcjonalnie normalizuje.
  viz       Renderuje dowód (drzewo / LaTeX / DOT), do pliku albo na stdout.
  verify    Weryfikuje dowód zapisany w JSON.

Zmienne środowiskowe (także z pliku .env):
  LOLLI_MAX_DEPTH   domyślny limit głębokości (100)
  LOLLI_MAX_STEPS   domyślny limit kroków normalizacji (10000)
  LOLLI_LOG_LEVEL   poziom logowania (WARNING)
"""

from __future__ import annotations

import argparse
import sys

# Windows: konsola cp1252 nie wyświetli ⊗ ⅋ ⊢, więc wymuszamy UTF-8
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.console import Console

from lolli._config import load_settings, setup_logging
from lolli.commands import extract as cmd_extract
from lolli.commands import parse as cmd_parse
from lolli.commands import prove as cmd_prove
from lolli.commands import verify as cmd_verify
from lolli.commands import viz as cmd_viz

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lolli",
        description="Lolli — workbench logiki liniowej.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"lolli {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Logowanie na poziomie DEBUG (przebieg przeszukiwania).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_parse.add_parser(subparsers)
    cmd_prove.add_parser(subparsers)
    cmd_extract.add_parser(subparsers)
    cmd_viz.add_parser(subparsers)
    cmd_verify.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.settings = load_settings()
        setup_logging("DEBUG" if args.verbose else args.settings.log_level)
    except ValueError as e:
        Console(stderr=True).print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    args.func(args)


if __name__ == "__main__":
    main()
