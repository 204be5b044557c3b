"""Wspólne kroki komend: parsowanie celu, szukanie dowodu, zapis wyniku."""

from __future__ import annotations

import argparse
import pathlib
import sys

from rich.console import Console

from logic.proof import Proof
from logic.sequent import Sequent, TwoSidedSequent
from prover import Prover
from syntax import ParseError, parse_sequent

# komunikaty na stderr, stdout tylko dla wyniku (LaTeX, DOT, JSON)
err_console = Console(stderr=True)

EXIT_ERROR       = 1
EXIT_NOT_PROVABLE = 2


def parse_goal(text: str) -> tuple[TwoSidedSequent, Sequent]:
    """Parsuje sekwent z linii poleceń; przy błędzie kończy z kodem 1."""
    try:
        two_sided = parse_sequent(text)
    except ParseError as e:
        err_console.print(f"[red]Błąd parsowania:[/red] {e}")
        err_console.print(e.caret(), markup=False, highlight=False)
        raise SystemExit(EXIT_ERROR)
    return two_sided, two_sided.to_one_sided()


def search(goal: Sequent, depth: int, trace_focus: bool = False) -> tuple[Proof, Prover]:
    """Szuka dowodu; brak dowodu kończy z kodem 2."""
    prover = Prover(max_depth=depth, trace_focus=trace_focus)
    proof  = prover.prove(goal)
    if proof is None:
        err_console.print(
            f"[red]Brak dowodu[/red] dla {goal.pretty()} "
            f"[dim](głębokość {depth}, {prover.stats.nodes} węzłów przeszukania)[/dim]"
        )
        raise SystemExit(EXIT_NOT_PROVABLE)
    return proof, prover


def write_output(text: str, output: str | None) -> None:
    """Wynik do pliku (--output) albo na stdout, bez znaczników rich."""
    if output:
        path = pathlib.Path(output)
        path.write_text(text + "\n", encoding="utf-8")
        err_console.print(f"[green]Zapisano:[/green] {path}")
        return
    sys.stdout.write(text + "\n")
    sys.stdout.flush()


def add_depth_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--depth", "-d",
        type=int,
        metavar="N",
        help="Limit głębokości przeszukiwania (domyślnie: LOLLI_MAX_DEPTH albo 100).",
    )


def resolve_depth(args: argparse.Namespace) -> int:
    depth = args.depth if args.depth is not None else args.settings.max_depth
    if depth < 0:
        err_console.print(f"[red]Błąd:[/red] --depth musi być >= 0, otrzymano {depth}")
        raise SystemExit(EXIT_ERROR)
    return depth
