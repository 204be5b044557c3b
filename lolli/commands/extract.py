"""Komenda: lolli extract — term z dowodu (Curry–Howard) i jego normalizacja."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.text import Text

from extraction import Extractor, is_normal, normalize_bounded, reduction_trace
from lolli._common import EXIT_ERROR, add_depth_argument, parse_goal, resolve_depth, search

console = Console()


def run(args: argparse.Namespace) -> None:
    two_sided, goal = parse_goal(args.sequent)
    proof, _ = search(goal, resolve_depth(args))

    max_steps = args.max_steps if args.max_steps is not None else args.settings.max_steps
    if max_steps < 0:
        console.print(f"[red]Błąd:[/red] --max-steps musi być >= 0, otrzymano {max_steps}")
        raise SystemExit(EXIT_ERROR)

    term = Extractor().extract(proof)
    console.print(Text(f"Sekwent: {two_sided.pretty()}"))
    console.print(Text(f"Term:    {term.pretty()}"))

    if args.trace:
        trace = reduction_trace(term, max_steps)
        console.print(f"\n[bold]Redukcja[/bold] ({len(trace) - 1} kroków):")
        for i, t in enumerate(trace):
            console.print(Text(f"  {i:>3}  {t.pretty()}"))
        term = trace[-1]
    elif args.normalize:
        term = normalize_bounded(term, max_steps)
        console.print(Text(f"Normalny: {term.pretty()}"))

    if (args.trace or args.normalize) and not is_normal(term):
        console.print(f"[yellow]Limit {max_steps} kroków wyczerpany, term nie jest w postaci normalnej.[/yellow]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract",
        help="Ekstrahuje term liniowego rachunku lambda z dowodu sekwentu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Szuka dowodu sekwentu i ekstrahuje z niego term (korespondencja Curry–Howarda):
  ⊗ → para, & → para leniwa, ⊕ → inl/inr, 1 → (), ⊤ → ⟨⟩,
  ! → promocja, derelikcja → derelict, osłabienie → discard, kontrakcja → copy.

Przykłady:
  lolli extract "A |- A"
  lolli extract "A * B |- B * A"
  lolli extract "A & B |- A" --normalize
  lolli extract "!A |- A * A" --trace --max-steps 50
        """,
    )
    p.add_argument("sequent", metavar="SEKWENT", help="Sekwent do udowodnienia.")
    add_depth_argument(p)
    p.add_argument(
        "--normalize", "-n",
        action="store_true",
        help="Znormalizuj wyekstrahowany term.",
    )
    p.add_argument(
        "--max-steps",
        type=int,
        metavar="N",
        dest="max_steps",
        help="Limit kroków normalizacji (domyślnie: LOLLI_MAX_STEPS albo 10000).",
    )
    p.add_argument(
        "--trace",
        action="store_true",
        help="Pokaż każdy krok redukcji (implikuje --normalize).",
    )
    p.set_defaults(func=run)
