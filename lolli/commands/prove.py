"""Komenda: lolli prove — szuka dowodu sekwentu i wypisuje go."""

from __future__ import annotations

import argparse
import json

from lolli._common import (
    EXIT_ERROR,
    add_depth_argument,
    err_console,
    parse_goal,
    resolve_depth,
    search,
    write_output,
)
from render import render_dot, render_latex, render_unicode
from verifier import ProofError, proof_to_dict, verify_proof


def run(args: argparse.Namespace) -> None:
    two_sided, goal = parse_goal(args.sequent)
    depth = resolve_depth(args)

    proof, prover = search(goal, depth, trace_focus=args.focus)

    # dowód z silnika zawsze przechodzi weryfikację; błąd tutaj to błąd silnika
    try:
        verify_proof(proof)
    except ProofError as e:
        err_console.print(f"[red]Dowód nie przeszedł weryfikacji:[/red] {e}")
        raise SystemExit(EXIT_ERROR)

    err_console.print(
        f"[green]Dowód znaleziony[/green] dla {two_sided.pretty()}  "
        f"[dim]głębokość {proof.depth()}, {proof.size()} węzłów, "
        f"{prover.stats.nodes} węzłów przeszukania[/dim]"
    )

    match args.format:
        case "latex":
            text = render_latex(proof, show_internal=args.focus)
        case "dot":
            text = render_dot(proof, show_internal=args.focus)
        case "json":
            text = json.dumps(proof_to_dict(proof), ensure_ascii=False, indent=2)
        case _:
            text = render_unicode(proof, show_internal=args.focus)

    write_output(text, args.output)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "prove",
        help="Szuka dowodu sekwentu (focused proof search) i wypisuje go.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Szuka dowodu sekwentu w rachunku MALL/MELL (focusing Andreoliego).
Sekwent dwustronny Γ ⊢ Δ jest zamieniany na jednostronny ⊢ Γ⊥, Δ.
Każdy znaleziony dowód jest przed wypisaniem weryfikowany.

Kody wyjścia: 0 — dowód znaleziony, 1 — błąd, 2 — brak dowodu w limicie głębokości.

Przykłady:
  lolli prove "A |- A"
  lolli prove "A, A -o B |- B"
  lolli prove "A * B |- B * A" --format latex
  lolli prove "!A |- !A * !A" --depth 20 --focus
  lolli prove "A & B |- A" --format json --output dowod.json
        """,
    )
    p.add_argument("sequent", metavar="SEKWENT", help='Sekwent, np. "A, A -o B |- B".')
    add_depth_argument(p)
    p.add_argument(
        "--format", "-f",
        choices=["tree", "latex", "dot", "json"],
        default="tree",
        help="Format wyniku (domyślnie: tree).",
    )
    p.add_argument(
        "--focus",
        action="store_true",
        help="Zachowaj w dowodzie węzły focusingu (F+, blur) i pokaż je w wyniku.",
    )
    p.add_argument(
        "--output", "-o",
        metavar="PLIK",
        help="Zapisz wynik do pliku zamiast na stdout.",
    )
    p.set_defaults(func=run)
