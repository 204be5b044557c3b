"""Komenda: lolli viz — renderuje dowód sekwentu (drzewo, LaTeX, DOT)."""

from __future__ import annotations

import argparse

from lolli._common import add_depth_argument, parse_goal, resolve_depth, search, write_output
from render import render_ascii, render_dot, render_latex_document, render_unicode


def run(args: argparse.Namespace) -> None:
    _, goal = parse_goal(args.sequent)
    proof, _ = search(goal, resolve_depth(args), trace_focus=args.show_internal)

    match args.format:
        case "latex":
            text = render_latex_document(proof, show_internal=args.show_internal)
        case "dot":
            text = render_dot(proof, show_internal=args.show_internal)
        case _ if args.ascii:
            text = render_ascii(proof, show_internal=args.show_internal)
        case _:
            text = render_unicode(proof, show_internal=args.show_internal)

    write_output(text, args.output)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "viz",
        help="Renderuje dowód sekwentu: drzewo tekstowe, dokument LaTeX albo graf DOT.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Szuka dowodu i renderuje go:
  tree   — drzewo Gentzena w terminalu (Unicode, albo ASCII z --ascii)
  latex  — kompletny dokument LaTeX (bussproofs + cmll)
  dot    — graf Graphviz (dot -Tsvg proof.dot > proof.svg)

Przykłady:
  lolli viz "A * B |- B * A"
  lolli viz "A -o B, B -o C |- A -o C" --format latex --output dowod.tex
  lolli viz "A & B |- B & A" --format dot | dot -Tpng > dowod.png
        """,
    )
    p.add_argument("sequent", metavar="SEKWENT", help="Sekwent do udowodnienia.")
    add_depth_argument(p)
    p.add_argument(
        "--format", "-f",
        choices=["tree", "latex", "dot"],
        default="tree",
        help="Format wyniku (domyślnie: tree).",
    )
    p.add_argument(
        "--ascii",
        action="store_true",
        help="Drzewo w notacji ASCII (tylko dla --format tree).",
    )
    p.add_argument(
        "--show-internal",
        action="store_true",
        dest="show_internal",
        help="Pokaż węzły focusingu (F+, blur).",
    )
    p.add_argument(
        "--output", "-o",
        metavar="PLIK",
        help="Zapisz wynik do pliku zamiast na stdout.",
    )
    p.set_defaults(func=run)
