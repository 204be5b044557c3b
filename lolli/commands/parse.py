"""Komenda: lolli parse — parsuje formułę i pokazuje jej postaci."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from logic.formula import Formula
from syntax import ParseError, parse_formula

console = Console()


def _notation(f: Formula, args: argparse.Namespace) -> str:
    if args.latex:
        return f.pretty_latex()
    if args.ascii:
        return f.pretty_ascii()
    return f.pretty()


def run(args: argparse.Namespace) -> None:
    try:
        formula = parse_formula(args.formula)
    except ParseError as e:
        console.print(f"[red]Błąd parsowania:[/red] {e}")
        console.print(e.caret(), markup=False, highlight=False)
        raise SystemExit(1)

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("POLE", style="bold cyan", no_wrap=True)
    table.add_column("WARTOŚĆ", no_wrap=False)

    desugared = formula.desugar()
    table.add_row("formuła",     Text(_notation(formula, args)))
    table.add_row("bez ⊸",       Text(_notation(desugared, args)))
    table.add_row("negacja",     Text(_notation(formula.negate(), args)))
    table.add_row("polaryzacja", "pozytywna" if formula.is_positive() else "negatywna")
    table.add_row("rozmiar",     str(formula.size()))
    table.add_row("atomy",       ", ".join(sorted(formula.atoms())) or "—")

    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje formułę i pokazuje jej postaci (notacje, negacja, polaryzacja).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje formułę logiki liniowej i wypisuje: formułę, postać bez ⊸,
negację liniową, polaryzację, rozmiar i zbiór atomów.

Składnia (od najluźniejszego wiązania):
  A -o B    A ⊸ B     implikacja liniowa (prawostronnie łączna)
  A | B     A ⅋ B     par
  A * B     A ⊗ B     tensor
  A + B     A ⊕ B     plus
  A & B               with
  !A  ?A              wykładniki
  A^  A⊥              negacja
  1 one, bot ⊥, top ⊤, 0 zero

Przykłady:
  lolli parse "A -o B"
  lolli parse "!(A & B) -o !A * !B" --latex
        """,
    )
    p.add_argument("formula", metavar="FORMUŁA", help="Formuła do sparsowania.")
    notation = p.add_mutually_exclusive_group()
    notation.add_argument("--ascii", action="store_true", help="Wypisz w notacji ASCII.")
    notation.add_argument("--latex", action="store_true", help="Wypisz w notacji LaTeX.")
    p.set_defaults(func=run)
