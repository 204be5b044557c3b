"""Komenda: lolli verify — weryfikuje dowód zapisany w pliku JSON."""

from __future__ import annotations

import argparse
import pathlib

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from logic.proof import Proof
from verifier import (
    ProofFormatError,
    VerificationReport,
    check_proof,
    load_proof_json,
)

console = Console()


def _failure_table(proof: Proof, report: VerificationReport) -> Table:
    """Ścieżka od korzenia do węzła z pierwotnym błędem."""
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("POZIOM", style="dim", no_wrap=True)
    table.add_column("PRZESŁANKA", no_wrap=True)
    table.add_column("REGUŁA", style="bold cyan", no_wrap=True)
    table.add_column("KONKLUZJA", no_wrap=False)

    node = proof
    table.add_row("0", "—", Text(str(node.rule)), Text(node.conclusion.pretty()))
    for level, index in enumerate(report.path, start=1):
        node = node.premises[index]
        table.add_row(str(level), str(index), Text(str(node.rule)), Text(node.conclusion.pretty()))
    return table


def run(args: argparse.Namespace) -> None:
    path = pathlib.Path(args.file)
    if not path.exists():
        console.print(f"[red]Brak pliku dowodu:[/red] {path}")
        raise SystemExit(1)

    try:
        proof = load_proof_json(path)
    except ProofFormatError as e:
        console.print(f"[red]Niepoprawny format dowodu:[/red] {e}")
        raise SystemExit(1)

    report = check_proof(proof)
    if report.is_valid:
        console.print(
            f"[green]POPRAWNY[/green]  {proof.conclusion.pretty()}  "
            f"[dim]({report.nodes} węzłów, głębokość {proof.depth()}, "
            f"cięcia: {proof.cut_count()})[/dim]"
        )
        return

    cause = report.root_cause
    assert cause is not None
    console.print(f"[red]NIEPOPRAWNY[/red]  [bold]{cause.code}[/bold]")
    console.print(Text(str(cause)))
    console.print(_failure_table(proof, report))
    raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "verify",
        help="Weryfikuje dowód zapisany w JSON (np. wynik 'lolli prove --format json').",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje dowód z pliku JSON, sprawdza go schematem JSON, a następnie
niezależnie weryfikuje każdą regułę. Przy błędzie wypisuje kod błędu
i ścieżkę od korzenia do węzła, w którym reguła została złamana.

Format pliku JSON:
  {
    "format":  "lolli-proof",
    "version": 1,
    "proof": {
      "conclusion": [{"kind": "neg_atom", "name": "A"}, {"kind": "atom", "name": "A"}],
      "rule":       {"kind": "axiom"},
      "premises":   []
    }
  }

Przykłady:
  lolli prove "A * B |- B * A" --format json --output dowod.json
  lolli verify dowod.json
        """,
    )
    p.add_argument("file", metavar="PLIK", help="Plik JSON z dowodem.")
    p.set_defaults(func=run)
