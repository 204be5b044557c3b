"""
render/dot.py — dowód jako graf Graphviz (digraph).

Jeden węzeł na wnioskowanie, krawędź od przesłanki do konkluzji,
rankdir=BT (konkluzja na dole, jak w drzewie Gentzena).

    lolli viz "A -o A" --format dot | dot -Tsvg > proof.svg
"""

from __future__ import annotations

from dataclasses import dataclass

from logic.proof import Proof


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


@dataclass(slots=True)
class DotOptions:
    rankdir:    str  = "BT"
    shape:      str  = "box"
    font:       str  = "Helvetica"
    show_rules: bool = True


def _emit(proof: Proof, opts: DotOptions, lines: list[str], counter: list[int]) -> str:
    node_id = f"n{counter[0]}"
    counter[0] += 1

    label = _escape(proof.conclusion.pretty())
    if opts.show_rules:
        # \n w etykiecie to łamanie linii Graphviz, nie znak nowej linii
        label += f"\\n({_escape(str(proof.rule))})"
    lines.append(f'  {node_id} [label="{label}"];')

    for premise in proof.premises:
        child_id = _emit(premise, opts, lines, counter)
        lines.append(f"  {child_id} -> {node_id};")
    return node_id


def render_dot(
    proof:         Proof,
    show_internal: bool = False,
    options:       DotOptions | None = None,
) -> str:
    opts = options or DotOptions()
    if not show_internal:
        proof = proof.strip_internal()

    lines = [
        "digraph proof {",
        f"  rankdir={opts.rankdir};",
        f'  node [shape={opts.shape}, fontname="{opts.font}"];',
        "  edge [arrowhead=none];",
        "",
    ]
    _emit(proof, opts, lines, [0])
    lines.append("}")
    return "\n".join(lines)
