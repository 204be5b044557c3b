"""
render/tree.py — drzewo dowodu w stylu Gentzena, jako tekst.

    ------------ ax   ------------ ax
    |- A^, A           |- B^, B
    ------------------------------ *
        |- A^, B^, (A * B)

Przesłanki obok siebie nad kreską, konkluzja wyśrodkowana pod kreską,
etykieta reguły po prawej stronie kreski.
"""

from __future__ import annotations

from logic.proof import Proof, RuleKind

_GAP = "   "

_ASCII_LABELS: dict[RuleKind, str] = {
    RuleKind.AXIOM:            "ax",
    RuleKind.ONE_INTRO:        "1",
    RuleKind.TOP_INTRO:        "top",
    RuleKind.BOTTOM_INTRO:     "bot",
    RuleKind.TENSOR_INTRO:     "*",
    RuleKind.PAR_INTRO:        "|",
    RuleKind.WITH_INTRO:       "&",
    RuleKind.PLUS_INTRO_LEFT:  "+L",
    RuleKind.PLUS_INTRO_RIGHT: "+R",
    RuleKind.OF_COURSE_INTRO:  "!",
    RuleKind.WHY_NOT_INTRO:    "?",
    RuleKind.WEAKENING:        "?W",
    RuleKind.CONTRACTION:      "?C",
    RuleKind.DERELICTION:      "?D",
    RuleKind.CUT:              "cut",
    RuleKind.FOCUS_POSITIVE:   "F+",
    RuleKind.FOCUS_NEGATIVE:   "F-",
    RuleKind.BLUR:             "blur",
}


def _center(text: str, width: int) -> str:
    pad = (width - len(text)) // 2
    return (" " * pad + text).ljust(width)


def _block(proof: Proof, unicode: bool) -> list[str]:
    """Prostokątny blok linii (wszystkie tej samej szerokości)."""
    if unicode:
        conclusion = proof.conclusion.pretty()
        label      = proof.rule.label
        bar_char   = "─"
    else:
        conclusion = proof.conclusion.pretty_ascii()
        label      = _ASCII_LABELS[proof.rule.kind]
        bar_char   = "-"

    blocks = [_block(p, unicode) for p in proof.premises]
    above: list[str] = []
    if blocks:
        height = max(len(b) for b in blocks)
        # wyrównanie do dołu: krótsze bloki dopełniane pustymi liniami od góry
        padded = [[" " * len(b[0])] * (height - len(b)) + b for b in blocks]
        above = [_GAP.join(rows) for rows in zip(*padded)]

    premises_width = len(above[0]) if above else 0
    bar_width      = max(premises_width, len(conclusion))
    width          = bar_width + 1 + len(label)

    lines = [_center(row, bar_width).ljust(width) for row in above]
    lines.append(f"{bar_char * bar_width} {label}")
    lines.append(_center(conclusion, bar_width).ljust(width))
    return lines


def render_tree(proof: Proof, unicode: bool = False, show_internal: bool = False) -> str:
    if not show_internal:
        proof = proof.strip_internal()
    return "\n".join(line.rstrip() for line in _block(proof, unicode))


def render_ascii(proof: Proof, show_internal: bool = False) -> str:
    """Drzewo w notacji ASCII (zgodnej ze składnią parsera)."""
    return render_tree(proof, unicode=False, show_internal=show_internal)


def render_unicode(proof: Proof, show_internal: bool = False) -> str:
    """Drzewo w notacji Unicode (⊗, ⅋, ⊢, …)."""
    return render_tree(proof, unicode=True, show_internal=show_internal)
