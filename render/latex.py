"""
render/latex.py — dowód jako środowisko prooftree pakietu bussproofs.

Przesłanki emitowane przed konkluzją (bussproofs buduje drzewo na stosie):
liść to pusty \\AxiomC z \\UnaryInfC, reguły z przesłankami to
\\UnaryInfC / \\BinaryInfC.
Symbole \\parr i \\with wymagają pakietu cmll.
"""

from __future__ import annotations

from logic.proof import Proof, RuleKind

PREAMBLE = [
    r"\usepackage{bussproofs}",
    r"\usepackage{amsmath}",
    r"\usepackage{amssymb}",
    r"\usepackage{cmll}",
]

_LATEX_LABELS: dict[RuleKind, str] = {
    RuleKind.AXIOM:            "ax",
    RuleKind.ONE_INTRO:        r"$\mathbf{1}$",
    RuleKind.TOP_INTRO:        r"$\top$",
    RuleKind.BOTTOM_INTRO:     r"$\bot$",
    RuleKind.TENSOR_INTRO:     r"$\otimes$",
    RuleKind.PAR_INTRO:        r"$\parr$",
    RuleKind.WITH_INTRO:       r"$\with$",
    RuleKind.PLUS_INTRO_LEFT:  r"$\oplus_L$",
    RuleKind.PLUS_INTRO_RIGHT: r"$\oplus_R$",
    RuleKind.OF_COURSE_INTRO:  r"$!$",
    RuleKind.WHY_NOT_INTRO:    r"$?$",
    RuleKind.WEAKENING:        r"$?W$",
    RuleKind.CONTRACTION:      r"$?C$",
    RuleKind.DERELICTION:      r"$?D$",
    RuleKind.CUT:              "cut",
    RuleKind.FOCUS_POSITIVE:   "F+",
    RuleKind.FOCUS_NEGATIVE:   "F-",
    RuleKind.BLUR:             "blur",
}

_INFERENCE = {1: "UnaryInfC", 2: "BinaryInfC", 3: "TrinaryInfC"}


def _emit(proof: Proof, lines: list[str]) -> None:
    for premise in proof.premises:
        _emit(premise, lines)

    n = len(proof.premises)
    if n == 0:
        # liść: pusta aksjoma nad kreską, żeby etykieta reguły była widoczna
        lines.append(r"  \AxiomC{}")
        n = 1
    lines.append(rf"  \RightLabel{{\scriptsize {_LATEX_LABELS[proof.rule.kind]}}}")
    lines.append(rf"  \{_INFERENCE[n]}{{${proof.conclusion.pretty_latex()}$}}")


def render_latex(
    proof:            Proof,
    show_internal:    bool = False,
    include_preamble: bool = False,
) -> str:
    if not show_internal:
        proof = proof.strip_internal()
    lines: list[str] = []
    if include_preamble:
        lines.extend(PREAMBLE)
        lines.append("")
    lines.append(r"\begin{prooftree}")
    _emit(proof, lines)
    lines.append(r"\end{prooftree}")
    return "\n".join(lines)


def render_latex_document(proof: Proof, show_internal: bool = False) -> str:
    """Kompletny dokument (article) gotowy do pdflatex."""
    lines = [r"\documentclass{article}", *PREAMBLE, "", r"\begin{document}", ""]
    lines.append(render_latex(proof, show_internal=show_internal))
    lines.extend(["", r"\end{document}"])
    return "\n".join(lines)
