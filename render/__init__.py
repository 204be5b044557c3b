"""
render — wizualizacja dowodów: drzewo tekstowe, LaTeX (bussproofs), Graphviz DOT.

Węzły wewnętrzne (F+, F-, blur) są ukrywane, chyba że show_internal=True.
"""

from .dot import DotOptions, render_dot
from .latex import render_latex, render_latex_document
from .tree import render_ascii, render_tree, render_unicode

__all__ = [
    "DotOptions",
    "render_ascii",
    "render_dot",
    "render_latex",
    "render_latex_document",
    "render_tree",
    "render_unicode",
]
