"""
syntax — tekstowa składnia formuł i sekwentów.

  parse_formula("A -o B")       → Lolli(Atom("A"), Atom("B"))
  parse_sequent("A |- A")       → TwoSidedSequent((A,), (A,))
"""

from .parser import ParseError, Token, parse_formula, parse_sequent, tokenize

__all__ = ["ParseError", "Token", "parse_formula", "parse_sequent", "tokenize"]
