"""
logic — typy wartości workbencha logiki liniowej.

Użycie:
  from logic import Formula, Atom, Sequent, Proof, Rule, RuleKind, Term, ...

Moduły:
  formula — Formula i warianty, negate, desugar, polaryzacja, notacje
  sequent — Sequent (⊢ Γ), TwoSidedSequent (Γ ⊢ Δ)
  proof   — RuleKind, Rule, Proof
  term    — termy liniowego rachunku lambda
"""

from .formula import (
    Formula,
    Atom,
    NegAtom,
    Tensor,
    Par,
    One,
    Bottom,
    With,
    Plus,
    Top,
    Zero,
    OfCourse,
    WhyNot,
    Lolli,
    atom,
    neg_atom,
    tensor,
    par,
    with_,
    plus,
    lolli,
    of_course,
    why_not,
    negate,
    desugar,
    is_positive,
    is_negative,
    is_dual_pair,
)
from .sequent import Sequent, TwoSidedSequent
from .proof import (
    ARITY,
    RuleKind,
    Rule,
    Proof,
    make_proof,
    AXIOM,
    ONE_INTRO,
    TOP_INTRO,
    BOTTOM_INTRO,
    TENSOR_INTRO,
    PAR_INTRO,
    WITH_INTRO,
    PLUS_INTRO_LEFT,
    PLUS_INTRO_RIGHT,
    OF_COURSE_INTRO,
    WHY_NOT_INTRO,
    WEAKENING,
    CONTRACTION,
    DERELICTION,
    BLUR,
)
from .term import (
    Term,
    Var,
    Abs,
    App,
    Unit,
    Trivial,
    Pair,
    LetPair,
    Inl,
    Inr,
    Case,
    Promote,
    Derelict,
    Copy,
    Discard,
    Abort,
    Fst,
    Snd,
)

__all__ = [
    # formula
    "Formula", "Atom", "NegAtom", "Tensor", "Par", "One", "Bottom",
    "With", "Plus", "Top", "Zero", "OfCourse", "WhyNot", "Lolli",
    "atom", "neg_atom", "tensor", "par", "with_", "plus", "lolli",
    "of_course", "why_not", "negate", "desugar", "is_positive",
    "is_negative", "is_dual_pair",
    # sequent
    "Sequent", "TwoSidedSequent",
    # proof
    "ARITY", "RuleKind", "Rule", "Proof", "make_proof",
    "AXIOM", "ONE_INTRO", "TOP_INTRO", "BOTTOM_INTRO", "TENSOR_INTRO",
    "PAR_INTRO", "WITH_INTRO", "PLUS_INTRO_LEFT", "PLUS_INTRO_RIGHT",
    "OF_COURSE_INTRO", "WHY_NOT_INTRO", "WEAKENING", "CONTRACTION",
    "DERELICTION", "BLUR",
    # term
    "Term", "Var", "Abs", "App", "Unit", "Trivial", "Pair", "LetPair",
    "Inl", "Inr", "Case", "Promote", "Derelict", "Copy", "Discard",
    "Abort", "Fst", "Snd",
]
