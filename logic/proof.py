"""
logic/proof.py — reguły rachunku sekwentów i drzewa dowodów.

Rule  — para (RuleKind, opcjonalna formuła). Formułę niosą tylko Cut
        i znaczniki focusingu (FocusPositive / FocusNegative).
Proof — niemutowalne drzewo: konkluzja, reguła, krotka przesłanek.

Znaczniki FocusPositive, FocusNegative i Blur są wewnętrzne: mają tę samą
postać co reguły logiczne, ale Rule.is_internal pozwala weryfikatorowi
i rendererom traktować je jednolicie, bez porównywania nazw.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Iterator

from .formula import Formula
from .sequent import Sequent


class RuleKind(StrEnum):
    """Rodzaje reguł. Wartości są stabilne — używa ich format JSON dowodów."""

    AXIOM            = "axiom"
    ONE_INTRO        = "one_intro"
    TOP_INTRO        = "top_intro"
    BOTTOM_INTRO     = "bottom_intro"
    TENSOR_INTRO     = "tensor_intro"
    PAR_INTRO        = "par_intro"
    WITH_INTRO       = "with_intro"
    PLUS_INTRO_LEFT  = "plus_intro_left"
    PLUS_INTRO_RIGHT = "plus_intro_right"
    OF_COURSE_INTRO  = "of_course_intro"
    WHY_NOT_INTRO    = "why_not_intro"
    WEAKENING        = "weakening"
    CONTRACTION      = "contraction"
    DERELICTION      = "dereliction"
    CUT              = "cut"

    # znaczniki focusingu
    FOCUS_POSITIVE   = "focus_positive"
    FOCUS_NEGATIVE   = "focus_negative"
    BLUR             = "blur"


# Liczba przesłanek każdej reguły
ARITY: dict[RuleKind, int] = {
    RuleKind.AXIOM:            0,
    RuleKind.ONE_INTRO:        0,
    RuleKind.TOP_INTRO:        0,
    RuleKind.BOTTOM_INTRO:     1,
    RuleKind.TENSOR_INTRO:     2,
    RuleKind.PAR_INTRO:        1,
    RuleKind.WITH_INTRO:       2,
    RuleKind.PLUS_INTRO_LEFT:  1,
    RuleKind.PLUS_INTRO_RIGHT: 1,
    RuleKind.OF_COURSE_INTRO:  1,
    RuleKind.WHY_NOT_INTRO:    1,
    RuleKind.WEAKENING:        1,
    RuleKind.CONTRACTION:      1,
    RuleKind.DERELICTION:      1,
    RuleKind.CUT:              2,
    RuleKind.FOCUS_POSITIVE:   1,
    RuleKind.FOCUS_NEGATIVE:   1,
    RuleKind.BLUR:             1,
}

INTERNAL_KINDS: frozenset[RuleKind] = frozenset({
    RuleKind.FOCUS_POSITIVE,
    RuleKind.FOCUS_NEGATIVE,
    RuleKind.BLUR,
})

_CARRIES_FORMULA: frozenset[RuleKind] = frozenset({
    RuleKind.CUT,
    RuleKind.FOCUS_POSITIVE,
    RuleKind.FOCUS_NEGATIVE,
})

# Krótkie etykiety do renderowania drzew
LABELS: dict[RuleKind, str] = {
    RuleKind.AXIOM:            "ax",
    RuleKind.ONE_INTRO:        "1",
    RuleKind.TOP_INTRO:        "⊤",
    RuleKind.BOTTOM_INTRO:     "⊥",
    RuleKind.TENSOR_INTRO:     "⊗",
    RuleKind.PAR_INTRO:        "⅋",
    RuleKind.WITH_INTRO:       "&",
    RuleKind.PLUS_INTRO_LEFT:  "⊕L",
    RuleKind.PLUS_INTRO_RIGHT: "⊕R",
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


@dataclass(frozen=True, slots=True)
class Rule:
    """Zastosowana reguła. `formula` wymagana dla Cut i znaczników focusu."""
    kind:    RuleKind
    formula: Formula | None = None

    def __post_init__(self) -> None:
        carries = self.kind in _CARRIES_FORMULA
        if carries and self.formula is None:
            raise ValueError(f"Reguła {self.kind} wymaga formuły.")
        if not carries and self.formula is not None:
            raise ValueError(f"Reguła {self.kind} nie przyjmuje formuły.")

    @classmethod
    def cut(cls, formula: Formula) -> Rule:
        return cls(RuleKind.CUT, formula)

    @classmethod
    def focus_positive(cls, formula: Formula) -> Rule:
        return cls(RuleKind.FOCUS_POSITIVE, formula)

    @classmethod
    def focus_negative(cls, formula: Formula) -> Rule:
        return cls(RuleKind.FOCUS_NEGATIVE, formula)

    @property
    def arity(self) -> int:
        return ARITY[self.kind]

    @property
    def is_internal(self) -> bool:
        return self.kind in INTERNAL_KINDS

    @property
    def label(self) -> str:
        return LABELS[self.kind]

    def __str__(self) -> str:
        name = self.kind.name.title().replace("_", "")
        if self.formula is not None:
            return f"{name}({self.formula.pretty()})"
        return name


AXIOM            = Rule(RuleKind.AXIOM)
ONE_INTRO        = Rule(RuleKind.ONE_INTRO)
TOP_INTRO        = Rule(RuleKind.TOP_INTRO)
BOTTOM_INTRO     = Rule(RuleKind.BOTTOM_INTRO)
TENSOR_INTRO     = Rule(RuleKind.TENSOR_INTRO)
PAR_INTRO        = Rule(RuleKind.PAR_INTRO)
WITH_INTRO       = Rule(RuleKind.WITH_INTRO)
PLUS_INTRO_LEFT  = Rule(RuleKind.PLUS_INTRO_LEFT)
PLUS_INTRO_RIGHT = Rule(RuleKind.PLUS_INTRO_RIGHT)
OF_COURSE_INTRO  = Rule(RuleKind.OF_COURSE_INTRO)
WHY_NOT_INTRO    = Rule(RuleKind.WHY_NOT_INTRO)
WEAKENING        = Rule(RuleKind.WEAKENING)
CONTRACTION      = Rule(RuleKind.CONTRACTION)
DERELICTION      = Rule(RuleKind.DERELICTION)
BLUR             = Rule(RuleKind.BLUR)


# ---------------------------------------------------------------------------
# Proof
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Proof:
    """
    Drzewo dowodu. Budowane raz (przez silnik, ręcznie albo z JSON),
    potem tylko czytane — przez weryfikator, ekstraktor i renderery.
    """
    conclusion: Sequent
    rule:       Rule
    premises:   tuple[Proof, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.conclusion, Sequent):
            object.__setattr__(self, "conclusion", Sequent(tuple(self.conclusion)))
        if not isinstance(self.premises, tuple):
            object.__setattr__(self, "premises", tuple(self.premises))

    def walk(self) -> Iterator[Proof]:
        """Przejście pre-order po wszystkich węzłach."""
        stack: list[Proof] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.premises))

    def depth(self, include_internal: bool = False) -> int:
        """Liczba reguł na najdłuższej gałęzi (liść liczy się jako 1)."""
        below = max((p.depth(include_internal) for p in self.premises), default=0)
        if self.rule.is_internal and not include_internal:
            return below
        return below + 1

    def size(self) -> int:
        return sum(1 for _ in self.walk())

    def cut_count(self) -> int:
        return sum(1 for node in self.walk() if node.rule.kind is RuleKind.CUT)

    def is_cut_free(self) -> bool:
        return self.cut_count() == 0

    def rules_used(self) -> Counter[RuleKind]:
        return Counter(node.rule.kind for node in self.walk())

    def strip_internal(self) -> Proof:
        """Usuwa węzły FocusPositive / FocusNegative / Blur (mają jedną przesłankę)."""
        node = self
        while node.rule.is_internal and len(node.premises) == 1:
            node = node.premises[0]
        return Proof(
            conclusion=node.conclusion,
            rule=node.rule,
            premises=tuple(p.strip_internal() for p in node.premises),
        )


def make_proof(
    conclusion: Iterable[Formula] | Sequent,
    rule:       Rule,
    *premises:  Proof,
) -> Proof:
    """Skrót do ręcznego budowania dowodów (testy, przykłady)."""
    seq = conclusion if isinstance(conclusion, Sequent) else Sequent(tuple(conclusion))
    return Proof(conclusion=seq, rule=rule, premises=premises)
