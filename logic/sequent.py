"""
logic/sequent.py — sekwenty jedno- i dwustronne.

Sequent          ⊢ Γ        uporządkowana krotka formuł (kontekst liniowy)
TwoSidedSequent  Γ ⊢ Δ      antecedent + succedent

Konwersja Γ ⊢ Δ  →  ⊢ Γ⊥, Δ  (najpierw zanegowany antecedent, potem succedent).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator

from .formula import Formula, desugar, negate


def _as_tuple(formulas: Iterable[Formula]) -> tuple[Formula, ...]:
    return formulas if isinstance(formulas, tuple) else tuple(formulas)


@dataclass(frozen=True, slots=True)
class Sequent:
    """
    Sekwent jednostronny ⊢ Γ.

    Każde wystąpienie formuły w `linear` musi zostać zużyte dokładnie raz,
    chyba że reguły wykładnicze pozwalają je skopiować lub odrzucić.
    """
    linear: tuple[Formula, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "linear", _as_tuple(self.linear))

    def __len__(self) -> int:
        return len(self.linear)

    def __iter__(self) -> Iterator[Formula]:
        return iter(self.linear)

    def __getitem__(self, index: int) -> Formula:
        return self.linear[index]

    def __str__(self) -> str:
        return self.pretty()

    def desugar(self) -> Sequent:
        return Sequent(tuple(desugar(f) for f in self.linear))

    def multiset(self) -> Counter[Formula]:
        return Counter(self.linear)

    def same_multiset(self, other: Sequent | Iterable[Formula]) -> bool:
        """Porównanie jako multizbiory (kolejność formuł nie ma znaczenia)."""
        others = other.linear if isinstance(other, Sequent) else other
        return Counter(self.linear) == Counter(others)

    def pretty(self) -> str:
        return "⊢ " + ", ".join(f.pretty() for f in self.linear)

    def pretty_ascii(self) -> str:
        return "|- " + ", ".join(f.pretty_ascii() for f in self.linear)

    def pretty_latex(self) -> str:
        return r"\vdash " + ", ".join(f.pretty_latex() for f in self.linear)


@dataclass(frozen=True, slots=True)
class TwoSidedSequent:
    """Sekwent dwustronny Γ ⊢ Δ."""
    antecedent: tuple[Formula, ...] = ()
    succedent:  tuple[Formula, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "antecedent", _as_tuple(self.antecedent))
        object.__setattr__(self, "succedent", _as_tuple(self.succedent))

    def __str__(self) -> str:
        return self.pretty()

    def to_one_sided(self) -> Sequent:
        return Sequent(tuple(negate(f) for f in self.antecedent) + self.succedent)

    def pretty(self) -> str:
        left  = ", ".join(f.pretty() for f in self.antecedent)
        right = ", ".join(f.pretty() for f in self.succedent)
        return f"{left} ⊢ {right}".strip()

    def pretty_ascii(self) -> str:
        left  = ", ".join(f.pretty_ascii() for f in self.antecedent)
        right = ", ".join(f.pretty_ascii() for f in self.succedent)
        return f"{left} |- {right}".strip()
