"""
logic/formula.py — formuły logiki liniowej (MALL + wykładniki).

Formula to unia tagowana niemutowalnych dataclass:
  atomy:           Atom(name), NegAtom(name)
  multiplikatywne: Tensor(A, B), Par(A, B), One, Bottom
  addytywne:       With(A, B), Plus(A, B), Top, Zero
  wykładniki:      OfCourse(A), WhyNot(A)
  cukier:          Lolli(A, B)  ≡  A⊥ ⅋ B   (zawsze usuwany przed szukaniem)

Operacje:
  negate(f)      — negacja liniowa (dualność De Morgana, inwolucja)
  desugar(f)     — rozwinięcie Lolli
  is_positive(f) — polaryzacja (⊗, 1, ⊕, 0, !, atom)
  pretty(f), pretty_ascii(f), pretty_latex(f) — trzy notacje
"""

from __future__ import annotations

from dataclasses import dataclass


class Formula:
    """Klasa bazowa wszystkich formuł. Wartości są niemutowalne i haszowalne."""

    __slots__ = ()

    def negate(self) -> Formula:
        return negate(self)

    def desugar(self) -> Formula:
        return desugar(self)

    def is_positive(self) -> bool:
        return is_positive(self)

    def is_negative(self) -> bool:
        return not is_positive(self)

    def size(self) -> int:
        return size(self)

    def atoms(self) -> frozenset[str]:
        return atoms(self)

    def pretty(self) -> str:
        return pretty(self)

    def pretty_ascii(self) -> str:
        return pretty_ascii(self)

    def pretty_latex(self) -> str:
        return pretty_latex(self)

    def __str__(self) -> str:
        return pretty(self)


# ---------------------------------------------------------------------------
# Warianty
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Atom(Formula):
    name: str


@dataclass(frozen=True, slots=True)
class NegAtom(Formula):
    name: str


@dataclass(frozen=True, slots=True)
class Tensor(Formula):
    left:  Formula
    right: Formula


@dataclass(frozen=True, slots=True)
class Par(Formula):
    left:  Formula
    right: Formula


@dataclass(frozen=True, slots=True)
class One(Formula):
    pass


@dataclass(frozen=True, slots=True)
class Bottom(Formula):
    pass


@dataclass(frozen=True, slots=True)
class With(Formula):
    left:  Formula
    right: Formula


@dataclass(frozen=True, slots=True)
class Plus(Formula):
    left:  Formula
    right: Formula


@dataclass(frozen=True, slots=True)
class Top(Formula):
    pass


@dataclass(frozen=True, slots=True)
class Zero(Formula):
    pass


@dataclass(frozen=True, slots=True)
class OfCourse(Formula):
    body: Formula


@dataclass(frozen=True, slots=True)
class WhyNot(Formula):
    body: Formula


@dataclass(frozen=True, slots=True)
class Lolli(Formula):
    left:  Formula
    right: Formula


# ---------------------------------------------------------------------------
# Konstruktory pomocnicze
# ---------------------------------------------------------------------------

def atom(name: str) -> Atom:
    return Atom(name)


def neg_atom(name: str) -> NegAtom:
    return NegAtom(name)


def tensor(a: Formula, b: Formula) -> Tensor:
    return Tensor(a, b)


def par(a: Formula, b: Formula) -> Par:
    return Par(a, b)


def with_(a: Formula, b: Formula) -> With:
    return With(a, b)


def plus(a: Formula, b: Formula) -> Plus:
    return Plus(a, b)


def lolli(a: Formula, b: Formula) -> Lolli:
    return Lolli(a, b)


def of_course(a: Formula) -> OfCourse:
    return OfCourse(a)


def why_not(a: Formula) -> WhyNot:
    return WhyNot(a)


# ---------------------------------------------------------------------------
# Negacja i cukier składniowy
# ---------------------------------------------------------------------------

def negate(f: Formula) -> Formula:
    """
    Negacja liniowa. Inwolucyjna dla wszystkich spójników pierwotnych.

    Tabela De Morgana:
      (A ⊗ B)⊥ = A⊥ ⅋ B⊥      (A & B)⊥ = A⊥ ⊕ B⊥      1⊥ = ⊥     ⊤⊥ = 0
      (A ⅋ B)⊥ = A⊥ ⊗ B⊥      (A ⊕ B)⊥ = A⊥ & B⊥      ⊥⊥ = 1     0⊥ = ⊤
      (!A)⊥    = ?(A⊥)        (?A)⊥    = !(A⊥)
      (A ⊸ B)⊥ = A ⊗ B⊥       (wynik nie jest już Lolli)
    """
    match f:
        case Atom(name):
            return NegAtom(name)
        case NegAtom(name):
            return Atom(name)
        case Tensor(a, b):
            return Par(negate(a), negate(b))
        case Par(a, b):
            return Tensor(negate(a), negate(b))
        case One():
            return Bottom()
        case Bottom():
            return One()
        case With(a, b):
            return Plus(negate(a), negate(b))
        case Plus(a, b):
            return With(negate(a), negate(b))
        case Top():
            return Zero()
        case Zero():
            return Top()
        case OfCourse(a):
            return WhyNot(negate(a))
        case WhyNot(a):
            return OfCourse(negate(a))
        case Lolli(a, b):
            return Tensor(a, negate(b))
    raise TypeError(f"Nieznany wariant formuły: {f!r}")


def desugar(f: Formula) -> Formula:
    """Rozwija każde A ⊸ B do A⊥ ⅋ B (rekurencyjnie)."""
    match f:
        case Lolli(a, b):
            return Par(desugar(negate(a)), desugar(b))
        case Tensor(a, b):
            return Tensor(desugar(a), desugar(b))
        case Par(a, b):
            return Par(desugar(a), desugar(b))
        case With(a, b):
            return With(desugar(a), desugar(b))
        case Plus(a, b):
            return Plus(desugar(a), desugar(b))
        case OfCourse(a):
            return OfCourse(desugar(a))
        case WhyNot(a):
            return WhyNot(desugar(a))
    return f


def is_positive(f: Formula) -> bool:
    """Formuły pozytywne: ⊗, 1, ⊕, 0, !, atomy. Pozostałe (także ⊸) są negatywne."""
    return isinstance(f, (Atom, Tensor, One, Plus, Zero, OfCourse))


def is_negative(f: Formula) -> bool:
    return not is_positive(f)


def is_dual_pair(a: Formula, b: Formula) -> bool:
    """True gdy (a, b) to para aksjomatu: atom i jego negacja (w dowolnej kolejności)."""
    match a, b:
        case (Atom(x), NegAtom(y)) | (NegAtom(x), Atom(y)):
            return x == y
    return False


def size(f: Formula) -> int:
    """Liczba spójników i atomów — miara strukturalna malejąca przy dekompozycji."""
    match f:
        case Tensor(a, b) | Par(a, b) | With(a, b) | Plus(a, b) | Lolli(a, b):
            return 1 + size(a) + size(b)
        case OfCourse(a) | WhyNot(a):
            return 1 + size(a)
    return 1


def atoms(f: Formula) -> frozenset[str]:
    match f:
        case Atom(name) | NegAtom(name):
            return frozenset({name})
        case Tensor(a, b) | Par(a, b) | With(a, b) | Plus(a, b) | Lolli(a, b):
            return atoms(a) | atoms(b)
        case OfCourse(a) | WhyNot(a):
            return atoms(a)
    return frozenset()


# ---------------------------------------------------------------------------
# Notacje
# ---------------------------------------------------------------------------

_UNICODE_BINARY: dict[type, str] = {
    Tensor: "⊗", Par: "⅋", Lolli: "⊸", With: "&", Plus: "⊕",
}
_ASCII_BINARY: dict[type, str] = {
    Tensor: "*", Par: "|", Lolli: "-o", With: "&", Plus: "+",
}
_LATEX_BINARY: dict[type, str] = {
    Tensor: r"\otimes", Par: r"\parr", Lolli: r"\multimap", With: r"\with", Plus: r"\oplus",
}


def pretty(f: Formula) -> str:
    match f:
        case Atom(name):
            return name
        case NegAtom(name):
            return f"{name}⊥"
        case Tensor(a, b) | Par(a, b) | Lolli(a, b) | With(a, b) | Plus(a, b):
            return f"({pretty(a)} {_UNICODE_BINARY[type(f)]} {pretty(b)})"
        case OfCourse(a):
            return f"!{pretty(a)}"
        case WhyNot(a):
            return f"?{pretty(a)}"
        case One():
            return "1"
        case Bottom():
            return "⊥"
        case Top():
            return "⊤"
        case Zero():
            return "0"
    raise TypeError(f"Nieznany wariant formuły: {f!r}")


def pretty_ascii(f: Formula) -> str:
    """Notacja ASCII — zgodna ze składnią wejściową parsera."""
    match f:
        case Atom(name):
            return name
        case NegAtom(name):
            return f"{name}^"
        case Tensor(a, b) | Par(a, b) | Lolli(a, b) | With(a, b) | Plus(a, b):
            return f"({pretty_ascii(a)} {_ASCII_BINARY[type(f)]} {pretty_ascii(b)})"
        case OfCourse(a):
            return f"!{pretty_ascii(a)}"
        case WhyNot(a):
            return f"?{pretty_ascii(a)}"
        case One():
            return "1"
        case Bottom():
            return "bot"
        case Top():
            return "top"
        case Zero():
            return "0"
    raise TypeError(f"Nieznany wariant formuły: {f!r}")


def pretty_latex(f: Formula) -> str:
    """Notacja LaTeX (\\parr i \\with wymagają pakietu cmll)."""
    match f:
        case Atom(name):
            return name
        case NegAtom(name):
            return f"{name}^{{\\bot}}"
        case Tensor(a, b) | Par(a, b) | Lolli(a, b) | With(a, b) | Plus(a, b):
            return f"({pretty_latex(a)} {_LATEX_BINARY[type(f)]} {pretty_latex(b)})"
        case OfCourse(a):
            return f"{{!}}{pretty_latex(a)}"
        case WhyNot(a):
            return f"{{?}}{pretty_latex(a)}"
        case One():
            return r"\mathbf{1}"
        case Bottom():
            return r"\bot"
        case Top():
            return r"\top"
        case Zero():
            return r"\mathbf{0}"
    raise TypeError(f"Nieznany wariant formuły: {f!r}")
