"""
logic/term.py — termy liniowego rachunku lambda (strona obliczeniowa Curry–Howarda).

Warianty:
  Var(name)                         x
  Abs(param, body)                  λx. e
  App(func, arg)                    e₁ e₂
  Unit                              ()            ↔ 1
  Trivial                           ⟨⟩            ↔ ⊤
  Pair(first, second)               (a, b)        ↔ ⊗ oraz & (para leniwa)
  LetPair(left, right, pair, body)  let (x, y) = p in e
  Inl(value), Inr(value)            inl a / inr b ↔ ⊕
  Case(scrutinee, left_name, left, right_name, right)
  Promote(value)                    !a            ↔ !
  Derelict(value)                   derelict a
  Copy(source, first, second, body) copy s as (x, y) in e
  Discard(discarded, body)          discard d in e
  Abort(value)                      abort a       ↔ 0
  Fst(pair), Snd(pair)              projekcje pary leniwej

Podstawienie jest bezkolizyjne (capture-avoiding) i równoczesne.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


class Term:
    __slots__ = ()

    def free_vars(self) -> frozenset[str]:
        return free_vars(self)

    def substitute(self, name: str, value: Term) -> Term:
        return substitute_many(self, {name: value})

    def pretty(self) -> str:
        return pretty(self)

    def size(self) -> int:
        return size(self)

    def __str__(self) -> str:
        return pretty(self)


@dataclass(frozen=True, slots=True)
class Var(Term):
    name: str


@dataclass(frozen=True, slots=True)
class Abs(Term):
    param: str
    body:  Term


@dataclass(frozen=True, slots=True)
class App(Term):
    func: Term
    arg:  Term


@dataclass(frozen=True, slots=True)
class Unit(Term):
    pass


@dataclass(frozen=True, slots=True)
class Trivial(Term):
    pass


@dataclass(frozen=True, slots=True)
class Pair(Term):
    first:  Term
    second: Term


@dataclass(frozen=True, slots=True)
class LetPair(Term):
    left:  str
    right: str
    pair:  Term
    body:  Term


@dataclass(frozen=True, slots=True)
class Inl(Term):
    value: Term


@dataclass(frozen=True, slots=True)
class Inr(Term):
    value: Term


@dataclass(frozen=True, slots=True)
class Case(Term):
    scrutinee:  Term
    left_name:  str
    left:       Term
    right_name: str
    right:      Term


@dataclass(frozen=True, slots=True)
class Promote(Term):
    value: Term


@dataclass(frozen=True, slots=True)
class Derelict(Term):
    value: Term


@dataclass(frozen=True, slots=True)
class Copy(Term):
    source: Term
    first:  str
    second: str
    body:   Term


@dataclass(frozen=True, slots=True)
class Discard(Term):
    discarded: Term
    body:      Term


@dataclass(frozen=True, slots=True)
class Abort(Term):
    value: Term


@dataclass(frozen=True, slots=True)
class Fst(Term):
    pair: Term


@dataclass(frozen=True, slots=True)
class Snd(Term):
    pair: Term


# ---------------------------------------------------------------------------
# Zmienne wolne
# ---------------------------------------------------------------------------

def free_vars(t: Term) -> frozenset[str]:
    match t:
        case Var(name):
            return frozenset({name})
        case Abs(x, body):
            return free_vars(body) - {x}
        case App(a, b) | Pair(a, b) | Discard(a, b):
            return free_vars(a) | free_vars(b)
        case LetPair(x, y, pair, body):
            return free_vars(pair) | (free_vars(body) - {x, y})
        case Copy(src, x, y, body):
            return free_vars(src) | (free_vars(body) - {x, y})
        case Case(scrut, x, left, y, right):
            return free_vars(scrut) | (free_vars(left) - {x}) | (free_vars(right) - {y})
        case Inl(e) | Inr(e) | Promote(e) | Derelict(e) | Abort(e) | Fst(e) | Snd(e):
            return free_vars(e)
    return frozenset()


# ---------------------------------------------------------------------------
# Podstawienie
# ---------------------------------------------------------------------------

def _fresh(base: str, avoid: frozenset[str] | set[str]) -> str:
    candidate = base + "'"
    while candidate in avoid:
        candidate += "'"
    return candidate


def _enter(
    binders: tuple[str, ...],
    body:    Term,
    mapping: Mapping[str, Term],
) -> tuple[tuple[str, ...], Term, dict[str, Term]]:
    """
    Przygotowuje wejście pod wiązanie: usuwa przesłonięte nazwy z mapowania
    i przemianowuje wiązane zmienne, które zostałyby przechwycone.
    """
    inner = {k: v for k, v in mapping.items() if k not in binders}
    if not inner:
        return binders, body, inner

    incoming: set[str] = set()
    for value in inner.values():
        incoming |= free_vars(value)

    avoid = set(incoming) | set(inner) | free_vars(body) | set(binders)
    renamed: list[str] = []
    renaming: dict[str, Term] = {}
    for b in binders:
        if b in incoming:
            fresh = _fresh(b, avoid)
            avoid.add(fresh)
            renaming[b] = Var(fresh)
            renamed.append(fresh)
        else:
            renamed.append(b)
    if renaming:
        body = substitute_many(body, renaming)
    return tuple(renamed), body, inner


def substitute_many(t: Term, mapping: Mapping[str, Term]) -> Term:
    """Równoczesne podstawienie t[v₁/x₁, …, vₙ/xₙ] bez przechwytywania zmiennych."""
    if not mapping:
        return t
    match t:
        case Var(name):
            return mapping.get(name, t)
        case Abs(x, body):
            (x,), body, inner = _enter((x,), body, mapping)
            return Abs(x, substitute_many(body, inner))
        case App(f, a):
            return App(substitute_many(f, mapping), substitute_many(a, mapping))
        case Pair(a, b):
            return Pair(substitute_many(a, mapping), substitute_many(b, mapping))
        case LetPair(x, y, pair, body):
            (x, y), body, inner = _enter((x, y), body, mapping)
            return LetPair(x, y, substitute_many(pair, mapping), substitute_many(body, inner))
        case Inl(e):
            return Inl(substitute_many(e, mapping))
        case Inr(e):
            return Inr(substitute_many(e, mapping))
        case Case(scrut, x, left, y, right):
            (x,), left, left_map = _enter((x,), left, mapping)
            (y,), right, right_map = _enter((y,), right, mapping)
            return Case(
                substitute_many(scrut, mapping),
                x, substitute_many(left, left_map),
                y, substitute_many(right, right_map),
            )
        case Promote(e):
            return Promote(substitute_many(e, mapping))
        case Derelict(e):
            return Derelict(substitute_many(e, mapping))
        case Copy(src, x, y, body):
            (x, y), body, inner = _enter((x, y), body, mapping)
            return Copy(substitute_many(src, mapping), x, y, substitute_many(body, inner))
        case Discard(d, body):
            return Discard(substitute_many(d, mapping), substitute_many(body, mapping))
        case Abort(e):
            return Abort(substitute_many(e, mapping))
        case Fst(e):
            return Fst(substitute_many(e, mapping))
        case Snd(e):
            return Snd(substitute_many(e, mapping))
    return t


# ---------------------------------------------------------------------------
# Rozmiar i wydruk
# ---------------------------------------------------------------------------

def size(t: Term) -> int:
    match t:
        case Abs(_, body):
            return 1 + size(body)
        case App(a, b) | Pair(a, b) | Discard(a, b):
            return 1 + size(a) + size(b)
        case LetPair(_, _, pair, body):
            return 1 + size(pair) + size(body)
        case Copy(src, _, _, body):
            return 1 + size(src) + size(body)
        case Case(scrut, _, left, _, right):
            return 1 + size(scrut) + size(left) + size(right)
        case Inl(e) | Inr(e) | Promote(e) | Derelict(e) | Abort(e) | Fst(e) | Snd(e):
            return 1 + size(e)
    return 1


def _atomic(t: Term) -> str:
    s = pretty(t)
    if isinstance(t, (Var, Unit, Trivial, Pair, Promote)):
        return s
    return f"({s})"


def pretty(t: Term) -> str:
    match t:
        case Var(name):
            return name
        case Abs(x, body):
            return f"λ{x}. {pretty(body)}"
        case App(f, a):
            head = pretty(f) if isinstance(f, (Var, App)) else _atomic(f)
            return f"{head} {_atomic(a)}"
        case Unit():
            return "()"
        case Trivial():
            return "⟨⟩"
        case Pair(a, b):
            return f"({pretty(a)}, {pretty(b)})"
        case LetPair(x, y, pair, body):
            return f"let ({x}, {y}) = {pretty(pair)} in {pretty(body)}"
        case Inl(e):
            return f"inl {_atomic(e)}"
        case Inr(e):
            return f"inr {_atomic(e)}"
        case Case(scrut, x, left, y, right):
            return (
                f"case {pretty(scrut)} of "
                f"inl {x} ⇒ {pretty(left)} | inr {y} ⇒ {pretty(right)}"
            )
        case Promote(e):
            return f"!{_atomic(e)}"
        case Derelict(e):
            return f"derelict {_atomic(e)}"
        case Copy(src, x, y, body):
            return f"copy {pretty(src)} as ({x}, {y}) in {pretty(body)}"
        case Discard(d, body):
            return f"discard {pretty(d)} in {pretty(body)}"
        case Abort(e):
            return f"abort {_atomic(e)}"
        case Fst(e):
            return f"fst {_atomic(e)}"
        case Snd(e):
            return f"snd {_atomic(e)}"
    raise TypeError(f"Nieznany wariant termu: {t!r}")
