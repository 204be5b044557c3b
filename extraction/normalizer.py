"""
extraction/normalizer.py — redukcja termów liniowego rachunku lambda.

step(t):
  - najpierw redeks w korzeniu, potem podtermy od lewej do prawej
  - zwraca None gdy t jest w postaci normalnej

Reguły redukcji:
  (λx. e) v                          → e[v/x]
  let (x, y) = (a, b) in e           → e[a/x, b/y]
  case inl v of inl x ⇒ l | inr y ⇒ r → l[v/x]      (inr: r[v/y])
  fst (a, b) → a                      snd (a, b) → b
  derelict !v                         → v
  copy !v as (x, y) in e              → e[!v/x, !v/y]
  discard !v in e                     → e

Podstawienia są równoczesne i bezkolizyjne (logic.term.substitute_many).
"""

from __future__ import annotations

import logging

from logic.term import (
    Abort,
    Abs,
    App,
    Case,
    Copy,
    Derelict,
    Discard,
    Fst,
    Inl,
    Inr,
    LetPair,
    Pair,
    Promote,
    Snd,
    Term,
    substitute_many,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 10_000


# ---------------------------------------------------------------------------
# Redeksy w korzeniu
# ---------------------------------------------------------------------------

def _head(t: Term) -> Term | None:
    match t:
        case App(Abs(x, body), arg):
            return substitute_many(body, {x: arg})
        case LetPair(x, y, Pair(a, b), body):
            return substitute_many(body, {x: a, y: b})
        case Case(Inl(v), x, left, _, _):
            return substitute_many(left, {x: v})
        case Case(Inr(v), _, _, y, right):
            return substitute_many(right, {y: v})
        case Fst(Pair(a, _)):
            return a
        case Snd(Pair(_, b)):
            return b
        case Derelict(Promote(v)):
            return v
        case Copy(Promote() as promoted, x, y, body):
            return substitute_many(body, {x: promoted, y: promoted})
        case Discard(Promote(), body):
            return body
    return None


# ---------------------------------------------------------------------------
# Krok redukcji
# ---------------------------------------------------------------------------

def step(t: Term) -> Term | None:
    """Jeden krok redukcji albo None (postać normalna)."""
    reduced = _head(t)
    if reduced is not None:
        return reduced

    match t:
        case Abs(x, body):
            body2 = step(body)
            return Abs(x, body2) if body2 is not None else None

        case App(f, a):
            if (f2 := step(f)) is not None:
                return App(f2, a)
            if (a2 := step(a)) is not None:
                return App(f, a2)

        case Pair(a, b):
            if (a2 := step(a)) is not None:
                return Pair(a2, b)
            if (b2 := step(b)) is not None:
                return Pair(a, b2)

        case LetPair(x, y, pair, body):
            if (pair2 := step(pair)) is not None:
                return LetPair(x, y, pair2, body)
            if (body2 := step(body)) is not None:
                return LetPair(x, y, pair, body2)

        case Case(scrut, x, left, y, right):
            if (scrut2 := step(scrut)) is not None:
                return Case(scrut2, x, left, y, right)
            if (left2 := step(left)) is not None:
                return Case(scrut, x, left2, y, right)
            if (right2 := step(right)) is not None:
                return Case(scrut, x, left, y, right2)

        case Copy(src, x, y, body):
            if (src2 := step(src)) is not None:
                return Copy(src2, x, y, body)
            if (body2 := step(body)) is not None:
                return Copy(src, x, y, body2)

        case Discard(d, body):
            if (d2 := step(d)) is not None:
                return Discard(d2, body)
            if (body2 := step(body)) is not None:
                return Discard(d, body2)

        case Inl(e):
            return Inl(e2) if (e2 := step(e)) is not None else None
        case Inr(e):
            return Inr(e2) if (e2 := step(e)) is not None else None
        case Promote(e):
            return Promote(e2) if (e2 := step(e)) is not None else None
        case Derelict(e):
            return Derelict(e2) if (e2 := step(e)) is not None else None
        case Abort(e):
            return Abort(e2) if (e2 := step(e)) is not None else None
        case Fst(e):
            return Fst(e2) if (e2 := step(e)) is not None else None
        case Snd(e):
            return Snd(e2) if (e2 := step(e)) is not None else None

    return None


# ---------------------------------------------------------------------------
# Normalizacja
# ---------------------------------------------------------------------------

def is_normal(t: Term) -> bool:
    return step(t) is None


def normalize(t: Term) -> Term:
    """
    Redukuje do postaci normalnej.

    Termy wyekstrahowane z dowodów są silnie normalizowalne; dla termów
    budowanych ręcznie (np. nieliniowych) użyj normalize_bounded().
    """
    current = t
    steps = 0
    while (reduced := step(current)) is not None:
        current = reduced
        steps += 1
    logger.debug("normalizacja: %d kroków", steps)
    return current


def normalize_bounded(t: Term, max_steps: int) -> Term:
    """Co najwyżej max_steps kroków; max_steps=0 zwraca t bez zmian."""
    current = t
    for _ in range(max_steps):
        reduced = step(current)
        if reduced is None:
            break
        current = reduced
    return current


def reduction_trace(t: Term, max_steps: int) -> list[Term]:
    """
    Sekwencja termów pośrednich, od t do postaci normalnej
    (albo do wyczerpania limitu kroków).
    """
    trace = [t]
    for _ in range(max_steps):
        reduced = step(trace[-1])
        if reduced is None:
            break
        trace.append(reduced)
    return trace
