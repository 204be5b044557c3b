"""
extraction/extractor.py — ekstrakcja termów z dowodów (Curry–Howard).

Tabela odpowiedniości:

  Axiom            zmienna z otoczenia dla dualnego atomu
                   (brak → Var(nazwa atomu małymi literami))
  OneIntro         ()                 TopIntro         ⟨⟩
  TensorIntro      (a, b)             WithIntro        (a, b)   para leniwa
  PlusIntroLeft    inl a              PlusIntroRight   inr b
  OfCourseIntro    !a                 Dereliction      derelict a
  Weakening        discard () in e    Contraction      copy x as (y, z) in e
  BottomIntro, ParIntro, WhyNotIntro, Focus*, Blur     bez zmian (przesłanka)
  Cut(A)           A = X ⊗ Y  → let (x, y) = p in c[(x, y)/v]
                   A = X ⊕ Y  → case p of inl x ⇒ c[inl x/v] | inr y ⇒ c[inr y/v]
                   inaczej    → (λv. c) p

Ekstrakcja jest totalna: każdy dowód daje term. Dowody bez cięć dają
termy w postaci normalnej.
"""

from __future__ import annotations

import logging

from logic.formula import Atom, Formula, NegAtom, Plus, Tensor
from logic.proof import Proof, RuleKind
from logic.term import (
    Abs,
    App,
    Case,
    Copy,
    Derelict,
    Discard,
    Inl,
    Inr,
    LetPair,
    Pair,
    Promote,
    Term,
    Trivial,
    Unit,
    Var,
)

logger = logging.getLogger(__name__)

# Otoczenie: uporządkowana lista (formuła cięcia, nazwa zmiennej)
Env = list[tuple[Formula, str]]

_PASS_THROUGH: frozenset[RuleKind] = frozenset({
    RuleKind.BOTTOM_INTRO,
    RuleKind.PAR_INTRO,
    RuleKind.WHY_NOT_INTRO,
    RuleKind.FOCUS_POSITIVE,
    RuleKind.FOCUS_NEGATIVE,
    RuleKind.BLUR,
})


class Extractor:
    """
    Ekstraktor termów. Licznik świeżych nazw rośnie monotonicznie przez
    cały czas życia instancji — dwa wywołania extract() na tej samej
    instancji nie powtórzą nazw.
    """

    def __init__(self) -> None:
        self._counter = 0

    # ------------------------------------------------------------------
    # Świeże nazwy
    # ------------------------------------------------------------------

    def fresh_var(self) -> str:
        name = f"x{self._counter}"
        self._counter += 1
        return name

    def var_for_formula(self, formula: Formula) -> str:
        match formula:
            case Atom(name) | NegAtom(name):
                var = f"{name.lower()}{self._counter}"
                self._counter += 1
                return var
        return self.fresh_var()

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def extract(self, proof: Proof) -> Term:
        term = self._extract(proof, [])
        logger.debug("ekstrakcja: %d węzłów dowodu → term rozmiaru %d", proof.size(), term.size())
        return term

    # ------------------------------------------------------------------
    # Rekurencja po drzewie
    # ------------------------------------------------------------------

    def _extract(self, proof: Proof, env: Env) -> Term:
        kind = proof.rule.kind
        premises = proof.premises

        if kind in _PASS_THROUGH:
            return self._extract(premises[0], env) if premises else Unit()

        match kind:
            case RuleKind.AXIOM:
                return self._axiom(proof, env)
            case RuleKind.ONE_INTRO:
                return Unit()
            case RuleKind.TOP_INTRO:
                return Trivial()
            case RuleKind.TENSOR_INTRO | RuleKind.WITH_INTRO:
                if len(premises) != 2:
                    return self._extract(premises[0], env) if premises else Unit()
                return Pair(self._extract(premises[0], env), self._extract(premises[1], env))
            case RuleKind.PLUS_INTRO_LEFT:
                return Inl(self._sub(proof, env))
            case RuleKind.PLUS_INTRO_RIGHT:
                return Inr(self._sub(proof, env))
            case RuleKind.OF_COURSE_INTRO:
                return Promote(self._sub(proof, env))
            case RuleKind.DERELICTION:
                return Derelict(self._sub(proof, env))
            case RuleKind.WEAKENING:
                return Discard(Unit(), self._sub(proof, env))
            case RuleKind.CONTRACTION:
                first, second = self.fresh_var(), self.fresh_var()
                source = Var(self.fresh_var())
                return Copy(source, first, second, self._sub(proof, env))
            case RuleKind.CUT:
                return self._cut(proof, env)
        raise TypeError(f"Nieobsługiwana reguła: {proof.rule}")

    def _sub(self, proof: Proof, env: Env) -> Term:
        return self._extract(proof.premises[0], env) if proof.premises else Unit()

    def _axiom(self, proof: Proof, env: Env) -> Term:
        # ⊢ A⊥, A: szukamy zmiennej dla formuły dualnej, od najbliższego cięcia
        for formula in proof.conclusion:
            match formula:
                case Atom(name):
                    for bound, var in reversed(env):
                        if bound == NegAtom(name):
                            return Var(var)
                    return Var(name.lower())
                case NegAtom(name):
                    for bound, var in reversed(env):
                        if bound == Atom(name):
                            return Var(var)

        var = self.fresh_var()
        return Abs(var, Var(var))

    def _cut(self, proof: Proof, env: Env) -> Term:
        cut = proof.rule.formula
        if cut is None or len(proof.premises) != 2:
            return Unit()

        var      = self.var_for_formula(cut)
        producer = self._extract(proof.premises[0], env)

        env.append((cut, var))
        try:
            consumer = self._extract(proof.premises[1], env)
        finally:
            env.pop()

        match cut:
            case Tensor():
                x, y = self.fresh_var(), self.fresh_var()
                body = consumer.substitute(var, Pair(Var(x), Var(y)))
                return LetPair(x, y, producer, body)
            case Plus():
                x, y = self.fresh_var(), self.fresh_var()
                return Case(
                    producer,
                    x, consumer.substitute(var, Inl(Var(x))),
                    y, consumer.substitute(var, Inr(Var(y))),
                )
        return App(Abs(var, consumer), producer)


def extract_term(proof: Proof) -> Term:
    """Jednorazowa ekstrakcja świeżym Extractorem."""
    return Extractor().extract(proof)
