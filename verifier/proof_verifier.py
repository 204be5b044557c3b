"""
verifier/proof_verifier.py — niezależna weryfikacja drzew dowodów.

verify_proof(proof)  -> None   (podnosi ProofError)
check_proof(proof)   -> VerificationReport

Dla każdego węzła:
  1. liczba przesłanek = arność reguły            (WrongPremiseCount)
  2. w konkluzji jest formuła główna właściwej postaci (InvalidRule)
  3. konkluzje przesłanek pasują do konkluzji jako multizbiory,
     dla co najmniej jednego wyboru formuły głównej  (ContextMismatch)
  4. rekurencja w przesłanki; błąd dziecka opakowany w PremiseFailed

Weryfikator nie ufa pochodzeniu dowodu — działa tak samo dla dowodów
z silnika, budowanych ręcznie i wczytanych z JSON.
"""

from __future__ import annotations

from collections import Counter
from typing import Callable

from logic.formula import (
    Bottom,
    Formula,
    OfCourse,
    One,
    Par,
    Plus,
    Tensor,
    Top,
    WhyNot,
    With,
    is_dual_pair,
    is_positive,
    negate,
)
from logic.proof import Proof, RuleKind

from .types import (
    ContextMismatch,
    InvalidRule,
    PremiseFailed,
    ProofError,
    VerificationReport,
    WrongPremiseCount,
)

Bag = Counter[Formula]

# (formuła główna, reszta kontekstu) -> oczekiwane konkluzje przesłanek
Expectation = Callable[[Formula, Bag], "list[Bag] | None"]


# ---------------------------------------------------------------------------
# Multizbiory
# ---------------------------------------------------------------------------

def _plus(bag: Bag, *formulas: Formula) -> Bag:
    out = Counter(bag)
    out.update(formulas)
    return out


def _minus_one(bag: Bag, f: Formula) -> Bag | None:
    """bag \\ {f}, albo None gdy f nie występuje."""
    if bag[f] <= 0:
        return None
    out = Counter(bag)
    out[f] -= 1
    return +out


def _fmt(bag: Bag) -> str:
    return ", ".join(f.pretty() for f in bag.elements()) or "∅"


# ---------------------------------------------------------------------------
# Oczekiwane przesłanki per reguła (formuła główna już wybrana)
# ---------------------------------------------------------------------------

def _expect_bottom(f: Formula, rest: Bag) -> list[Bag] | None:
    return [rest] if isinstance(f, Bottom) else None


def _expect_par(f: Formula, rest: Bag) -> list[Bag] | None:
    if isinstance(f, Par):
        return [_plus(rest, f.left, f.right)]
    return None


def _expect_with(f: Formula, rest: Bag) -> list[Bag] | None:
    if isinstance(f, With):
        return [_plus(rest, f.left), _plus(rest, f.right)]
    return None


def _expect_plus_left(f: Formula, rest: Bag) -> list[Bag] | None:
    return [_plus(rest, f.left)] if isinstance(f, Plus) else None


def _expect_plus_right(f: Formula, rest: Bag) -> list[Bag] | None:
    return [_plus(rest, f.right)] if isinstance(f, Plus) else None


def _expect_of_course(f: Formula, rest: Bag) -> list[Bag] | None:
    if isinstance(f, OfCourse):
        return [_plus(rest, f.body)]
    return None


def _expect_why_not_body(f: Formula, rest: Bag) -> list[Bag] | None:
    return [_plus(rest, f.body)] if isinstance(f, WhyNot) else None


def _expect_weakening(f: Formula, rest: Bag) -> list[Bag] | None:
    return [rest] if isinstance(f, WhyNot) else None


def _expect_contraction(f: Formula, rest: Bag) -> list[Bag] | None:
    return [_plus(rest, f, f)] if isinstance(f, WhyNot) else None


_EXPECTATIONS: dict[RuleKind, Expectation] = {
    RuleKind.BOTTOM_INTRO:     _expect_bottom,
    RuleKind.PAR_INTRO:        _expect_par,
    RuleKind.WITH_INTRO:       _expect_with,
    RuleKind.PLUS_INTRO_LEFT:  _expect_plus_left,
    RuleKind.PLUS_INTRO_RIGHT: _expect_plus_right,
    RuleKind.OF_COURSE_INTRO:  _expect_of_course,
    RuleKind.WHY_NOT_INTRO:    _expect_why_not_body,
    RuleKind.DERELICTION:      _expect_why_not_body,
    RuleKind.WEAKENING:        _expect_weakening,
    RuleKind.CONTRACTION:      _expect_contraction,
}

# Postać formuły głównej (do rozróżnienia InvalidRule od ContextMismatch)
_PRINCIPAL: dict[RuleKind, type | tuple[type, ...]] = {
    RuleKind.BOTTOM_INTRO:     Bottom,
    RuleKind.PAR_INTRO:        Par,
    RuleKind.WITH_INTRO:       With,
    RuleKind.PLUS_INTRO_LEFT:  Plus,
    RuleKind.PLUS_INTRO_RIGHT: Plus,
    RuleKind.OF_COURSE_INTRO:  OfCourse,
    RuleKind.WHY_NOT_INTRO:    WhyNot,
    RuleKind.DERELICTION:      WhyNot,
    RuleKind.WEAKENING:        WhyNot,
    RuleKind.CONTRACTION:      WhyNot,
    RuleKind.TENSOR_INTRO:     Tensor,
}


# ---------------------------------------------------------------------------
# Sprawdzenie pojedynczego węzła
# ---------------------------------------------------------------------------

def _check_arity(proof: Proof) -> None:
    got = len(proof.premises)
    if got != proof.rule.arity:
        raise WrongPremiseCount(proof.rule, proof.rule.arity, got)


def _candidates(proof: Proof) -> list[tuple[Formula, Bag]]:
    """Możliwe formuły główne z resztą kontekstu (bez powtórzeń)."""
    principal = _PRINCIPAL[proof.rule.kind]
    bag = proof.conclusion.multiset()
    out: list[tuple[Formula, Bag]] = []
    for f in bag:
        if isinstance(f, principal):
            rest = _minus_one(bag, f)
            assert rest is not None
            out.append((f, rest))
    if not out:
        raise InvalidRule(proof.rule, proof.conclusion)
    return out


def _check_axiom(proof: Proof) -> None:
    linear = proof.conclusion.linear
    if len(linear) != 2 or not is_dual_pair(linear[0], linear[1]):
        raise InvalidRule(proof.rule, proof.conclusion)


def _check_one(proof: Proof) -> None:
    if proof.conclusion.linear != (One(),):
        raise InvalidRule(proof.rule, proof.conclusion)


def _check_top(proof: Proof) -> None:
    if Top() not in proof.conclusion.linear:
        raise InvalidRule(proof.rule, proof.conclusion)


def _check_tensor(proof: Proof) -> None:
    left_bag  = proof.premises[0].conclusion.multiset()
    right_bag = proof.premises[1].conclusion.multiset()
    for f, rest in _candidates(proof):
        assert isinstance(f, Tensor)
        gamma = _minus_one(left_bag, f.left)
        delta = _minus_one(right_bag, f.right)
        if gamma is not None and delta is not None and gamma + delta == rest:
            return
    raise ContextMismatch(
        f"przesłanki ⊢ {_fmt(left_bag)} i ⊢ {_fmt(right_bag)} nie dzielą "
        f"kontekstu {proof.conclusion.pretty()} dla żadnego ⊗"
    )


def _check_cut(proof: Proof) -> None:
    cut = proof.rule.formula
    assert cut is not None
    left_bag  = proof.premises[0].conclusion.multiset()
    right_bag = proof.premises[1].conclusion.multiset()
    gamma = _minus_one(left_bag, cut)
    delta = _minus_one(right_bag, negate(cut))
    if gamma is None or delta is None:
        raise ContextMismatch(
            f"cięcie na {cut.pretty()}: lewa przesłanka musi zawierać {cut.pretty()}, "
            f"prawa {negate(cut).pretty()}"
        )
    if gamma + delta != proof.conclusion.multiset():
        raise ContextMismatch(
            f"cięcie na {cut.pretty()}: {_fmt(gamma + delta)} ≠ {_fmt(proof.conclusion.multiset())}"
        )


def _check_by_expectation(proof: Proof) -> None:
    expect = _EXPECTATIONS[proof.rule.kind]
    actual = [p.conclusion.multiset() for p in proof.premises]
    candidates = _candidates(proof)

    if proof.rule.kind is RuleKind.OF_COURSE_INTRO:
        candidates = [
            (f, rest) for f, rest in candidates
            if all(isinstance(g, WhyNot) for g in rest)
        ]
        if not candidates:
            raise ContextMismatch(
                f"promocja wymaga kontekstu złożonego wyłącznie z ?-formuł: "
                f"{proof.conclusion.pretty()}"
            )

    for f, rest in candidates:
        expected = expect(f, rest)
        if expected is not None and expected == actual:
            return
    raise ContextMismatch(
        f"reguła {proof.rule}: przesłanki "
        + "; ".join(f"⊢ {_fmt(b)}" for b in actual)
        + f" nie wynikają z {proof.conclusion.pretty()}"
    )


def _check_internal(proof: Proof) -> None:
    """FocusPositive / FocusNegative / Blur: ta sama konkluzja co przesłanka."""
    f = proof.rule.formula
    if f is not None:
        wants_positive = proof.rule.kind is RuleKind.FOCUS_POSITIVE
        if f not in proof.conclusion.linear or is_positive(f) != wants_positive:
            raise InvalidRule(proof.rule, proof.conclusion)
    premise = proof.premises[0].conclusion
    if not proof.conclusion.same_multiset(premise):
        raise ContextMismatch(
            f"znacznik {proof.rule} zmienia sekwent: "
            f"{proof.conclusion.pretty()} → {premise.pretty()}"
        )


_NODE_CHECKS: dict[RuleKind, Callable[[Proof], None]] = {
    RuleKind.AXIOM:          _check_axiom,
    RuleKind.ONE_INTRO:      _check_one,
    RuleKind.TOP_INTRO:      _check_top,
    RuleKind.TENSOR_INTRO:   _check_tensor,
    RuleKind.CUT:            _check_cut,
    RuleKind.FOCUS_POSITIVE: _check_internal,
    RuleKind.FOCUS_NEGATIVE: _check_internal,
    RuleKind.BLUR:           _check_internal,
}


def check_node(proof: Proof) -> None:
    """Sprawdza tylko bieżący węzeł (bez rekurencji)."""
    _check_arity(proof)
    _NODE_CHECKS.get(proof.rule.kind, _check_by_expectation)(proof)


# ---------------------------------------------------------------------------
# Publiczny interfejs
# ---------------------------------------------------------------------------

def verify_proof(proof: Proof) -> None:
    """
    Weryfikuje cały dowód rekurencyjnie.

    Raises:
        ProofError (InvalidRule, WrongPremiseCount, ContextMismatch,
        PremiseFailed z pełną ścieżką do błędnego węzła).
    """
    check_node(proof)
    for index, premise in enumerate(proof.premises):
        try:
            verify_proof(premise)
        except ProofError as exc:
            raise PremiseFailed(index, proof.rule, exc) from exc


def check_proof(proof: Proof) -> VerificationReport:
    """Jak verify_proof, ale zwraca raport zamiast podnosić wyjątek."""
    nodes = proof.size()
    try:
        verify_proof(proof)
    except PremiseFailed as exc:
        return VerificationReport(is_valid=False, error=exc, path=exc.path, nodes=nodes)
    except ProofError as exc:
        return VerificationReport(is_valid=False, error=exc, path=(), nodes=nodes)
    return VerificationReport(is_valid=True, nodes=nodes)
