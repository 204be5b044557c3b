"""
Testy weryfikatora: poprawne dowody ręczne, każdy rodzaj błędu
i ścieżka do pierwotnie błędnego węzła.
"""

import pytest

from logic import (
    AXIOM,
    BLUR,
    CONTRACTION,
    DERELICTION,
    OF_COURSE_INTRO,
    ONE_INTRO,
    PAR_INTRO,
    PLUS_INTRO_LEFT,
    TENSOR_INTRO,
    TOP_INTRO,
    WEAKENING,
    WITH_INTRO,
    Atom,
    NegAtom,
    OfCourse,
    One,
    Par,
    Plus,
    Rule,
    Tensor,
    Top,
    WhyNot,
    With,
    make_proof,
)
from verifier import (
    ContextMismatch,
    ErrorCode,
    InvalidRule,
    PremiseFailed,
    WrongPremiseCount,
    check_node,
    check_proof,
    verify_proof,
)

A, B = Atom("A"), Atom("B")
NA, NB = NegAtom("A"), NegAtom("B")


def ax(x: Atom):
    return make_proof([NegAtom(x.name), x], AXIOM)


def tensor_proof():
    """⊢ A⊥, B⊥, A ⊗ B"""
    return make_proof([NA, NB, Tensor(A, B)], TENSOR_INTRO, ax(A), ax(B))


class TestValidProofs:
    def test_axiom_either_order(self):
        verify_proof(make_proof([NA, A], AXIOM))
        verify_proof(make_proof([A, NA], AXIOM))

    def test_tensor_ignores_context_order(self):
        verify_proof(make_proof([Tensor(A, B), NB, NA], TENSOR_INTRO, ax(A), ax(B)))

    def test_par(self):
        verify_proof(make_proof([Par(NA, A)], PAR_INTRO, ax(A)))

    def test_with(self):
        proof = make_proof(
            [NA, With(A, A)], WITH_INTRO,
            make_proof([NA, A], AXIOM), make_proof([NA, A], AXIOM),
        )
        verify_proof(proof)

    def test_plus_left(self):
        verify_proof(make_proof([NA, Plus(A, B)], PLUS_INTRO_LEFT, ax(A)))

    def test_top_with_any_context(self):
        verify_proof(make_proof([A, B, Top()], TOP_INTRO))

    def test_exponentials(self):
        # ⊢ ?A⊥, !A
        promoted = make_proof(
            [WhyNot(NA), OfCourse(A)], OF_COURSE_INTRO,
            make_proof([WhyNot(NA), A], DERELICTION, ax(A)),
        )
        verify_proof(promoted)

    def test_weakening_and_contraction(self):
        one = make_proof([One()], ONE_INTRO)
        weakened = make_proof([WhyNot(A), One()], WEAKENING, one)
        twice = make_proof([WhyNot(A), WhyNot(A), One()], WEAKENING, weakened)
        verify_proof(make_proof([WhyNot(A), One()], CONTRACTION, twice))

    def test_cut(self):
        proof = make_proof([NA, A], Rule.cut(A), ax(A), make_proof([NA, A], AXIOM))
        verify_proof(proof)

    def test_internal_markers(self):
        inner = tensor_proof()
        focused = make_proof(inner.conclusion, Rule.focus_positive(Tensor(A, B)), inner)
        verify_proof(make_proof(inner.conclusion, BLUR, focused))

    def test_report_for_valid_proof(self):
        report = check_proof(tensor_proof())
        assert report.is_valid
        assert report.error is None
        assert report.nodes == 3
        assert report.root_cause is None


class TestNodeErrors:
    def test_axiom_not_dual(self):
        with pytest.raises(InvalidRule) as exc:
            verify_proof(make_proof([A, NB], AXIOM))
        assert exc.value.code is ErrorCode.INVALID_RULE

    def test_axiom_with_extra_formula(self):
        with pytest.raises(InvalidRule):
            verify_proof(make_proof([NA, A, B], AXIOM))

    def test_one_with_context(self):
        with pytest.raises(InvalidRule):
            verify_proof(make_proof([One(), A], ONE_INTRO))

    def test_top_missing(self):
        with pytest.raises(InvalidRule):
            verify_proof(make_proof([A], TOP_INTRO))

    def test_wrong_premise_count(self):
        with pytest.raises(WrongPremiseCount) as exc:
            check_node(make_proof([NA, A], AXIOM, ax(A)))
        assert exc.value.expected == 0
        assert exc.value.got == 1

    def test_principal_missing(self):
        with pytest.raises(InvalidRule):
            check_node(make_proof([NA, A], PAR_INTRO, ax(A)))

    def test_bad_tensor_split(self):
        # oba konteksty po tej samej stronie
        bad = make_proof(
            [NA, NB, Tensor(A, B)], TENSOR_INTRO,
            make_proof([NA, NB, A], AXIOM), ax(B),
        )
        with pytest.raises(ContextMismatch):
            check_node(bad)

    def test_with_premises_disagree(self):
        bad = make_proof([NA, With(A, B)], WITH_INTRO, ax(A), ax(A))
        with pytest.raises(ContextMismatch):
            check_node(bad)

    def test_promotion_needs_why_not_context(self):
        bad = make_proof([NA, OfCourse(A)], OF_COURSE_INTRO, ax(A))
        with pytest.raises(ContextMismatch):
            check_node(bad)

    def test_cut_formula_missing(self):
        bad = make_proof([NA, A], Rule.cut(B), ax(A), ax(A))
        with pytest.raises(ContextMismatch):
            check_node(bad)

    def test_cut_context_wrong(self):
        bad = make_proof([NA, A, B], Rule.cut(A), ax(A), make_proof([NA, A], AXIOM))
        with pytest.raises(ContextMismatch):
            check_node(bad)

    def test_focus_on_negative_formula(self):
        inner = make_proof([Par(NA, A)], PAR_INTRO, ax(A))
        bad = make_proof(inner.conclusion, Rule.focus_positive(Par(NA, A)), inner)
        with pytest.raises(InvalidRule):
            check_node(bad)

    def test_marker_changes_sequent(self):
        bad = make_proof([NA, A, One()], BLUR, ax(A))
        with pytest.raises(ContextMismatch):
            check_node(bad)


class TestErrorPaths:
    def test_premise_failure_is_wrapped(self):
        bad_axiom = make_proof([NA, B], AXIOM)
        root = make_proof([Par(NA, B)], PAR_INTRO, bad_axiom)
        with pytest.raises(PremiseFailed) as exc:
            verify_proof(root)
        err = exc.value
        assert err.code is ErrorCode.PREMISE_FAILED
        assert err.path == (0,)
        assert isinstance(err.root_cause, InvalidRule)
        assert err.__cause__ is err.cause

    def test_nested_path(self):
        bad_right = make_proof([NB, B], ONE_INTRO)
        tensor = make_proof([NA, NB, Tensor(A, B)], TENSOR_INTRO, ax(A), bad_right)
        root = make_proof([Par(NA, NB), Tensor(A, B)], PAR_INTRO, tensor)
        report = check_proof(root)
        assert not report.is_valid
        assert report.path == (0, 1)
        assert isinstance(report.root_cause, InvalidRule)
        assert report.nodes == 4

    def test_report_for_root_error(self):
        report = check_proof(make_proof([A], AXIOM))
        assert not report.is_valid
        assert report.path == ()
        assert isinstance(report.error, InvalidRule)
