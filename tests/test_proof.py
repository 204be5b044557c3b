"""Testy reguł i drzew dowodów."""

import pytest

from logic import (
    AXIOM,
    BLUR,
    PAR_INTRO,
    TENSOR_INTRO,
    Atom,
    NegAtom,
    Par,
    Proof,
    Rule,
    RuleKind,
    Sequent,
    Tensor,
    make_proof,
)

NA, NB = NegAtom("A"), NegAtom("B")
A, B = Atom("A"), Atom("B")


def _tensor_proof() -> Proof:
    """⊢ A⊥, B⊥, A ⊗ B"""
    return make_proof(
        [NA, NB, Tensor(A, B)],
        TENSOR_INTRO,
        make_proof([NA, A], AXIOM),
        make_proof([NB, B], AXIOM),
    )


class TestRule:
    def test_arity(self):
        assert AXIOM.arity == 0
        assert PAR_INTRO.arity == 1
        assert TENSOR_INTRO.arity == 2
        assert Rule.cut(A).arity == 2

    def test_internal_flag(self):
        assert BLUR.is_internal
        assert Rule.focus_positive(A).is_internal
        assert not TENSOR_INTRO.is_internal

    def test_formula_required_for_cut(self):
        with pytest.raises(ValueError):
            Rule(RuleKind.CUT)

    def test_formula_rejected_for_axiom(self):
        with pytest.raises(ValueError):
            Rule(RuleKind.AXIOM, A)

    def test_str_and_label(self):
        assert str(TENSOR_INTRO) == "TensorIntro"
        assert str(Rule.cut(A)) == "Cut(A)"
        assert TENSOR_INTRO.label == "⊗"

    def test_kind_values_are_stable(self):
        assert RuleKind.PLUS_INTRO_LEFT.value == "plus_intro_left"
        assert RuleKind("why_not_intro") is RuleKind.WHY_NOT_INTRO


class TestProof:
    def test_coerces_conclusion_and_premises(self):
        p = Proof([NA, A], AXIOM, [])
        assert isinstance(p.conclusion, Sequent)
        assert p.premises == ()

    def test_depth_counts_leaves(self):
        assert make_proof([NA, A], AXIOM).depth() == 1
        assert _tensor_proof().depth() == 2

    def test_size_and_walk(self):
        p = _tensor_proof()
        assert p.size() == 3
        assert [n.rule.kind for n in p.walk()] == [
            RuleKind.TENSOR_INTRO, RuleKind.AXIOM, RuleKind.AXIOM,
        ]

    def test_rules_used(self):
        assert _tensor_proof().rules_used()[RuleKind.AXIOM] == 2

    def test_cut_count(self):
        ax = make_proof([NA, A], AXIOM)
        cut = make_proof([NA, A], Rule.cut(A), ax, make_proof([A, NA], AXIOM))
        assert cut.cut_count() == 1
        assert not cut.is_cut_free()
        assert _tensor_proof().is_cut_free()

    def test_internal_nodes_are_depth_neutral(self):
        inner = _tensor_proof()
        wrapped = make_proof(inner.conclusion, Rule.focus_positive(Tensor(A, B)), inner)
        assert wrapped.depth() == inner.depth()
        assert wrapped.depth(include_internal=True) == inner.depth() + 1

    def test_strip_internal(self):
        ax = make_proof([NA, A], AXIOM)
        blurred = make_proof([NA, A], BLUR, ax)
        root = make_proof([Par(NA, A)], PAR_INTRO, blurred)
        stripped = root.strip_internal()
        assert stripped.premises[0] == ax
        assert all(not n.rule.is_internal for n in stripped.walk())
