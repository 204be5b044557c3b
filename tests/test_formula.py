"""
Testy modelu formuł: negacja (De Morgan), desugar, polaryzacja, notacje.
"""

import pytest

from logic import (
    Atom,
    Bottom,
    Lolli,
    NegAtom,
    OfCourse,
    One,
    Par,
    Plus,
    Tensor,
    Top,
    WhyNot,
    With,
    Zero,
    desugar,
    is_dual_pair,
    is_negative,
    is_positive,
    lolli,
    negate,
    of_course,
    tensor,
)

A, B, C = Atom("A"), Atom("B"), Atom("C")

SAMPLES = [
    A,
    NegAtom("A"),
    Tensor(A, B),
    Par(A, NegAtom("B")),
    With(Plus(A, B), C),
    One(), Bottom(), Top(), Zero(),
    OfCourse(Tensor(A, WhyNot(B))),
    WhyNot(With(A, One())),
    Tensor(Par(A, B), Plus(Top(), Zero())),
]


class TestNegation:
    @pytest.mark.parametrize("f", SAMPLES)
    def test_negation_is_involutive(self, f):
        assert negate(negate(f)) == f

    def test_de_morgan_table(self):
        assert negate(A) == NegAtom("A")
        assert negate(NegAtom("A")) == A
        assert negate(Tensor(A, B)) == Par(NegAtom("A"), NegAtom("B"))
        assert negate(Par(A, B)) == Tensor(NegAtom("A"), NegAtom("B"))
        assert negate(With(A, B)) == Plus(NegAtom("A"), NegAtom("B"))
        assert negate(Plus(A, B)) == With(NegAtom("A"), NegAtom("B"))
        assert negate(One()) == Bottom()
        assert negate(Bottom()) == One()
        assert negate(Top()) == Zero()
        assert negate(Zero()) == Top()
        assert negate(OfCourse(A)) == WhyNot(NegAtom("A"))
        assert negate(WhyNot(A)) == OfCourse(NegAtom("A"))

    def test_negated_lolli_is_tensor(self):
        assert negate(Lolli(A, B)) == Tensor(A, NegAtom("B"))

    def test_method_delegates(self):
        assert Tensor(A, B).negate() == negate(Tensor(A, B))


class TestDesugar:
    def test_lolli_becomes_par(self):
        assert desugar(Lolli(A, B)) == Par(NegAtom("A"), B)

    def test_nested_lolli(self):
        f = lolli(lolli(A, B), C)
        # (A ⊸ B) ⊸ C  =  (A ⊗ B⊥) ⅋ C
        assert desugar(f) == Par(Tensor(A, NegAtom("B")), C)

    def test_lolli_under_exponential(self):
        assert desugar(of_course(lolli(A, B))) == OfCourse(Par(NegAtom("A"), B))

    def test_no_lolli_unchanged(self):
        f = Tensor(With(A, B), WhyNot(C))
        assert desugar(f) == f


class TestPolarity:
    @pytest.mark.parametrize("f", [A, Tensor(A, B), One(), Plus(A, B), Zero(), OfCourse(A)])
    def test_positive(self, f):
        assert is_positive(f)
        assert not is_negative(f)

    @pytest.mark.parametrize("f", [NegAtom("A"), Par(A, B), Bottom(), With(A, B), Top(), WhyNot(A), Lolli(A, B)])
    def test_negative(self, f):
        assert is_negative(f)
        assert not f.is_positive()

    def test_negation_flips_polarity(self):
        for f in SAMPLES:
            assert is_positive(f) != is_positive(negate(f))


class TestStructure:
    def test_equality_and_hash(self):
        assert tensor(A, B) == Tensor(Atom("A"), Atom("B"))
        assert len({Tensor(A, B), Tensor(A, B), Par(A, B)}) == 2

    def test_size(self):
        assert A.size() == 1
        assert Tensor(A, OfCourse(B)).size() == 4

    def test_atoms(self):
        assert Tensor(A, Par(NegAtom("B"), One())).atoms() == frozenset({"A", "B"})

    def test_dual_pair(self):
        assert is_dual_pair(A, NegAtom("A"))
        assert is_dual_pair(NegAtom("A"), A)
        assert not is_dual_pair(A, NegAtom("B"))
        assert not is_dual_pair(A, A)


class TestPretty:
    def test_unicode(self):
        assert Tensor(A, NegAtom("B")).pretty() == "(A ⊗ B⊥)"
        assert str(Lolli(A, WhyNot(B))) == "(A ⊸ ?B)"
        assert Par(Bottom(), Top()).pretty() == "(⊥ ⅋ ⊤)"

    def test_ascii(self):
        assert Tensor(A, NegAtom("B")).pretty_ascii() == "(A * B^)"
        assert Lolli(A, Par(B, C)).pretty_ascii() == "(A -o (B | C))"
        assert With(Bottom(), Top()).pretty_ascii() == "(bot & top)"

    def test_latex(self):
        assert Tensor(A, B).pretty_latex() == r"(A \otimes B)"
        assert NegAtom("A").pretty_latex() == r"A^{\bot}"
        assert OfCourse(A).pretty_latex() == r"{!}A"
        assert One().pretty_latex() == r"\mathbf{1}"
