"""
Testy ekstrakcji termów z dowodów i normalizacji (Curry–Howard).
"""

import pytest

from extraction import (
    Extractor,
    extract_term,
    is_normal,
    normalize,
    normalize_bounded,
    reduction_trace,
    step,
)
from logic import (
    AXIOM,
    PAR_INTRO,
    PLUS_INTRO_LEFT,
    PLUS_INTRO_RIGHT,
    TENSOR_INTRO,
    WITH_INTRO,
    Abs,
    App,
    Atom,
    Case,
    Copy,
    Derelict,
    Discard,
    Fst,
    Inl,
    Inr,
    LetPair,
    NegAtom,
    Pair,
    Par,
    Plus,
    Promote,
    Rule,
    Snd,
    Tensor,
    Trivial,
    Unit,
    Var,
    With,
    make_proof,
)
from prover import Prover
from verifier import verify_proof

A, B = Atom("A"), Atom("B")
NA, NB = NegAtom("A"), NegAtom("B")


def ax(x: Atom):
    return make_proof([NegAtom(x.name), x], AXIOM)


def _extract(one_sided, text):
    return extract_term(Prover().prove(one_sided(text)))


class TestExtractFromSearch:
    def test_identity(self, one_sided):
        assert _extract(one_sided, "A |- A") == Var("a")

    def test_swap(self, one_sided):
        term = _extract(one_sided, "A * B |- B * A")
        assert term == Pair(Var("b"), Var("a"))
        assert term.pretty() == "(b, a)"

    def test_projection(self, one_sided):
        assert _extract(one_sided, "A & B |- A") == Inl(Var("a"))

    def test_lazy_pair(self, one_sided):
        assert _extract(one_sided, "A |- A & A") == Pair(Var("a"), Var("a"))

    def test_units(self, one_sided):
        assert _extract(one_sided, "|- bot, 1") == Unit()
        assert _extract(one_sided, "A |- top") == Trivial()

    def test_promotion(self, one_sided):
        assert _extract(one_sided, "!A |- !A") == Promote(Derelict(Var("a")))

    def test_weakening(self, one_sided):
        term = _extract(one_sided, "!A |- 1")
        assert term == Discard(Unit(), Unit())
        assert term.free_vars() == frozenset()

    def test_contraction(self, one_sided):
        assert isinstance(_extract(one_sided, "!A |- A * A"), Copy)

    @pytest.mark.parametrize("text", [
        "A * B |- B * A",
        "A -o B, B -o C |- A -o C",
        "A * (B + C) |- (A * B) + (A * C)",
        "!(A & B) |- !A * !B",
    ])
    def test_cut_free_proofs_give_normal_terms(self, one_sided, text):
        assert is_normal(_extract(one_sided, text))

    def test_markers_do_not_change_term(self, one_sided):
        goal = one_sided("A * (B + C) |- (A * B) + (A * C)")
        plain = extract_term(Prover().prove(goal))
        traced = extract_term(Prover(trace_focus=True).prove(goal))
        assert plain == traced


class TestExtractCut:
    def test_atomic_cut_is_beta_redex(self):
        proof = make_proof([NA, A], Rule.cut(A), ax(A), ax(A))
        term = extract_term(proof)
        assert term == App(Abs("a0", Var("a0")), Var("a"))
        assert normalize(term) == Var("a")

    def test_tensor_cut_is_let_pair(self):
        producer = make_proof([NA, NB, Tensor(A, B)], TENSOR_INTRO, ax(A), ax(B))
        consumer = make_proof(
            [Par(NA, NB), Tensor(A, B)], PAR_INTRO,
            make_proof([NA, NB, Tensor(A, B)], TENSOR_INTRO, ax(A), ax(B)),
        )
        proof = make_proof([NA, NB, Tensor(A, B)], Rule.cut(Tensor(A, B)), producer, consumer)
        verify_proof(proof)

        term = extract_term(proof)
        assert isinstance(term, LetPair)
        assert term.pair == Pair(Var("a"), Var("b"))
        assert normalize(term) == Pair(Var("a"), Var("b"))

    def test_plus_cut_is_case(self):
        producer = make_proof([NA, Plus(A, B)], PLUS_INTRO_LEFT, ax(A))
        consumer = make_proof(
            [With(NA, NB), Plus(A, B)], WITH_INTRO,
            make_proof([NA, Plus(A, B)], PLUS_INTRO_LEFT, ax(A)),
            make_proof([NB, Plus(A, B)], PLUS_INTRO_RIGHT, ax(B)),
        )
        term = extract_term(make_proof([NA, Plus(A, B)], Rule.cut(Plus(A, B)), producer, consumer))
        assert isinstance(term, Case)
        assert normalize(term) == Pair(Inl(Var("a")), Inr(Var("b")))


class TestExtractor:
    def test_fresh_names_are_monotonic(self):
        ex = Extractor()
        assert ex.fresh_var() == "x0"
        assert ex.fresh_var() == "x1"
        assert ex.var_for_formula(Atom("P")) == "p2"
        assert ex.var_for_formula(Tensor(A, B)) == "x3"

    def test_counter_survives_calls(self):
        ex = Extractor()
        cut = make_proof([NA, A], Rule.cut(A), ax(A), ax(A))
        first = ex.extract(cut)
        second = ex.extract(cut)
        assert first != second


class TestNormalizer:
    def test_beta(self):
        assert step(App(Abs("x", Pair(Var("x"), Unit())), Var("z"))) == Pair(Var("z"), Unit())

    def test_beta_avoids_capture(self):
        term = App(Abs("x", Abs("y", Var("x"))), Var("y"))
        assert normalize(term) == Abs("y'", Var("y"))

    def test_let_pair_is_simultaneous(self):
        term = LetPair("x", "y", Pair(Var("y"), Var("x")), Pair(Var("x"), Var("y")))
        assert normalize(term) == Pair(Var("y"), Var("x"))

    def test_case(self):
        branches = ("l", Pair(Var("l"), Unit()), "r", Var("r"))
        assert normalize(Case(Inl(Var("v")), *branches)) == Pair(Var("v"), Unit())
        assert normalize(Case(Inr(Var("w")), *branches)) == Var("w")

    def test_projections(self):
        pair = Pair(Var("a"), Var("b"))
        assert normalize(Fst(pair)) == Var("a")
        assert normalize(Snd(pair)) == Var("b")

    def test_exponentials(self):
        bang = Promote(Var("v"))
        assert normalize(Derelict(bang)) == Var("v")
        assert normalize(Copy(bang, "x", "y", Pair(Var("x"), Var("y")))) == Pair(bang, bang)
        assert normalize(Discard(bang, Unit())) == Unit()

    def test_stuck_terms_are_normal(self):
        assert is_normal(Discard(Var("d"), Unit()))
        assert is_normal(Derelict(Var("a")))
        assert is_normal(App(Var("f"), Var("a")))

    def test_reduces_under_binders(self):
        term = Abs("z", App(Abs("x", Var("x")), Var("z")))
        assert normalize(term) == Abs("z", Var("z"))

    def test_reduces_inside_case_branches(self):
        redex = App(Abs("x", Var("x")), Var("u"))
        term = Case(Var("s"), "l", redex, "r", Var("r"))
        assert normalize(term) == Case(Var("s"), "l", Var("u"), "r", Var("r"))


class TestBounded:
    OMEGA_HALF = Abs("x", App(Var("x"), Var("x")))
    OMEGA = App(OMEGA_HALF, OMEGA_HALF)

    def test_omega_reduces_to_itself(self):
        assert step(self.OMEGA) == self.OMEGA

    def test_bounded_stops(self):
        assert normalize_bounded(self.OMEGA, 5) == self.OMEGA
        assert not is_normal(normalize_bounded(self.OMEGA, 5))

    def test_zero_steps(self):
        term = App(Abs("x", Var("x")), Unit())
        assert normalize_bounded(term, 0) == term

    def test_trace(self):
        term = App(Abs("x", Var("x")), Unit())
        assert reduction_trace(term, 10) == [term, Unit()]
        assert len(reduction_trace(self.OMEGA, 3)) == 4


REDEXES = [
    App(Abs("x", Pair(Var("x"), Unit())), Var("z")),
    LetPair("x", "y", Pair(Var("y"), Var("x")), Pair(Var("x"), Var("y"))),
    Case(Inl(Var("v")), "l", Pair(Var("l"), Unit()), "r", Var("r")),
    Case(Inr(Var("w")), "l", Var("l"), "r", Abs("q", App(Var("r"), Var("q")))),
    Fst(Pair(App(Abs("x", Var("x")), Var("a")), Var("b"))),
    Derelict(Promote(App(Abs("x", Var("x")), Trivial()))),
    Copy(Promote(Unit()), "x", "y", Pair(Var("x"), Var("y"))),
    Discard(Promote(Var("v")), App(Abs("x", Var("x")), Unit())),
]

EXTRACTED = [
    "A * B |- B * A",
    "A, A -o B |- B",
    "A -o B, B -o C |- A -o C",
    "A * (B + C) |- (A * B) + (A * C)",
    "A |- A & A",
    "!A |- A * A",
    "!(A & B) |- !A * !B",
    "!(A -o B), !A |- B * B",
]


class TestIdempotence:
    @pytest.mark.parametrize("term", REDEXES)
    def test_hand_built_redexes(self, term):
        once = normalize(term)
        assert is_normal(once)
        assert normalize(once) == once

    @pytest.mark.parametrize("text", EXTRACTED)
    def test_extracted_terms(self, one_sided, text):
        once = normalize(_extract(one_sided, text))
        assert normalize(once) == once

    def test_terms_with_cuts(self):
        cut = make_proof([NA, A], Rule.cut(A), ax(A), ax(A))
        once = normalize(extract_term(cut))
        assert normalize(once) == once == Var("a")
