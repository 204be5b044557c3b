"""Testy formatu JSON dowodów: zapis, odczyt, walidacja schematem."""

import json

import pytest

from logic import AXIOM, Atom, Lolli, NegAtom, OfCourse, Rule, Tensor, Top, Zero, make_proof
from prover import Prover
from verifier import (
    PROOF_SCHEMA,
    ProofFormatError,
    dump_proof_json,
    formula_from_dict,
    formula_to_dict,
    load_proof_json,
    proof_from_dict,
    proof_to_dict,
    verify_proof,
)
from verifier.loader import FORMAT_NAME, schema_errors

A, B = Atom("A"), Atom("B")


def _axiom_doc() -> dict:
    return proof_to_dict(make_proof([NegAtom("A"), A], AXIOM))


class TestFormulaCodec:
    def test_atom_encoding(self):
        assert formula_to_dict(NegAtom("p")) == {"kind": "neg_atom", "name": "p"}

    def test_nested(self):
        f = Lolli(OfCourse(A), Tensor(Top(), Zero()))
        d = formula_to_dict(f)
        assert d["kind"] == "lolli"
        assert d["left"] == {"kind": "of_course", "body": {"kind": "atom", "name": "A"}}
        assert formula_from_dict(d) == f


class TestDocument:
    def test_header(self):
        doc = _axiom_doc()
        assert doc["format"] == FORMAT_NAME
        assert doc["version"] == 1
        assert doc["proof"]["rule"] == {"kind": "axiom"}
        assert doc["proof"]["premises"] == []

    def test_cut_carries_formula(self):
        ax = make_proof([NegAtom("A"), A], AXIOM)
        doc = proof_to_dict(make_proof([NegAtom("A"), A], Rule.cut(A), ax, ax))
        assert doc["proof"]["rule"]["formula"] == {"kind": "atom", "name": "A"}

    def test_generated_document_matches_schema(self, one_sided):
        proof = Prover(trace_focus=True).prove(one_sided("!A |- A * A"))
        assert schema_errors(proof_to_dict(proof)) == []

    def test_file_roundtrip_preserves_proof(self, tmp_path, one_sided):
        proof = Prover().prove(one_sided("A -o B, B -o C |- A -o C"))
        path = tmp_path / "proof.json"
        dump_proof_json(proof, path)
        loaded = load_proof_json(path)
        assert loaded == proof
        verify_proof(loaded)

    def test_unicode_names_written_verbatim(self, tmp_path):
        path = tmp_path / "p.json"
        dump_proof_json(make_proof([NegAtom("żółw"), Atom("żółw")], AXIOM), path)
        assert "żółw" in path.read_text(encoding="utf-8")

    def test_premises_optional(self):
        doc = _axiom_doc()
        del doc["proof"]["premises"]
        assert proof_from_dict(doc).premises == ()


class TestRejected:
    def test_wrong_format_name(self):
        doc = _axiom_doc()
        doc["format"] = "other"
        with pytest.raises(ProofFormatError) as exc:
            proof_from_dict(doc)
        assert "/format" in exc.value.paths

    def test_unknown_rule_kind(self):
        doc = _axiom_doc()
        doc["proof"]["rule"]["kind"] = "magic"
        with pytest.raises(ProofFormatError) as exc:
            proof_from_dict(doc)
        assert "/proof/rule/kind" in exc.value.paths

    def test_bad_formula(self):
        doc = _axiom_doc()
        doc["proof"]["conclusion"][0] = {"kind": "tensor", "left": {"kind": "one"}}
        with pytest.raises(ProofFormatError):
            proof_from_dict(doc)

    def test_extra_property(self):
        doc = _axiom_doc()
        doc["proof"]["note"] = "x"
        with pytest.raises(ProofFormatError):
            proof_from_dict(doc)

    def test_cut_without_formula(self):
        doc = _axiom_doc()
        doc["proof"]["rule"] = {"kind": "cut"}
        with pytest.raises(ProofFormatError) as exc:
            proof_from_dict(doc)
        assert exc.value.paths == ["/proof/rule"]

    def test_axiom_with_formula(self):
        doc = _axiom_doc()
        doc["proof"]["rule"]["formula"] = {"kind": "one"}
        with pytest.raises(ProofFormatError):
            proof_from_dict(doc)

    def test_not_an_object(self):
        with pytest.raises(ProofFormatError):
            proof_from_dict([1, 2, 3])

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ nie json", encoding="utf-8")
        with pytest.raises(ProofFormatError, match="Niepoprawny JSON"):
            load_proof_json(path)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            proof_from_dict({})

    def test_schema_is_serializable(self):
        assert json.loads(json.dumps(PROOF_SCHEMA))["title"] == "Lolli proof"
