"""
verifier/loader.py — format wymiany dowodów w JSON.

Publiczne API:
  formula_to_dict(f) / formula_from_dict(d)
  proof_to_dict(proof)                     -> dict
  proof_from_dict(doc)                     -> Proof   (po walidacji schematu)
  dump_proof_json(proof, path)
  load_proof_json(path)                    -> Proof

Dokument:

    {
        "format":  "lolli-proof",
        "version": 1,
        "proof": {
            "conclusion": [{"kind": "atom", "name": "A"}, {"kind": "neg_atom", "name": "A"}],
            "rule":       {"kind": "axiom"},
            "premises":   []
        }
    }

Dowód wczytany z pliku jest niezaufany — wynik trzeba przepuścić
przez verify_proof().
"""

from __future__ import annotations

import json
import logging
import pathlib
from typing import Any

import jsonschema

from logic.formula import (
    Atom,
    Bottom,
    Formula,
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
)
from logic.proof import Proof, Rule, RuleKind
from logic.sequent import Sequent

logger = logging.getLogger(__name__)

FORMAT_NAME    = "lolli-proof"
FORMAT_VERSION = 1


class ProofFormatError(ValueError):
    """Dokument JSON nie jest poprawnym zapisem dowodu."""

    def __init__(self, message: str, paths: list[str] | None = None) -> None:
        self.paths = paths or []
        super().__init__(message)


# ---------------------------------------------------------------------------
# Schemat
# ---------------------------------------------------------------------------

_BINARY: dict[str, type[Formula]] = {
    "tensor": Tensor,
    "par":    Par,
    "with":   With,
    "plus":   Plus,
    "lolli":  Lolli,
}
_UNARY: dict[str, type[Formula]] = {
    "of_course": OfCourse,
    "why_not":   WhyNot,
}
_UNITS: dict[str, type[Formula]] = {
    "one":    One,
    "bottom": Bottom,
    "top":    Top,
    "zero":   Zero,
}

PROOF_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title":   "Lolli proof",
    "type":    "object",
    "required": ["format", "version", "proof"],
    "properties": {
        "format":  {"const": FORMAT_NAME},
        "version": {"const": FORMAT_VERSION},
        "proof":   {"$ref": "#/$defs/proof"},
    },
    "$defs": {
        "formula": {
            "oneOf": [
                {
                    "type": "object",
                    "required": ["kind", "name"],
                    "properties": {
                        "kind": {"enum": ["atom", "neg_atom"]},
                        "name": {"type": "string", "minLength": 1},
                    },
                    "additionalProperties": False,
                },
                {
                    "type": "object",
                    "required": ["kind", "left", "right"],
                    "properties": {
                        "kind":  {"enum": sorted(_BINARY)},
                        "left":  {"$ref": "#/$defs/formula"},
                        "right": {"$ref": "#/$defs/formula"},
                    },
                    "additionalProperties": False,
                },
                {
                    "type": "object",
                    "required": ["kind", "body"],
                    "properties": {
                        "kind": {"enum": sorted(_UNARY)},
                        "body": {"$ref": "#/$defs/formula"},
                    },
                    "additionalProperties": False,
                },
                {
                    "type": "object",
                    "required": ["kind"],
                    "properties": {
                        "kind": {"enum": sorted(_UNITS)},
                    },
                    "additionalProperties": False,
                },
            ],
        },
        "rule": {
            "type": "object",
            "required": ["kind"],
            "properties": {
                "kind":    {"enum": [k.value for k in RuleKind]},
                "formula": {"$ref": "#/$defs/formula"},
            },
            "additionalProperties": False,
        },
        "proof": {
            "type": "object",
            "required": ["conclusion", "rule"],
            "properties": {
                "conclusion": {"type": "array", "items": {"$ref": "#/$defs/formula"}},
                "rule":       {"$ref": "#/$defs/rule"},
                "premises":   {"type": "array", "items": {"$ref": "#/$defs/proof"}},
            },
            "additionalProperties": False,
        },
    },
}


def schema_errors(doc: Any) -> list[tuple[str, str]]:
    """Lista (ścieżka JSON pointer, komunikat) naruszeń schematu."""
    validator = jsonschema.Draft202012Validator(PROOF_SCHEMA)
    out: list[tuple[str, str]] = []
    for e in sorted(validator.iter_errors(doc), key=lambda e: [str(p) for p in e.absolute_path]):
        path = (
            "/" + "/".join(str(p) for p in e.absolute_path)
            if e.absolute_path
            else "/"
        )
        out.append((path, e.message))
    return out


# ---------------------------------------------------------------------------
# Formuły
# ---------------------------------------------------------------------------

_KIND_OF: dict[type[Formula], str] = {
    **{cls: kind for kind, cls in _BINARY.items()},
    **{cls: kind for kind, cls in _UNARY.items()},
    **{cls: kind for kind, cls in _UNITS.items()},
}


def formula_to_dict(f: Formula) -> dict[str, Any]:
    match f:
        case Atom(name):
            return {"kind": "atom", "name": name}
        case NegAtom(name):
            return {"kind": "neg_atom", "name": name}
        case Tensor(a, b) | Par(a, b) | With(a, b) | Plus(a, b) | Lolli(a, b):
            return {"kind": _KIND_OF[type(f)], "left": formula_to_dict(a), "right": formula_to_dict(b)}
        case OfCourse(a) | WhyNot(a):
            return {"kind": _KIND_OF[type(f)], "body": formula_to_dict(a)}
    return {"kind": _KIND_OF[type(f)]}


def formula_from_dict(d: dict[str, Any]) -> Formula:
    """Dekoduje formułę (zakłada dokument zgodny ze schematem)."""
    kind = d["kind"]
    if kind == "atom":
        return Atom(d["name"])
    if kind == "neg_atom":
        return NegAtom(d["name"])
    if kind in _BINARY:
        return _BINARY[kind](formula_from_dict(d["left"]), formula_from_dict(d["right"]))
    if kind in _UNARY:
        return _UNARY[kind](formula_from_dict(d["body"]))
    if kind in _UNITS:
        return _UNITS[kind]()
    raise ProofFormatError(f"Nieznany rodzaj formuły: {kind!r}")


# ---------------------------------------------------------------------------
# Dowody
# ---------------------------------------------------------------------------

def _node_to_dict(proof: Proof) -> dict[str, Any]:
    rule: dict[str, Any] = {"kind": proof.rule.kind.value}
    if proof.rule.formula is not None:
        rule["formula"] = formula_to_dict(proof.rule.formula)
    return {
        "conclusion": [formula_to_dict(f) for f in proof.conclusion],
        "rule":       rule,
        "premises":   [_node_to_dict(p) for p in proof.premises],
    }


def _node_from_dict(node: dict[str, Any], pointer: str) -> Proof:
    rule_doc = node["rule"]
    formula  = rule_doc.get("formula")
    try:
        rule = Rule(
            RuleKind(rule_doc["kind"]),
            formula_from_dict(formula) if formula is not None else None,
        )
    except ValueError as e:
        raise ProofFormatError(f"{pointer}/rule: {e}", [f"{pointer}/rule"]) from e

    premises = tuple(
        _node_from_dict(p, f"{pointer}/premises/{i}")
        for i, p in enumerate(node.get("premises", []))
    )
    conclusion = Sequent(tuple(formula_from_dict(f) for f in node["conclusion"]))
    return Proof(conclusion, rule, premises)


def proof_to_dict(proof: Proof) -> dict[str, Any]:
    return {
        "format":  FORMAT_NAME,
        "version": FORMAT_VERSION,
        "proof":   _node_to_dict(proof),
    }


def proof_from_dict(doc: Any) -> Proof:
    """
    Waliduje dokument schematem, potem dekoduje drzewo.

    Raises:
        ProofFormatError: naruszenia schematu (z listą ścieżek) albo reguła
            z brakującą / nadmiarową formułą.
    """
    errors = schema_errors(doc)
    if errors:
        listing = "; ".join(f"{path}: {msg}" for path, msg in errors[:10])
        raise ProofFormatError(
            f"Dokument nie jest zgodny ze schematem dowodu ({len(errors)} błędów): {listing}",
            [path for path, _ in errors],
        )
    return _node_from_dict(doc["proof"], "/proof")


def dump_proof_json(proof: Proof, path: pathlib.Path) -> None:
    path.write_text(
        json.dumps(proof_to_dict(proof), ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    logger.debug("zapisano dowód (%d węzłów) do %s", proof.size(), path)


def load_proof_json(path: pathlib.Path) -> Proof:
    """
    Wczytuje dowód z pliku JSON.

    Returns:
        Proof (niezweryfikowany)
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ProofFormatError(f"Niepoprawny JSON w {path}: {e}") from e
    return proof_from_dict(raw)
