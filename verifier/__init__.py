"""
verifier — niezależna weryfikacja dowodów i format wymiany JSON.

Użycie:
  from verifier import verify_proof, check_proof, load_proof_json

  verify_proof(proof)           # None albo ProofError
  report = check_proof(proof)   # VerificationReport, bez wyjątku
"""

from .types import (
    ContextMismatch,
    ErrorCode,
    InvalidRule,
    PremiseFailed,
    ProofError,
    VerificationReport,
    WrongPremiseCount,
)
from .proof_verifier import check_node, check_proof, verify_proof
from .loader import (
    PROOF_SCHEMA,
    ProofFormatError,
    dump_proof_json,
    formula_from_dict,
    formula_to_dict,
    load_proof_json,
    proof_from_dict,
    proof_to_dict,
)

__all__ = [
    "ContextMismatch",
    "ErrorCode",
    "InvalidRule",
    "PremiseFailed",
    "ProofError",
    "VerificationReport",
    "WrongPremiseCount",
    "check_node",
    "check_proof",
    "verify_proof",
    "PROOF_SCHEMA",
    "ProofFormatError",
    "dump_proof_json",
    "formula_from_dict",
    "formula_to_dict",
    "load_proof_json",
    "proof_from_dict",
    "proof_to_dict",
]
