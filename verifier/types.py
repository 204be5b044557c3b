"""
verifier/types.py — kody błędów, wyjątki weryfikacji i raport.

ProofError — baza hierarchii wyjątków:
  InvalidRule        reguła niezgodna z konkluzją
  WrongPremiseCount  liczba przesłanek ≠ arność reguły
  ContextMismatch    konteksty przesłanek nie pasują do konkluzji
  PremiseFailed      błąd w poddrzewie (opakowany, nie zgubiony)

VerificationReport — wynik check_proof(): is_valid, error, ścieżka do węzła.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from logic.proof import Rule
from logic.sequent import Sequent


class ErrorCode(StrEnum):
    """Stałe kody błędów weryfikatora."""

    INVALID_RULE        = "E_INVALID_RULE"
    WRONG_PREMISE_COUNT = "E_WRONG_PREMISE_COUNT"
    CONTEXT_MISMATCH    = "E_CONTEXT_MISMATCH"
    PREMISE_FAILED      = "E_PREMISE_FAILED"


class ProofError(Exception):
    """Dowód nie przeszedł weryfikacji."""

    code: ErrorCode


class InvalidRule(ProofError):
    code = ErrorCode.INVALID_RULE

    def __init__(self, rule: Rule, conclusion: Sequent) -> None:
        self.rule       = rule
        self.conclusion = conclusion
        super().__init__(f"Niepoprawna reguła {rule} dla konkluzji {conclusion.pretty()}")


class WrongPremiseCount(ProofError):
    code = ErrorCode.WRONG_PREMISE_COUNT

    def __init__(self, rule: Rule, expected: int, got: int) -> None:
        self.rule     = rule
        self.expected = expected
        self.got      = got
        super().__init__(f"Reguła {rule}: oczekiwano {expected} przesłanek, otrzymano {got}")


class ContextMismatch(ProofError):
    code = ErrorCode.CONTEXT_MISMATCH

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Niezgodność kontekstu: {message}")


class PremiseFailed(ProofError):
    """Błąd w przesłance o indeksie `index`; `cause` to błąd zagnieżdżony."""

    code = ErrorCode.PREMISE_FAILED

    def __init__(self, index: int, rule: Rule, cause: ProofError) -> None:
        self.index = index
        self.rule  = rule
        self.cause = cause
        super().__init__(f"Przesłanka {index} reguły {rule}: {cause}")

    @property
    def path(self) -> tuple[int, ...]:
        """Indeksy przesłanek od korzenia do węzła z pierwotnym błędem."""
        err: ProofError = self
        indices: list[int] = []
        while isinstance(err, PremiseFailed):
            indices.append(err.index)
            err = err.cause
        return tuple(indices)

    @property
    def root_cause(self) -> ProofError:
        err: ProofError = self
        while isinstance(err, PremiseFailed):
            err = err.cause
        return err


@dataclass(slots=True)
class VerificationReport:
    """
    Wynik weryfikacji bez wyjątku.

    - is_valid:   True gdy cały dowód jest poprawny
    - error:      pełny (zagnieżdżony) błąd, None gdy poprawny
    - path:       indeksy przesłanek od korzenia do błędnego węzła
    - nodes:      liczba węzłów dowodu
    """

    is_valid: bool
    error: ProofError | None = None
    path: tuple[int, ...] = ()
    nodes: int = 0

    @property
    def root_cause(self) -> ProofError | None:
        if isinstance(self.error, PremiseFailed):
            return self.error.root_cause
        return self.error
