"""
prover — focused proof search dla logiki liniowej (MALL + MELL).

Publiczne API:
  Prover(max_depth, trace_focus)   klasa silnika
  prove(sequent, max_depth)        → Proof | None
  SearchStats                      liczniki ostatniego wywołania
"""

from .engine import (
    DEFAULT_MAX_DEPTH,
    Prover,
    SearchStats,
    prove,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Prover",
    "SearchStats",
    "prove",
]
