"""
extraction — termy z dowodów (Curry–Howard) i ich normalizacja.

  Extractor().extract(proof)     → Term
  extract_term(proof)            → Term
  normalize(term)                → postać normalna
  normalize_bounded(term, n)     → co najwyżej n kroków
  reduction_trace(term, n)       → lista termów pośrednich
"""

from .extractor import Extractor, extract_term
from .normalizer import (
    DEFAULT_MAX_STEPS,
    is_normal,
    normalize,
    normalize_bounded,
    reduction_trace,
    step,
)

__all__ = [
    "DEFAULT_MAX_STEPS",
    "Extractor",
    "extract_term",
    "is_normal",
    "normalize",
    "normalize_bounded",
    "reduction_trace",
    "step",
]
