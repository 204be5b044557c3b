# tests/conftest.py
from __future__ import annotations

import pytest

from logic import Atom, NegAtom, Sequent
from prover import Prover
from syntax import parse_sequent


@pytest.fixture
def A() -> Atom:
    return Atom("A")


@pytest.fixture
def B() -> Atom:
    return Atom("B")


@pytest.fixture
def C() -> Atom:
    return Atom("C")


@pytest.fixture
def axiom_sequent() -> Sequent:
    """⊢ A⊥, A"""
    return Sequent((NegAtom("A"), Atom("A")))


@pytest.fixture
def one_sided():
    """Parsuje sekwent dwustronny z tekstu i zwraca jego postać jednostronną."""
    def _parse(text: str) -> Sequent:
        return parse_sequent(text).to_one_sided()
    return _parse


@pytest.fixture
def prover() -> Prover:
    return Prover(max_depth=50)


@pytest.fixture(autouse=True)
def _clean_lolli_env(monkeypatch):
    # testy CLI nie mogą zależeć od zmiennych ustawionych w środowisku dewelopera
    for name in ("LOLLI_MAX_DEPTH", "LOLLI_MAX_STEPS", "LOLLI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
