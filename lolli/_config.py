"""Konfiguracja CLI przez zmienne środowiskowe (opcjonalnie z pliku .env) i logowanie."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from extraction.normalizer import DEFAULT_MAX_STEPS
from prover.engine import DEFAULT_MAX_DEPTH

LOG_FORMAT = "%(name)s: %(message)s"


@dataclass(slots=True)
class Settings:
    max_depth: int
    max_steps: int
    log_level: str


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} musi być liczbą całkowitą, otrzymano {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} musi być >= 0, otrzymano {value}")
    return value


def load_settings() -> Settings:
    """
    Wczytuje .env z bieżącego katalogu (bez nadpisywania zmiennych już
    ustawionych w środowisku), potem czyta LOLLI_*.

    Raises:
        ValueError przy niepoprawnej wartości liczbowej.
    """
    load_dotenv(override=False)
    return Settings(
        max_depth = _int_env("LOLLI_MAX_DEPTH", DEFAULT_MAX_DEPTH),
        max_steps = _int_env("LOLLI_MAX_STEPS", DEFAULT_MAX_STEPS),
        log_level = os.getenv("LOLLI_LOG_LEVEL", "WARNING").upper(),
    )


def setup_logging(level: str | int) -> None:
    """Jeden RichHandler na stderr dla loggera głównego."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
