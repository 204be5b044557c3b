"""
syntax/parser.py — parser formuł i sekwentów (zejście rekurencyjne).

Publiczne API:
  parse_formula(text)  -> Formula
  parse_sequent(text)  -> TwoSidedSequent
  tokenize(text)       -> list[Token]

Priorytety (od najluźniejszego):
  ⊸ / -o      prawostronnie łączny
  ⅋ / |       lewostronnie łączne
  ⊗ / *
  ⊕ / +
  &
  ! ?         prefiksowe
  ^ ⊥         postfiksowa negacja (A^ = A⊥ = negate(A))
  atomy, stałe (1 one, ⊥ bot bottom, ⊤ top, 0 zero), nawiasy

Sekwent: "Γ |- Δ" albo "Γ ⊢ Δ"; listy rozdzielone przecinkami, każda strona
może być pusta. Tekst bez ⊢ to sekwent z jedną formułą po prawej.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from logic.formula import (
    Atom,
    Bottom,
    Formula,
    Lolli,
    OfCourse,
    One,
    Par,
    Plus,
    Tensor,
    Top,
    WhyNot,
    With,
    Zero,
    negate,
)
from logic.sequent import TwoSidedSequent


class ParseError(ValueError):
    """Błąd składni; `position` to indeks znaku w tekście wejściowym."""

    def __init__(self, message: str, text: str, position: int) -> None:
        self.text     = text
        self.position = position
        super().__init__(f"{message} (pozycja {position})")

    def caret(self) -> str:
        """Dwie linie: tekst i znacznik ^ pod miejscem błędu."""
        return f"{self.text}\n{' ' * self.position}^"


# ---------------------------------------------------------------------------
# Leksyka
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Token:
    kind:  str
    value: str
    pos:   int


# Kolejność ma znaczenie: "|-" przed "|"
_TOKEN_SPEC: list[tuple[str, str]] = [
    ("WS",        r"\s+"),
    ("TURNSTILE", r"\|-|⊢"),
    ("LOLLI",     r"-o|⊸"),
    ("PAR",       r"\||⅋"),
    ("TENSOR",    r"\*|⊗"),
    ("PLUS",      r"\+|⊕"),
    ("WITH",      r"&"),
    ("BANG",      r"!"),
    ("QUEST",     r"\?"),
    ("CARET",     r"\^"),
    ("BOT",       r"⊥"),
    ("TOP",       r"⊤"),
    ("LPAREN",    r"\("),
    ("RPAREN",    r"\)"),
    ("COMMA",     r","),
    ("NUMBER",    r"[0-9]+(?![A-Za-z_])"),
    ("IDENT",     r"[A-Za-z_][A-Za-z0-9_']*"),
]
_TOKEN_RE = re.compile("|".join(f"(?P<{name}>{rx})" for name, rx in _TOKEN_SPEC))

_KEYWORDS: dict[str, Callable[[], Formula]] = {
    "one":    One,
    "bot":    Bottom,
    "bottom": Bottom,
    "top":    Top,
    "zero":   Zero,
}


def tokenize(text: str) -> list[Token]:
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise ParseError(f"Nieoczekiwany znak {text[pos]!r}", text, pos)
        kind = m.lastgroup
        assert kind is not None
        if kind != "WS":
            tokens.append(Token(kind, m.group(), pos))
        pos = m.end()
    tokens.append(Token("EOF", "", len(text)))
    return tokens


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

_LEFT_ASSOC: list[tuple[str, Callable[[Formula, Formula], Formula]]] = [
    ("PAR",    Par),
    ("TENSOR", Tensor),
    ("PLUS",   Plus),
    ("WITH",   With),
]


class _Parser:
    def __init__(self, text: str) -> None:
        self.text   = text
        self.tokens = tokenize(text)
        self.i      = 0

    # -- pomocnicze -------------------------------------------------------

    @property
    def current(self) -> Token:
        return self.tokens[self.i]

    def _advance(self) -> Token:
        tok = self.tokens[self.i]
        self.i += 1
        return tok

    def _accept(self, kind: str) -> Token | None:
        if self.current.kind == kind:
            return self._advance()
        return None

    def _expect(self, kind: str, what: str) -> Token:
        tok = self._accept(kind)
        if tok is None:
            raise self._error(f"Oczekiwano {what}")
        return tok

    def _error(self, message: str) -> ParseError:
        tok = self.current
        found = "koniec wejścia" if tok.kind == "EOF" else repr(tok.value)
        return ParseError(f"{message}, znaleziono {found}", self.text, tok.pos)

    # -- formuły ----------------------------------------------------------

    def formula(self) -> Formula:
        return self._lolli()

    def _lolli(self) -> Formula:
        left = self._binary(0)
        if self._accept("LOLLI"):
            return Lolli(left, self._lolli())
        return left

    def _binary(self, level: int) -> Formula:
        if level == len(_LEFT_ASSOC):
            return self._unary()
        kind, make = _LEFT_ASSOC[level]
        result = self._binary(level + 1)
        while self._accept(kind):
            result = make(result, self._binary(level + 1))
        return result

    def _unary(self) -> Formula:
        if self._accept("BANG"):
            return OfCourse(self._unary())
        if self._accept("QUEST"):
            return WhyNot(self._unary())
        return self._postfix()

    def _postfix(self) -> Formula:
        result = self._primary()
        while self.current.kind in ("CARET", "BOT"):
            self._advance()
            result = negate(result)
        return result

    def _primary(self) -> Formula:
        tok = self.current
        match tok.kind:
            case "LPAREN":
                self._advance()
                inner = self.formula()
                self._expect("RPAREN", "')'")
                return inner
            case "IDENT":
                self._advance()
                make = _KEYWORDS.get(tok.value)
                return make() if make is not None else Atom(tok.value)
            case "NUMBER":
                if tok.value == "1":
                    self._advance()
                    return One()
                if tok.value == "0":
                    self._advance()
                    return Zero()
                raise self._error("Dozwolone stałe liczbowe to 1 i 0")
            case "BOT":
                self._advance()
                return Bottom()
            case "TOP":
                self._advance()
                return Top()
        raise self._error("Oczekiwano formuły")

    # -- sekwenty ---------------------------------------------------------

    def _formula_list(self) -> list[Formula]:
        if self.current.kind in ("TURNSTILE", "EOF"):
            return []
        formulas = [self.formula()]
        while self._accept("COMMA"):
            formulas.append(self.formula())
        return formulas

    def sequent(self) -> TwoSidedSequent:
        left = self._formula_list()
        if self._accept("TURNSTILE"):
            right = self._formula_list()
            return TwoSidedSequent(tuple(left), tuple(right))
        if len(left) != 1:
            raise self._error("Oczekiwano '⊢' (sekwent bez ⊢ musi mieć jedną formułę)")
        return TwoSidedSequent((), tuple(left))

    def end(self) -> None:
        if self.current.kind != "EOF":
            raise self._error("Nadmiarowe symbole")


def parse_formula(text: str) -> Formula:
    """
    Parsuje pojedynczą formułę.

    Przykłady::

        "A -o B"        → Lolli(Atom("A"), Atom("B"))
        "!A * B^"       → Tensor(OfCourse(Atom("A")), NegAtom("B"))

    Raises:
        ParseError (ValueError) z pozycją błędu.
    """
    parser = _Parser(text)
    if parser.current.kind == "EOF":
        raise ParseError("Puste wejście", text, 0)
    result = parser.formula()
    parser.end()
    return result


def parse_sequent(text: str) -> TwoSidedSequent:
    """
    Parsuje sekwent dwustronny.

    Przykłady::

        "A, A -o B |- B"   → TwoSidedSequent((A, A ⊸ B), (B,))
        "|- A^, A"         → TwoSidedSequent((), (A⊥, A))
        "A -o A"           → TwoSidedSequent((), (A ⊸ A,))
    """
    parser = _Parser(text)
    if parser.current.kind == "EOF":
        raise ParseError("Puste wejście", text, 0)
    result = parser.sequent()
    parser.end()
    return result
