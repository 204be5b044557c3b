"""
prover/engine.py — focused proof search (Andreoli) dla MALL/MELL.

Przeszukiwanie wstecz z nawrotami po sekwencie jednostronnym:

  1. faza odwracalna    — formuły negatywne (⅋, ⊥, &, ⊤) rozkładane
                          zachłannie, skan od lewej do prawej
  2. faza focusu        — wybór formuły pozytywnej i pełny jej rozkład
                          (⊗: wszystkie podziały części liniowej, ⊕: lewa
                          potem prawa, !: tylko przy kontekście z ?-formuł)
  3. decyzja na ?A      — kopia ?A zostaje (?C), druga kopia staje się A (?D)
                          i od razu wchodzi w focus albo w fazę odwracalną

?-formuły są wspólne dla obu gałęzi ⊗ (kontrakcja tuż przed podziałem)
i osłabiane dopiero w liściach. Literał w liściu może wziąć parę
z ?-formuły przez derelikcję.

Ograniczenia:
  - max_depth — limit reguł na jednej gałęzi; gałąź odpada gdy osiągnie 0.
                Liście (Axiom, OneIntro, TopIntro) nie zużywają głębokości.
                Jedyne ograniczenie pętli kontrakcji.

Sekwent stabilny z literałem liniowym, którego dual nie występuje w żadnej
formule sekwentu (i bez ⊤), jest odrzucany od razu.

Brak cache między wywołaniami i w obrębie wywołania: identyczne podsekwenty
w różnych gałęziach są przeszukiwane niezależnie.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from logic.formula import (
    Atom,
    Bottom,
    Formula,
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
    is_dual_pair,
    is_positive,
)
from logic.proof import (
    AXIOM,
    BLUR,
    BOTTOM_INTRO,
    CONTRACTION,
    DERELICTION,
    OF_COURSE_INTRO,
    ONE_INTRO,
    PAR_INTRO,
    PLUS_INTRO_LEFT,
    PLUS_INTRO_RIGHT,
    TENSOR_INTRO,
    TOP_INTRO,
    WEAKENING,
    WITH_INTRO,
    Proof,
    Rule,
)
from logic.sequent import Sequent, TwoSidedSequent

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100

Context = tuple[Formula, ...]
Move    = tuple[int, Rule]


@dataclass(slots=True)
class SearchStats:
    """Liczniki jednego wywołania prove()."""
    nodes:          int = 0
    focus_attempts: int = 0
    backtracks:     int = 0
    depth_cutoffs:  int = 0
    contractions:   int = 0
    pruned:         int = 0


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def _without(ctx: Context, i: int) -> Context:
    return ctx[:i] + ctx[i + 1:]


def _replace(ctx: Context, i: int, *formulas: Formula) -> Context:
    return ctx[:i] + formulas + ctx[i + 1:]


def _splits(rest: Context) -> Iterator[tuple[Context, Context]]:
    """Wszystkie podziały kontekstu na dwie części (kolejność zachowana)."""
    n = len(rest)
    for k in range(n + 1):
        for chosen in itertools.combinations(range(n), k):
            picked = set(chosen)
            left  = tuple(rest[j] for j in range(n) if j in picked)
            right = tuple(rest[j] for j in range(n) if j not in picked)
            yield left, right


def _is_literal(f: Formula) -> bool:
    return isinstance(f, (Atom, NegAtom))


def _why_not_positions(ctx: Context) -> list[int]:
    return [j for j, f in enumerate(ctx) if isinstance(f, WhyNot)]


def _subformulas(f: Formula) -> Iterator[Formula]:
    yield f
    match f:
        case Tensor(a, b) | Par(a, b) | With(a, b) | Plus(a, b):
            yield from _subformulas(a)
            yield from _subformulas(b)
        case OfCourse(a) | WhyNot(a):
            yield from _subformulas(a)


def _hopeless(ctx: Context) -> bool:
    """Literał liniowy bez dualnego wystąpienia w całym sekwencie."""
    occurring = [g for f in ctx for g in _subformulas(f)]
    if any(isinstance(g, Top) for g in occurring):
        return False
    literals = {g for g in occurring if _is_literal(g)}
    return any(_is_literal(f) and f.negate() not in literals for f in ctx)


def _apply(ctx: Context, move: Move) -> Context:
    i, rule = move
    f = ctx[i]
    if rule == WEAKENING:
        return _without(ctx, i)
    if rule == CONTRACTION:
        return _replace(ctx, i, f, f)
    return _replace(ctx, i, f.body)


def _structural(
    ctx:   Context,
    moves: list[Move],
    close: Callable[[Context], Optional[Proof]],
) -> Optional[Proof]:
    """
    Wykonuje po kolei ruchy ?W/?C/?D na pozycjach z `moves`, a dowód
    sekwentu wynikowego bierze z close(). Zwraca łańcuch węzłów
    strukturalnych nad tym dowodem albo None, gdy close() zawiódł.
    """
    contexts = [ctx]
    for move in moves:
        contexts.append(_apply(contexts[-1], move))

    proof = close(contexts[-1])
    if proof is None:
        return None
    for seq, (_, rule) in zip(reversed(contexts[:-1]), reversed(moves)):
        proof = Proof(Sequent(seq), rule, (proof,))
    return proof


def _leaf(ctx: Context) -> Optional[Proof]:
    """
    Reguły zamykające gałąź bez przesłanek: ⊤, aksjomat, 1.

    Pozostałe ?-formuły są osłabiane. Samotny literał liniowy może wziąć
    parę z ?-formuły o dualnym ciele (derelikcja, potem aksjomat).
    """
    if any(isinstance(f, Top) for f in ctx):
        return Proof(Sequent(ctx), TOP_INTRO)

    shared  = _why_not_positions(ctx)
    linear  = tuple(f for f in ctx if not isinstance(f, WhyNot))
    partner = None

    match linear:
        case (a, b) if is_dual_pair(a, b):
            rule = AXIOM
        case (One(),):
            rule = ONE_INTRO
        case (a,) if _is_literal(a):
            partner = next((j for j in shared if is_dual_pair(a, ctx[j].body)), None)
            if partner is None:
                return None
            rule = AXIOM
        case _:
            return None

    # od końca, żeby osłabienia nie przesuwały pozycji jeszcze nieobsłużonych
    moves = [(j, DERELICTION if j == partner else WEAKENING) for j in reversed(shared)]
    return _structural(ctx, moves, lambda c: Proof(Sequent(c), rule))


# ---------------------------------------------------------------------------
# Prover
# ---------------------------------------------------------------------------

class Prover:
    """
    Silnik przeszukiwania dowodów.

    Użycie::

        prover = Prover(max_depth=50)
        proof  = prover.prove(Sequent((Atom("A"), NegAtom("A"))))
        prover.stats.nodes   # liczniki ostatniego wywołania

    Instancja trzyma liczniki bieżącego wywołania — równoległe
    przeszukiwania potrzebują osobnych instancji.
    """

    def __init__(
        self,
        max_depth:   int = DEFAULT_MAX_DEPTH,
        trace_focus: bool = False,
    ) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth musi być >= 0, otrzymano {max_depth}")
        self.max_depth   = max_depth
        self.trace_focus = trace_focus
        self.stats       = SearchStats()

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def prove(self, sequent: Sequent) -> Optional[Proof]:
        """
        Szuka dowodu ⊢ Γ. Formuły ⊸ są najpierw rozwijane.

        Returns:
            Proof, albo None gdy każda gałąź wyczerpała limit głębokości.
        """
        self.stats = SearchStats()
        goal = sequent.desugar()
        logger.debug("prove %s (max_depth=%d)", goal.pretty(), self.max_depth)

        proof = self._search(goal.linear, self.max_depth)

        if proof is None:
            logger.debug(
                "brak dowodu dla %s: %d węzłów, %d odcięć głębokości",
                goal.pretty(), self.stats.nodes, self.stats.depth_cutoffs,
            )
        else:
            logger.debug(
                "dowód %s: głębokość %d, %d węzłów przeszukania",
                goal.pretty(), proof.depth(), self.stats.nodes,
            )
        return proof

    def prove_two_sided(self, sequent: TwoSidedSequent) -> Optional[Proof]:
        return self.prove(sequent.to_one_sided())

    def is_provable(self, sequent: Sequent) -> bool:
        return self.prove(sequent) is not None

    # ------------------------------------------------------------------
    # Faza odwracalna
    # ------------------------------------------------------------------

    def _search(self, ctx: Context, depth: int) -> Optional[Proof]:
        self.stats.nodes += 1

        leaf = _leaf(ctx)
        if leaf is not None:
            return leaf

        if depth <= 0:
            self.stats.depth_cutoffs += 1
            return None

        for i, f in enumerate(ctx):
            match f:
                case Par(a, b):
                    premise = self._search(_replace(ctx, i, a, b), depth - 1)
                    if premise is None:
                        return None
                    return Proof(Sequent(ctx), PAR_INTRO, (premise,))

                case Bottom():
                    premise = self._search(_without(ctx, i), depth - 1)
                    if premise is None:
                        return None
                    return Proof(Sequent(ctx), BOTTOM_INTRO, (premise,))

                case With(a, b):
                    left = self._search(_replace(ctx, i, a), depth - 1)
                    if left is None:
                        return None
                    right = self._search(_replace(ctx, i, b), depth - 1)
                    if right is None:
                        return None
                    return Proof(Sequent(ctx), WITH_INTRO, (left, right))

        return self._decide(ctx, depth)

    # ------------------------------------------------------------------
    # Sekwent stabilny: focus na formule pozytywnej albo decyzja na ?A
    # ------------------------------------------------------------------

    def _decide(self, ctx: Context, depth: int) -> Optional[Proof]:
        if _hopeless(ctx):
            self.stats.pruned += 1
            return None

        for i, f in enumerate(ctx):
            if not is_positive(f):
                continue
            proof = self._focused(ctx, i, depth)
            if proof is not None:
                return proof
            self.stats.backtracks += 1

        for i, f in enumerate(ctx):
            # literały z ?-formuł bierze _leaf, ?⊥ niczego nie zmienia
            if isinstance(f, WhyNot) and not isinstance(f.body, (Atom, NegAtom, Bottom)):
                proof = self._decide_why_not(ctx, i, depth)
                if proof is not None:
                    return proof
                self.stats.backtracks += 1
        return None

    def _focused(self, ctx: Context, i: int, depth: int) -> Optional[Proof]:
        f = ctx[i]
        self.stats.focus_attempts += 1
        logger.debug("focus na %s w %s", f.pretty(), Sequent(ctx).pretty())
        proof = self._focus(ctx, i, depth)
        if proof is not None and self.trace_focus:
            return Proof(Sequent(ctx), Rule.focus_positive(f), (proof,))
        return proof

    def _decide_why_not(self, ctx: Context, i: int, depth: int) -> Optional[Proof]:
        """?A na pozycji i: ?C zostawia kopię, ?D na drugiej odsłania A."""
        body = ctx[i].body
        self.stats.contractions += 1

        def close(opened: Context) -> Optional[Proof]:
            if is_positive(body):
                return self._focused(opened, i + 1, depth - 1)
            return self._search(opened, depth - 1)

        return _structural(ctx, [(i, CONTRACTION), (i + 1, DERELICTION)], close)

    # ------------------------------------------------------------------
    # Faza focusu: ctx[i] jest formułą w focusie
    # ------------------------------------------------------------------

    def _focus(self, ctx: Context, i: int, depth: int) -> Optional[Proof]:
        f    = ctx[i]
        rest = _without(ctx, i)

        match f:
            case Atom() | One():
                return _leaf(ctx)
            case Zero():
                return None

        if not is_positive(f):
            # blur: podformuła negatywna wraca do fazy odwracalnej
            proof = self._search(ctx, depth)
            if proof is not None and self.trace_focus:
                return Proof(Sequent(ctx), BLUR, (proof,))
            return proof

        if depth <= 0:
            self.stats.depth_cutoffs += 1
            return None

        match f:
            case Tensor(a, b):
                shared = tuple(g for g in rest if isinstance(g, WhyNot))
                linear = tuple(g for g in rest if not isinstance(g, WhyNot))
                copies = [(j, CONTRACTION) for j in reversed(_why_not_positions(ctx))]
                self.stats.contractions += len(copies)
                return _structural(
                    ctx, copies,
                    lambda doubled: self._tensor(doubled, shared, linear, a, b, depth),
                )

            case Plus(a, b):
                left = self._focus(_replace(ctx, i, a), i, depth - 1)
                if left is not None:
                    return Proof(Sequent(ctx), PLUS_INTRO_LEFT, (left,))
                self.stats.backtracks += 1
                right = self._focus(_replace(ctx, i, b), i, depth - 1)
                if right is not None:
                    return Proof(Sequent(ctx), PLUS_INTRO_RIGHT, (right,))
                return None

            case OfCourse(a):
                if not all(isinstance(g, WhyNot) for g in rest):
                    return None
                premise = self._search(_replace(ctx, i, a), depth - 1)
                if premise is None:
                    return None
                return Proof(Sequent(ctx), OF_COURSE_INTRO, (premise,))

        return None

    def _tensor(
        self,
        ctx:    Context,
        shared: Context,
        linear: Context,
        a:      Formula,
        b:      Formula,
        depth:  int,
    ) -> Optional[Proof]:
        """⊗ nad sekwentem z podwojonymi ?-formułami: każda gałąź dostaje `shared`."""
        for left_lin, right_lin in _splits(linear):
            left_goal = shared + left_lin + (a,)
            left = self._focus(left_goal, len(left_goal) - 1, depth - 1)
            if left is None:
                self.stats.backtracks += 1
                continue
            right_goal = shared + right_lin + (b,)
            right = self._focus(right_goal, len(right_goal) - 1, depth - 1)
            if right is None:
                self.stats.backtracks += 1
                continue
            return Proof(Sequent(ctx), TENSOR_INTRO, (left, right))
        return None


def prove(
    sequent:   Sequent,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Optional[Proof]:
    """Skrót: jednorazowy Prover(max_depth).prove(sequent)."""
    return Prover(max_depth=max_depth).prove(sequent)
