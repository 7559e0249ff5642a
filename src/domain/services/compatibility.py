"""Pairwise breeding compatibility scoring.

A pair is run through every rule in ``RULES``, in order. Rules never
short-circuit: each one inspects the pair independently and yields zero or
more outcomes, and every outcome contributes one reason. A hard block marks
the pair incompatible and pins the score to 0; a soft adjustment moves the
score of a still-compatible pair by a fixed delta.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from src.domain.models.sheep import Sheep
from src.domain.services.breeding_age import (
    is_breeding_age,
    litter_size_for,
    resolve_fertility,
    today_utc,
)
from src.domain.value_objects.fertility import Fertility
from src.domain.value_objects.gender import Gender

BASE_SCORE = 100
HEALTH_PENALTY = 15
DEFAULT_REASONS = ("Not related", "Both healthy")


class Recommendation(str, Enum):
    DO_NOT_BREED = "Do not breed"
    BEST_CHOICE = "Best choice"
    GOOD_CHOICE = "Good choice"
    ACCEPTABLE = "Acceptable"
    NOT_RECOMMENDED = "Not recommended"


class OutcomeKind(str, Enum):
    HARD_BLOCK = "hard_block"
    ADJUST = "adjust"


@dataclass(slots=True, frozen=True)
class RuleOutcome:
    kind: OutcomeKind
    reason: str
    delta: int = 0

    @classmethod
    def block(cls, reason: str) -> RuleOutcome:
        return cls(kind=OutcomeKind.HARD_BLOCK, reason=reason)

    @classmethod
    def adjust(cls, delta: int, reason: str) -> RuleOutcome:
        return cls(kind=OutcomeKind.ADJUST, reason=reason, delta=delta)


@dataclass(slots=True, frozen=True)
class PairContext:
    first: Sheep
    second: Sheep
    today: date
    fertility1: str
    fertility2: str
    expected_litter_size: float


@dataclass(slots=True)
class CompatibilityResult:
    is_compatible: bool
    score: int
    reasons: list[str]
    recommendation: str
    fertility1: str
    fertility2: str
    expected_litter_size: float
    # Candidate record, attached by match ranking
    sheep: Sheep | None = field(default=None)


Rule = Callable[[PairContext], Iterator[RuleOutcome]]


def _parent_child(ctx: PairContext) -> Iterator[RuleOutcome]:
    if ctx.first.is_parent_of(ctx.second) or ctx.second.is_parent_of(ctx.first):
        yield RuleOutcome.block("Blocked: parent-child relationship")


def _same_mother(ctx: PairContext) -> Iterator[RuleOutcome]:
    mother1, mother2 = ctx.first.mother_id, ctx.second.mother_id
    if mother1 is not None and mother2 is not None and mother1 == mother2:
        yield RuleOutcome.block("Blocked: siblings (same mother)")


def _same_father(ctx: PairContext) -> Iterator[RuleOutcome]:
    father1, father2 = ctx.first.father_id, ctx.second.father_id
    if father1 is not None and father2 is not None and father1 == father2:
        yield RuleOutcome.block("Blocked: siblings (same father)")


def _breeding_age(ctx: PairContext) -> Iterator[RuleOutcome]:
    for sheep in (ctx.first, ctx.second):
        if not is_breeding_age(sheep, ctx.today):
            yield RuleOutcome.block(f"{sheep.tag_number} is too young for breeding")


# Unordered fertility pair -> (score delta, reason template)
FERTILITY_PAIRINGS: dict[frozenset[str], tuple[int, str]] = {
    frozenset({Fertility.BB.value}): (
        30,
        "Excellent genetics - expected {litter} lambs per pregnancy",
    ),
    frozenset({Fertility.BB.value, Fertility.B_PLUS.value}): (
        25,
        "Very good genetics - expected {litter} lambs per pregnancy",
    ),
    frozenset({Fertility.B_PLUS.value}): (
        18,
        "Good genetics - expected {litter} lambs per pregnancy",
    ),
    frozenset({Fertility.B_PLUS.value, Fertility.AA.value}): (
        8,
        "Average genetics - expected {litter} lambs per pregnancy",
    ),
    frozenset({Fertility.AA.value}): (
        -15,
        "Basic genetics - expected {litter} lambs",
    ),
}


def _fertility(ctx: PairContext) -> Iterator[RuleOutcome]:
    pairing = FERTILITY_PAIRINGS.get(frozenset({ctx.fertility1, ctx.fertility2}))
    if pairing is None:
        return
    delta, template = pairing
    yield RuleOutcome.adjust(delta, template.format(litter=f"{ctx.expected_litter_size:g}"))


def _health(ctx: PairContext) -> Iterator[RuleOutcome]:
    for sheep in (ctx.first, ctx.second):
        if not sheep.is_healthy:
            yield RuleOutcome.adjust(-HEALTH_PENALTY, f"{sheep.tag_number} needs health attention")


def _pregnancy(ctx: PairContext) -> Iterator[RuleOutcome]:
    if ctx.second.is_pregnant:
        yield RuleOutcome.block("Blocked: female is already pregnant")


RULES: tuple[Rule, ...] = (
    _parent_child,
    _same_mother,
    _same_father,
    _breeding_age,
    _fertility,
    _health,
    _pregnancy,
)


def recommendation_for(score: int, is_compatible: bool) -> str:
    if not is_compatible:
        return Recommendation.DO_NOT_BREED.value
    if score >= 90:
        return Recommendation.BEST_CHOICE.value
    if score >= 70:
        return Recommendation.GOOD_CHOICE.value
    if score >= 50:
        return Recommendation.ACCEPTABLE.value
    return Recommendation.NOT_RECOMMENDED.value


def evaluate(first: Sheep, second: Sheep, *, today: date | None = None) -> CompatibilityResult:
    """Score ``second`` as a mate for ``first``.

    ``second`` is treated as the candidate: only its pregnancy is checked.
    Expected litter size follows whichever of the two is female.
    """
    today = today or today_utc()
    female = first if first.gender == Gender.FEMALE.value else second
    ctx = PairContext(
        first=first,
        second=second,
        today=today,
        fertility1=resolve_fertility(first.fertility),
        fertility2=resolve_fertility(second.fertility),
        expected_litter_size=litter_size_for(female.fertility),
    )

    is_compatible = True
    score = BASE_SCORE
    reasons: list[str] = []
    for rule in RULES:
        for outcome in rule(ctx):
            reasons.append(outcome.reason)
            if outcome.kind is OutcomeKind.HARD_BLOCK:
                is_compatible = False
                score = 0
            elif is_compatible:
                score = max(0, score + outcome.delta)

    if not reasons:
        reasons.extend(DEFAULT_REASONS)

    return CompatibilityResult(
        is_compatible=is_compatible,
        score=max(0, score),
        reasons=reasons,
        recommendation=recommendation_for(score, is_compatible),
        fertility1=ctx.fertility1,
        fertility2=ctx.fertility2,
        expected_litter_size=ctx.expected_litter_size,
    )
