from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from src.domain.models.sheep import Sheep
from src.domain.services.breeding_age import is_breeding_age, litter_size_for, today_utc
from src.domain.value_objects.gender import Gender


@dataclass(slots=True, frozen=True)
class BreedingStats:
    total_males: int = 0
    total_females: int = 0
    males_with_offspring: int = 0
    females_with_offspring: int = 0
    breeding_age_males: int = 0
    breeding_age_females: int = 0
    total_pairs: int = 0
    growth_potential: float = 0.0


def can_sire(sheep: Sheep, today: date) -> bool:
    return is_breeding_age(sheep, today) and sheep.is_healthy


def can_conceive(sheep: Sheep, today: date) -> bool:
    return is_breeding_age(sheep, today) and sheep.is_healthy and not sheep.is_pregnant


def compute_stats(herd: list[Sheep], *, today: date | None = None) -> BreedingStats:
    """Aggregate breeding figures for one owner's herd snapshot."""
    today = today or today_utc()
    males = [s for s in herd if s.gender == Gender.MALE.value]
    females = [s for s in herd if s.gender == Gender.FEMALE.value]

    parent_ids = {s.mother_id for s in herd if s.mother_id is not None}
    parent_ids |= {s.father_id for s in herd if s.father_id is not None}

    breeding_males = [m for m in males if can_sire(m, today)]
    breeding_females = [f for f in females if can_conceive(f, today)]

    # Summed as Decimal, rounded half-up to tenths
    projected = sum(
        (Decimal(str(litter_size_for(f.fertility))) for f in breeding_females),
        Decimal("0"),
    )

    return BreedingStats(
        total_males=len(males),
        total_females=len(females),
        males_with_offspring=sum(1 for m in males if m.id in parent_ids),
        females_with_offspring=sum(1 for f in females if f.id in parent_ids),
        breeding_age_males=len(breeding_males),
        breeding_age_females=len(breeding_females),
        total_pairs=len(breeding_males) * len(breeding_females),
        growth_potential=float(projected.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)),
    )
