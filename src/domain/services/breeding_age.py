from __future__ import annotations

from datetime import date, datetime, timezone

from src.domain.constants import (
    DAYS_PER_MONTH,
    DEFAULT_FERTILITY,
    DEFAULT_LITTER_SIZE,
    LITTER_SIZES,
    MIN_BREEDING_AGE_MONTHS,
)
from src.domain.models.sheep import Sheep


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def age_in_months(birth_date: date, today: date) -> float:
    """Age using a flat 30-day month, not calendar months."""
    return (today - birth_date).days / DAYS_PER_MONTH


def is_breeding_age(sheep: Sheep, today: date) -> bool:
    return age_in_months(sheep.birth_date, today) >= MIN_BREEDING_AGE_MONTHS[sheep.gender]


def resolve_fertility(fertility: str | None) -> str:
    return fertility or DEFAULT_FERTILITY


def litter_size_for(fertility: str | None) -> float:
    return LITTER_SIZES.get(resolve_fertility(fertility), DEFAULT_LITTER_SIZE)
