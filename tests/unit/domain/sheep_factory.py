from __future__ import annotations

from datetime import date, timedelta
from uuid import UUID, uuid4

from src.domain.models.sheep import Sheep

TODAY = date(2026, 1, 1)
OWNER_ID = uuid4()


def months_ago(months: float) -> date:
    # Same flat 30-day month the breeding-age rules use
    return TODAY - timedelta(days=round(months * 30))


def make_sheep(
    tag: str,
    gender: str = "female",
    *,
    age_months: float = 30,
    fertility: str | None = "BB",
    health_status: str = "healthy",
    is_pregnant: bool = False,
    mother_id: UUID | None = None,
    father_id: UUID | None = None,
) -> Sheep:
    return Sheep.create(
        owner_id=OWNER_ID,
        tag_number=tag,
        gender=gender,
        birth_date=months_ago(age_months),
        weight=60.0,
        breed="Assaf",
        mother_id=mother_id,
        father_id=father_id,
        fertility=fertility,
        is_pregnant=is_pregnant,
        health_status=health_status,
    )
