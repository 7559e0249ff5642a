from __future__ import annotations

from datetime import date
from enum import Enum
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.constants import LAMB_AGE_LIMIT_MONTHS
from src.domain.models.sheep import Sheep
from src.domain.services.breeding_age import age_in_months, today_utc


class AgeGroup(str, Enum):
    LAMB = "lamb"
    ADULT = "adult"


def matches_age_group(sheep: Sheep, age_group: AgeGroup, today: date) -> bool:
    age = age_in_months(sheep.birth_date, today)
    if age_group is AgeGroup.LAMB:
        return age < LAMB_AGE_LIMIT_MONTHS
    return age >= LAMB_AGE_LIMIT_MONTHS


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    *,
    gender: str | None = None,
    health_status: str | None = None,
    breed: str | None = None,
    search: str | None = None,
    age_group: AgeGroup | None = None,
    today: date | None = None,
) -> list[Sheep]:
    """List the owner's sheep, newest first.

    ``breed`` and ``search`` (tag number) are case-insensitive substring
    filters. Age groups are applied after the query since age depends on the
    current date.
    """
    items = await uow.sheep.list(
        owner_id,
        gender=gender,
        health_status=health_status,
        breed=breed,
        search=search,
    )
    if age_group is None:
        return items
    today = today or today_utc()
    return [s for s in items if matches_age_group(s, AgeGroup(age_group), today)]
