from __future__ import annotations

import dataclasses
import logging
from datetime import date
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sheep import Sheep
from src.domain.services.breeding_age import is_breeding_age, today_utc
from src.domain.services.compatibility import CompatibilityResult, evaluate
from src.domain.value_objects.gender import Gender

logger = logging.getLogger(__name__)


def is_candidate(sheep: Sheep, gender: Gender, today: date) -> bool:
    return sheep.gender == gender.value and not sheep.is_pregnant and is_breeding_age(sheep, today)


def rank_matches(
    target_id: UUID,
    herd: list[Sheep],
    *,
    today: date | None = None,
) -> list[CompatibilityResult]:
    """Evaluate every eligible mate for ``target_id`` within ``herd``.

    Candidates are opposite-gender, not pregnant and of breeding age for their
    own gender. Compatible pairs come first, then higher scores; ties keep herd
    order.
    """
    today = today or today_utc()
    target = next((s for s in herd if s.id == target_id), None)
    if target is None:
        raise NotFound("Sheep not found")

    wanted = Gender(target.gender).opposite()
    matches = [
        dataclasses.replace(evaluate(target, candidate, today=today), sheep=candidate)
        for candidate in herd
        if is_candidate(candidate, wanted, today)
    ]
    # sorted() is stable, so equal keys keep insertion order
    return sorted(matches, key=lambda m: (not m.is_compatible, -m.score))


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    sheep_id: UUID,
    *,
    today: date | None = None,
) -> list[CompatibilityResult]:
    herd = await uow.sheep.list_for_owner(owner_id)
    matches = rank_matches(sheep_id, herd, today=today)
    logger.debug(
        "Ranked %d candidates for sheep %s (herd size %d)", len(matches), sheep_id, len(herd)
    )
    return matches
