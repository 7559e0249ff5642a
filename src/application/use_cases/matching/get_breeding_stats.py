from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.services.herd_stats import BreedingStats, compute_stats


async def execute(uow: UnitOfWork, owner_id: UUID, *, today: date | None = None) -> BreedingStats:
    herd = await uow.sheep.list_for_owner(owner_id)
    return compute_stats(herd, today=today)
