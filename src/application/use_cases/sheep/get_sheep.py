from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sheep import Sheep


async def execute(uow: UnitOfWork, owner_id: UUID, sheep_id: UUID) -> Sheep:
    sheep = await uow.sheep.get(owner_id, sheep_id)
    if not sheep:
        raise NotFound("Sheep not found")
    return sheep
