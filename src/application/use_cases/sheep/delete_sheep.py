from __future__ import annotations

from uuid import UUID

from src.application.errors import BadRequest, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, owner_id: UUID, sheep_id: UUID) -> None:
    if await uow.sheep.has_offspring(owner_id, sheep_id):
        raise BadRequest(
            "Cannot delete a sheep that has offspring. Remove or reassign offspring first."
        )
    deleted = await uow.sheep.delete(owner_id, sheep_id)
    if not deleted:
        raise NotFound("Sheep not found")
    await uow.commit()
