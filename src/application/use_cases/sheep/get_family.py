from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sheep import Sheep


@dataclass(slots=True)
class SheepFamily:
    sheep: Sheep
    mother: Sheep | None = None
    father: Sheep | None = None
    siblings: list[Sheep] = field(default_factory=list)
    offspring: list[Sheep] = field(default_factory=list)


async def execute(uow: UnitOfWork, owner_id: UUID, sheep_id: UUID) -> SheepFamily:
    """Direct relatives of a sheep: parents, half/full siblings and offspring."""
    sheep = await uow.sheep.get(owner_id, sheep_id)
    if not sheep:
        raise NotFound("Sheep not found")

    mother = await uow.sheep.get(owner_id, sheep.mother_id) if sheep.mother_id else None
    father = await uow.sheep.get(owner_id, sheep.father_id) if sheep.father_id else None
    siblings = []
    if sheep.mother_id or sheep.father_id:
        siblings = await uow.sheep.list_siblings(owner_id, sheep)
    offspring = await uow.sheep.list_offspring(owner_id, sheep.id)

    return SheepFamily(
        sheep=sheep,
        mother=mother,
        father=father,
        siblings=siblings,
        offspring=offspring,
    )
