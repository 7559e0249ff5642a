from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import BadRequest, ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sheep import Sheep
from src.domain.value_objects.fertility import Fertility
from src.domain.value_objects.health_status import HealthStatus
from src.domain.value_objects.tag_number import format_tag_number

logger = logging.getLogger(__name__)

DUPLICATE_TAG_MESSAGE = "A sheep with this tag number already exists"


@dataclass(slots=True)
class CreateSheepInput:
    tag_number: str
    gender: str
    birth_date: date
    weight: float
    breed: str
    # Genealogy fields
    mother_id: UUID | None = None
    father_id: UUID | None = None
    fertility: str = Fertility.B_PLUS.value
    is_pregnant: bool = False
    pregnancy_start_date: date | None = None
    health_status: str = HealthStatus.HEALTHY.value
    notes: str = ""


async def ensure_parent_in_herd(
    uow: UnitOfWork, owner_id: UUID, parent_id: UUID, label: str
) -> None:
    parent = await uow.sheep.get(owner_id, parent_id)
    if not parent:
        raise BadRequest(f"{label} sheep not found in your herd")


async def execute(uow: UnitOfWork, owner_id: UUID, payload: CreateSheepInput) -> Sheep:
    tag_number = format_tag_number(payload.tag_number, payload.gender)
    if await uow.sheep.find_by_tag(owner_id, tag_number):
        raise ConflictError(DUPLICATE_TAG_MESSAGE)

    if payload.mother_id:
        await ensure_parent_in_herd(uow, owner_id, payload.mother_id, "Mother")
    if payload.father_id:
        await ensure_parent_in_herd(uow, owner_id, payload.father_id, "Father")

    sheep = Sheep.create(
        owner_id=owner_id,
        tag_number=tag_number,
        gender=payload.gender,
        birth_date=payload.birth_date,
        weight=payload.weight,
        breed=payload.breed,
        mother_id=payload.mother_id,
        father_id=payload.father_id,
        fertility=payload.fertility,
        is_pregnant=payload.is_pregnant,
        pregnancy_start_date=payload.pregnancy_start_date,
        health_status=payload.health_status,
        notes=payload.notes,
    )
    created = await uow.sheep.add(sheep)
    await uow.commit()
    logger.info("Sheep %s registered for owner %s", created.tag_number, owner_id)
    return created
