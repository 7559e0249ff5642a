from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.sheep.create_sheep import (
    DUPLICATE_TAG_MESSAGE,
    ensure_parent_in_herd,
)
from src.domain.models.sheep import Sheep
from src.domain.value_objects.tag_number import format_tag_number, numeric_part

UPDATABLE_FIELDS = (
    "birth_date",
    "weight",
    "breed",
    "mother_id",
    "father_id",
    "fertility",
    "is_pregnant",
    "pregnancy_start_date",
    "health_status",
    "notes",
)


@dataclass(slots=True)
class UpdateSheepInput:
    tag_number: str | None = None
    gender: str | None = None
    birth_date: date | None = None
    weight: float | None = None
    breed: str | None = None
    # Genealogy fields
    mother_id: UUID | None = None
    father_id: UUID | None = None
    fertility: str | None = None
    is_pregnant: bool | None = None
    pregnancy_start_date: date | None = None
    health_status: str | None = None
    notes: str | None = None
    # Nullable fields explicitly sent as null, e.g. {"mother_id", "pregnancy_start_date"}
    cleared: frozenset[str] = frozenset()


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    sheep_id: UUID,
    payload: UpdateSheepInput,
) -> Sheep:
    existing = await uow.sheep.get(owner_id, sheep_id)
    if not existing:
        raise NotFound("Sheep not found")

    data: dict = {}
    for field_name in UPDATABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
        elif field_name in payload.cleared:
            data[field_name] = None

    if payload.tag_number is not None or payload.gender is not None:
        gender = payload.gender or existing.gender
        raw_tag = (
            payload.tag_number
            if payload.tag_number is not None
            else numeric_part(existing.tag_number)
        )
        tag_number = format_tag_number(raw_tag, gender)
        duplicate = await uow.sheep.find_by_tag(owner_id, tag_number, exclude_id=sheep_id)
        if duplicate:
            raise ConflictError(DUPLICATE_TAG_MESSAGE)
        data["tag_number"] = tag_number
        data["gender"] = gender

    if payload.mother_id:
        await ensure_parent_in_herd(uow, owner_id, payload.mother_id, "Mother")
    if payload.father_id:
        await ensure_parent_in_herd(uow, owner_id, payload.father_id, "Father")

    if not data:
        return existing
    updated = await uow.sheep.update(owner_id, sheep_id, data)
    if not updated:
        raise NotFound("Sheep not found")
    await uow.commit()
    return updated
