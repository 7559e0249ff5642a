from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.fertility import Fertility
from src.domain.value_objects.health_status import HealthStatus


@dataclass(slots=True)
class Sheep:
    id: UUID
    owner_id: UUID
    tag_number: str
    gender: str
    birth_date: date
    weight: float = 0.0
    breed: str = ""

    # Genealogy: ids of animals in the same owner's herd, None when unknown
    mother_id: UUID | None = None
    father_id: UUID | None = None

    fertility: str | None = Fertility.B_PLUS.value
    is_pregnant: bool = False
    pregnancy_start_date: date | None = None
    health_status: str = HealthStatus.HEALTHY.value
    notes: str = ""

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        tag_number: str,
        gender: str,
        birth_date: date,
        weight: float = 0.0,
        breed: str = "",
        mother_id: UUID | None = None,
        father_id: UUID | None = None,
        fertility: str | None = Fertility.B_PLUS.value,
        is_pregnant: bool = False,
        pregnancy_start_date: date | None = None,
        health_status: str = HealthStatus.HEALTHY.value,
        notes: str = "",
    ) -> Sheep:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            owner_id=owner_id,
            tag_number=tag_number,
            gender=gender,
            birth_date=birth_date,
            weight=weight,
            breed=breed,
            mother_id=mother_id,
            father_id=father_id,
            fertility=fertility,
            is_pregnant=is_pregnant,
            pregnancy_start_date=pregnancy_start_date,
            health_status=health_status,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_healthy(self) -> bool:
        return self.health_status == HealthStatus.HEALTHY.value

    def is_parent_of(self, other: Sheep) -> bool:
        return self.id in (other.mother_id, other.father_id)
