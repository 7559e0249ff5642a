from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from src.domain.models.sheep import Sheep
from src.domain.value_objects.fertility import Fertility
from src.domain.value_objects.gender import Gender
from src.domain.value_objects.health_status import HealthStatus
from src.domain.value_objects.tag_number import RAW_TAG_PATTERN
from src.interfaces.http.schemas.base import CamelModel, Envelope

# Fields an update may explicitly reset to null
NULLABLE_UPDATE_FIELDS = {
    "mother": "mother_id",
    "father": "father_id",
    "fertility": "fertility",
    "pregnancy_start_date": "pregnancy_start_date",
}


class SheepSchema(CamelModel):
    id: UUID
    tag_number: str
    gender: Gender
    birth_date: date
    weight: float
    breed: str
    mother: UUID | None = None
    father: UUID | None = None
    fertility: Fertility | None = None
    is_pregnant: bool
    pregnancy_start_date: date | None = None
    health_status: HealthStatus
    notes: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, sheep: Sheep) -> SheepSchema:
        return cls(
            id=sheep.id,
            tag_number=sheep.tag_number,
            gender=sheep.gender,
            birth_date=sheep.birth_date,
            weight=sheep.weight,
            breed=sheep.breed,
            mother=sheep.mother_id,
            father=sheep.father_id,
            fertility=sheep.fertility,
            is_pregnant=sheep.is_pregnant,
            pregnancy_start_date=sheep.pregnancy_start_date,
            health_status=sheep.health_status,
            notes=sheep.notes,
            created_at=sheep.created_at,
            updated_at=sheep.updated_at,
        )


class SheepCreate(CamelModel):
    tag_number: str = Field(pattern=RAW_TAG_PATTERN.pattern)
    gender: Gender
    birth_date: date
    mother: UUID | None = None
    father: UUID | None = None
    weight: float = Field(ge=0, le=300)
    breed: str = Field(min_length=1, max_length=50)
    fertility: Fertility = Fertility.B_PLUS
    is_pregnant: bool = False
    pregnancy_start_date: date | None = None
    health_status: HealthStatus = HealthStatus.HEALTHY
    notes: str = Field(default="", max_length=500)


class SheepUpdate(CamelModel):
    tag_number: str | None = Field(default=None, pattern=RAW_TAG_PATTERN.pattern)
    gender: Gender | None = None
    birth_date: date | None = None
    mother: UUID | None = None
    father: UUID | None = None
    weight: float | None = Field(default=None, ge=0, le=300)
    breed: str | None = Field(default=None, min_length=1, max_length=50)
    fertility: Fertility | None = None
    is_pregnant: bool | None = None
    pregnancy_start_date: date | None = None
    health_status: HealthStatus | None = None
    notes: str | None = Field(default=None, max_length=500)

    def cleared_fields(self) -> frozenset[str]:
        """Domain names of nullable fields the client explicitly sent as null."""
        return frozenset(
            domain_name
            for name, domain_name in NULLABLE_UPDATE_FIELDS.items()
            if name in self.model_fields_set and getattr(self, name) is None
        )


class SheepData(CamelModel):
    sheep: SheepSchema


class SheepResponse(Envelope):
    data: SheepData


class SheepListData(CamelModel):
    sheep: list[SheepSchema]


class SheepListResponse(Envelope):
    results: int
    data: SheepListData


class FamilyData(CamelModel):
    sheep: SheepSchema
    mother: SheepSchema | None = None
    father: SheepSchema | None = None
    siblings: list[SheepSchema]
    offspring: list[SheepSchema]


class FamilyResponse(Envelope):
    data: FamilyData
