from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.sheep import (
    create_sheep,
    delete_sheep,
    get_family,
    get_sheep,
    list_sheep,
    update_sheep,
)
from src.domain.value_objects.gender import Gender
from src.domain.value_objects.health_status import HealthStatus
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.base import MessageResponse
from src.interfaces.http.schemas.sheep import (
    FamilyData,
    FamilyResponse,
    SheepCreate,
    SheepData,
    SheepListData,
    SheepListResponse,
    SheepResponse,
    SheepSchema,
    SheepUpdate,
)

router = APIRouter(prefix="/sheep", tags=["sheep"])


def _value(enum_member):
    return enum_member.value if enum_member is not None else None


@router.get("", response_model=SheepListResponse)
async def list_herd(
    gender: Gender | None = Query(default=None),
    health_status: HealthStatus | None = Query(default=None, alias="healthStatus"),
    breed: str | None = Query(default=None),
    search: str | None = Query(default=None),
    age_group: list_sheep.AgeGroup | None = Query(default=None, alias="ageGroup"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> SheepListResponse:
    herd = await list_sheep.execute(
        uow,
        context.owner_id,
        gender=_value(gender),
        health_status=_value(health_status),
        breed=breed,
        search=search,
        age_group=age_group,
    )
    return SheepListResponse(
        results=len(herd),
        data=SheepListData(sheep=[SheepSchema.from_domain(s) for s in herd]),
    )


@router.post("", response_model=SheepResponse, status_code=status.HTTP_201_CREATED)
async def create(
    payload: SheepCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> SheepResponse:
    sheep = await create_sheep.execute(
        uow,
        context.owner_id,
        create_sheep.CreateSheepInput(
            tag_number=payload.tag_number,
            gender=payload.gender.value,
            birth_date=payload.birth_date,
            weight=payload.weight,
            breed=payload.breed.strip(),
            mother_id=payload.mother,
            father_id=payload.father,
            fertility=payload.fertility.value,
            is_pregnant=payload.is_pregnant,
            pregnancy_start_date=payload.pregnancy_start_date,
            health_status=payload.health_status.value,
            notes=payload.notes,
        ),
    )
    return SheepResponse(data=SheepData(sheep=SheepSchema.from_domain(sheep)))


@router.get("/{sheep_id}", response_model=SheepResponse)
async def get_one(
    sheep_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> SheepResponse:
    sheep = await get_sheep.execute(uow, context.owner_id, sheep_id)
    return SheepResponse(data=SheepData(sheep=SheepSchema.from_domain(sheep)))


@router.put("/{sheep_id}", response_model=SheepResponse)
async def update(
    sheep_id: UUID,
    payload: SheepUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> SheepResponse:
    sheep = await update_sheep.execute(
        uow,
        context.owner_id,
        sheep_id,
        update_sheep.UpdateSheepInput(
            tag_number=payload.tag_number,
            gender=_value(payload.gender),
            birth_date=payload.birth_date,
            weight=payload.weight,
            breed=payload.breed.strip() if payload.breed else None,
            mother_id=payload.mother,
            father_id=payload.father,
            fertility=_value(payload.fertility),
            is_pregnant=payload.is_pregnant,
            pregnancy_start_date=payload.pregnancy_start_date,
            health_status=_value(payload.health_status),
            notes=payload.notes,
            cleared=payload.cleared_fields(),
        ),
    )
    return SheepResponse(data=SheepData(sheep=SheepSchema.from_domain(sheep)))


@router.delete("/{sheep_id}", response_model=MessageResponse)
async def delete(
    sheep_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> MessageResponse:
    await delete_sheep.execute(uow, context.owner_id, sheep_id)
    return MessageResponse(message="Sheep deleted successfully")


@router.get("/{sheep_id}/family", response_model=FamilyResponse)
async def family(
    sheep_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> FamilyResponse:
    result = await get_family.execute(uow, context.owner_id, sheep_id)
    return FamilyResponse(
        data=FamilyData(
            sheep=SheepSchema.from_domain(result.sheep),
            mother=SheepSchema.from_domain(result.mother) if result.mother else None,
            father=SheepSchema.from_domain(result.father) if result.father else None,
            siblings=[SheepSchema.from_domain(s) for s in result.siblings],
            offspring=[SheepSchema.from_domain(s) for s in result.offspring],
        )
    )
