from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, InfrastructureError
from src.application.interfaces.repositories.sheep import SheepRepository
from src.domain.models.sheep import Sheep
from src.infrastructure.db.orm.sheep import SheepORM

_COLUMNS = (
    "id",
    "owner_id",
    "tag_number",
    "gender",
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
    "created_at",
    "updated_at",
)


class SheepSQLAlchemyRepository(SheepRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: SheepORM) -> Sheep:
        return Sheep(**{name: getattr(orm, name) for name in _COLUMNS})

    async def _fetch(self, owner_id: UUID, sheep_id: UUID) -> SheepORM | None:
        stmt = select(SheepORM).where(SheepORM.owner_id == owner_id, SheepORM.id == sheep_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add(self, sheep: Sheep) -> Sheep:
        orm = SheepORM(**{name: getattr(sheep, name) for name in _COLUMNS})
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Sheep with this tag number already exists") from exc
        return self._to_domain(orm)

    async def get(self, owner_id: UUID, sheep_id: UUID) -> Sheep | None:
        orm = await self._fetch(owner_id, sheep_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        owner_id: UUID,
        *,
        gender: str | None = None,
        health_status: str | None = None,
        breed: str | None = None,
        search: str | None = None,
    ) -> list[Sheep]:
        stmt = select(SheepORM).where(SheepORM.owner_id == owner_id)
        if gender:
            stmt = stmt.where(SheepORM.gender == gender)
        if health_status:
            stmt = stmt.where(SheepORM.health_status == health_status)
        if breed:
            stmt = stmt.where(SheepORM.breed.ilike(f"%{breed}%"))
        if search:
            stmt = stmt.where(SheepORM.tag_number.ilike(f"%{search}%"))
        stmt = stmt.order_by(SheepORM.created_at.desc(), SheepORM.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def list_for_owner(self, owner_id: UUID) -> list[Sheep]:
        stmt = select(SheepORM).where(SheepORM.owner_id == owner_id).order_by(SheepORM.created_at)
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def find_by_tag(
        self, owner_id: UUID, tag_number: str, *, exclude_id: UUID | None = None
    ) -> Sheep | None:
        stmt = select(SheepORM).where(
            SheepORM.owner_id == owner_id, SheepORM.tag_number == tag_number
        )
        if exclude_id is not None:
            stmt = stmt.where(SheepORM.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, owner_id: UUID, sheep_id: UUID, data: dict) -> Sheep | None:
        orm = await self._fetch(owner_id, sheep_id)
        if not orm:
            return None
        for name, value in data.items():
            if name not in _COLUMNS or name in ("id", "owner_id", "created_at"):
                raise InfrastructureError(f"Unsupported sheep field: {name}")
            setattr(orm, name, value)
        # an onupdate default would expire this column after flush
        orm.updated_at = datetime.now(timezone.utc)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Sheep with this tag number already exists") from exc
        return self._to_domain(orm)

    async def delete(self, owner_id: UUID, sheep_id: UUID) -> bool:
        stmt = delete(SheepORM).where(SheepORM.owner_id == owner_id, SheepORM.id == sheep_id)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete sheep") from exc
        return result.rowcount > 0

    async def has_offspring(self, owner_id: UUID, sheep_id: UUID) -> bool:
        stmt = (
            select(SheepORM.id)
            .where(SheepORM.owner_id == owner_id)
            .where(or_(SheepORM.mother_id == sheep_id, SheepORM.father_id == sheep_id))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_siblings(self, owner_id: UUID, sheep: Sheep) -> list[Sheep]:
        shared = []
        if sheep.mother_id is not None:
            shared.append(SheepORM.mother_id == sheep.mother_id)
        if sheep.father_id is not None:
            shared.append(SheepORM.father_id == sheep.father_id)
        if not shared:
            return []
        stmt = (
            select(SheepORM)
            .where(SheepORM.owner_id == owner_id, SheepORM.id != sheep.id)
            .where(or_(*shared))
            .order_by(SheepORM.birth_date, SheepORM.tag_number)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def list_offspring(self, owner_id: UUID, sheep_id: UUID) -> list[Sheep]:
        stmt = (
            select(SheepORM)
            .where(SheepORM.owner_id == owner_id)
            .where(or_(SheepORM.mother_id == sheep_id, SheepORM.father_id == sheep_id))
            .order_by(SheepORM.birth_date, SheepORM.tag_number)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]
