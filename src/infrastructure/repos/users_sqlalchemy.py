from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.repositories.users import UserRepository
from src.domain.models.user import User
from src.infrastructure.db.orm.user import UserORM

PROFILE_FIELDS = frozenset({"email", "farm_name"})


class UsersSQLAlchemyRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: UserORM) -> User:
        return User(
            id=orm.id,
            username=orm.username,
            email=orm.email,
            hashed_password=orm.hashed_password,
            farm_name=orm.farm_name,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def _first(self, stmt) -> User | None:
        result = await self.session.execute(stmt)
        orm = result.scalars().first()
        return self._to_domain(orm) if orm else None

    async def add(self, user: User) -> User:
        orm = UserORM(
            id=user.id,
            username=user.username,
            email=user.email,
            hashed_password=user.hashed_password,
            farm_name=user.farm_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Username or email already registered") from exc
        return self._to_domain(orm)

    async def get(self, user_id: UUID) -> User | None:
        return await self._first(select(UserORM).where(UserORM.id == user_id))

    async def get_by_username(self, username: str) -> User | None:
        return await self._first(select(UserORM).where(UserORM.username == username))

    async def get_by_email(self, email: str) -> User | None:
        return await self._first(select(UserORM).where(UserORM.email == email.lower()))

    async def get_by_username_or_email(self, username: str, email: str) -> User | None:
        # an exact username hit wins so the caller can report which field clashed
        stmt = (
            select(UserORM)
            .where(or_(UserORM.username == username, UserORM.email == email.lower()))
            .order_by((UserORM.username == username).desc())
        )
        return await self._first(stmt)

    async def _load(self, user_id: UUID) -> UserORM | None:
        result = await self.session.execute(select(UserORM).where(UserORM.id == user_id))
        return result.scalar_one_or_none()

    async def update_profile(self, user_id: UUID, data: dict) -> User | None:
        orm = await self._load(user_id)
        if not orm:
            return None
        for name, value in data.items():
            if name in PROFILE_FIELDS:
                setattr(orm, name, value)
        orm.updated_at = datetime.now(timezone.utc)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Email already in use") from exc
        return self._to_domain(orm)

    async def update_password(self, user_id: UUID, hashed_password: str) -> None:
        orm = await self._load(user_id)
        if not orm:
            raise NotFound("User not found")
        orm.hashed_password = hashed_password
        orm.updated_at = datetime.now(timezone.utc)
        await self.session.flush()
