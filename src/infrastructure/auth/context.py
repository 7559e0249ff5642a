from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.db.orm.user import UserORM


@dataclass(slots=True)
class AuthContext:
    user_id: UUID
    username: str
    claims: dict[str, Any]

    @property
    def owner_id(self) -> UUID:
        """Herd owner identity; every sheep query is scoped by it."""
        return self.user_id


async def fetch_user(session: AsyncSession, user_id: UUID) -> UserORM | None:
    stmt = select(UserORM).where(UserORM.id == user_id)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()
