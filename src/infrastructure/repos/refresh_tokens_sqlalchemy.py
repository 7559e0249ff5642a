from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.refresh_tokens import RefreshTokenRepository
from src.domain.models.refresh_token import RefreshToken
from src.infrastructure.db.orm.refresh_token import RefreshTokenORM


class RefreshTokensSQLAlchemyRepository(RefreshTokenRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: RefreshTokenORM) -> RefreshToken:
        return RefreshToken(
            id=orm.id,
            user_id=orm.user_id,
            token_hash=orm.token_hash,
            expires_at=orm.expires_at,
            created_at=orm.created_at,
        )

    async def add(self, token: RefreshToken) -> RefreshToken:
        orm = RefreshTokenORM(
            id=token.id,
            user_id=token.user_id,
            token_hash=token.token_hash,
            expires_at=token.expires_at,
            created_at=token.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list_for_user(self, user_id: UUID) -> list[RefreshToken]:
        stmt = (
            select(RefreshTokenORM)
            .where(RefreshTokenORM.user_id == user_id)
            .order_by(RefreshTokenORM.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def delete(self, token_id: UUID) -> None:
        await self.session.execute(delete(RefreshTokenORM).where(RefreshTokenORM.id == token_id))

    async def delete_by_hash(self, user_id: UUID, token_hash: str) -> bool:
        stmt = delete(RefreshTokenORM).where(
            RefreshTokenORM.user_id == user_id, RefreshTokenORM.token_hash == token_hash
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def delete_for_user(self, user_id: UUID) -> int:
        result = await self.session.execute(
            delete(RefreshTokenORM).where(RefreshTokenORM.user_id == user_id)
        )
        return result.rowcount or 0

    async def delete_expired_for_user(self, user_id: UUID) -> int:
        stmt = delete(RefreshTokenORM).where(
            RefreshTokenORM.user_id == user_id,
            RefreshTokenORM.expires_at <= datetime.now(timezone.utc),
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
