from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.refresh_token import RefreshToken


class RefreshTokenRepository(Protocol):
    async def add(self, token: RefreshToken) -> RefreshToken: ...

    async def list_for_user(self, user_id: UUID) -> list[RefreshToken]: ...

    async def delete(self, token_id: UUID) -> None: ...

    async def delete_by_hash(self, user_id: UUID, token_hash: str) -> bool: ...

    async def delete_for_user(self, user_id: UUID) -> int: ...

    async def delete_expired_for_user(self, user_id: UUID) -> int: ...
