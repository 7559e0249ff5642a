from __future__ import annotations

import hashlib
from dataclasses import dataclass
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.refresh_token import RefreshToken
from src.infrastructure.auth.jwt_service import JWTService


@dataclass(slots=True)
class TokenPair:
    access_token: str
    refresh_token: str


def hash_token(token: str) -> str:
    # bcrypt truncates at 72 bytes, refresh JWTs are longer
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


async def issue_token_pair(uow: UnitOfWork, user_id: UUID, jwt_service: JWTService) -> TokenPair:
    """Mint an access/refresh pair and persist the refresh token's digest.

    The caller commits.
    """
    expires_at = jwt_service.refresh_token_expiry()
    access_token = jwt_service.create_access_token(subject=user_id)
    refresh_token = jwt_service.create_refresh_token(subject=user_id, expires_at=expires_at)
    await uow.refresh_tokens.add(
        RefreshToken.create(
            user_id=user_id,
            token_hash=hash_token(refresh_token),
            expires_at=expires_at,
        )
    )
    return TokenPair(access_token=access_token, refresh_token=refresh_token)
