from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import AuthError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.auth.session_tokens import TokenPair, hash_token, issue_token_pair
from src.infrastructure.auth.jwt_service import JWTService

logger = logging.getLogger(__name__)


async def execute(*, uow: UnitOfWork, refresh_token: str, jwt_service: JWTService) -> TokenPair:
    """Rotate a refresh token.

    A token that verifies but is no longer on record has already been used
    (or revoked), so every session of that user is revoked.
    """
    claims = jwt_service.decode_refresh(refresh_token)
    try:
        user_id = UUID(str(claims.get("sub")))
    except ValueError as exc:
        raise AuthError("Invalid or expired refresh token") from exc

    user = await uow.users.get(user_id)
    if not user:
        raise AuthError("User not found")

    token_hash = hash_token(refresh_token)
    stored = await uow.refresh_tokens.list_for_user(user_id)
    current = next(
        (t for t in stored if t.token_hash == token_hash and not t.is_expired()),
        None,
    )
    if current is None:
        revoked = await uow.refresh_tokens.delete_for_user(user_id)
        await uow.commit()
        logger.warning(
            "Unrecognized refresh token for user %s; revoked %d sessions", user_id, revoked
        )
        raise AuthError("Refresh token not recognized. All sessions revoked.")

    await uow.refresh_tokens.delete(current.id)
    tokens = await issue_token_pair(uow, user_id, jwt_service)
    await uow.commit()
    return tokens
