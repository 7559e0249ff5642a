from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.auth.session_tokens import hash_token


async def execute(*, uow: UnitOfWork, user_id: UUID, refresh_token: str) -> None:
    await uow.refresh_tokens.delete_by_hash(user_id, hash_token(refresh_token))
    await uow.commit()
