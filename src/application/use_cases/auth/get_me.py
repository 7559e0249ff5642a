from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.user import User


async def execute(*, uow: UnitOfWork, user_id: UUID) -> User:
    user = await uow.users.get(user_id)
    if not user:
        raise NotFound("User not found")
    return user
