from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.user import User


@dataclass(slots=True)
class UpdateProfileInput:
    email: str | None = None
    farm_name: str | None = None


async def execute(*, uow: UnitOfWork, user_id: UUID, payload: UpdateProfileInput) -> User:
    user = await uow.users.get(user_id)
    if not user:
        raise NotFound("User not found")

    data: dict = {}
    if payload.email:
        email = payload.email.strip().lower()
        if email != user.email:
            taken = await uow.users.get_by_email(email)
            if taken and taken.id != user_id:
                raise ConflictError("Email already in use")
            data["email"] = email
    if payload.farm_name:
        data["farm_name"] = payload.farm_name.strip()

    if not data:
        return user
    updated = await uow.users.update_profile(user_id, data)
    if not updated:
        raise NotFound("User not found")
    await uow.commit()
    return updated
