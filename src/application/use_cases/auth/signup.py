from __future__ import annotations

import logging
from dataclasses import dataclass

from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.auth.session_tokens import issue_token_pair
from src.domain.models.user import User
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SignupInput:
    username: str
    email: str
    password: str
    farm_name: str | None = None


@dataclass(slots=True)
class AuthResult:
    user: User
    access_token: str
    refresh_token: str


async def execute(
    *,
    uow: UnitOfWork,
    payload: SignupInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
) -> AuthResult:
    username = payload.username.strip()
    email = payload.email.strip().lower()
    existing = await uow.users.get_by_username_or_email(username, email)
    if existing:
        if existing.username == username:
            raise ConflictError("Username already exists")
        raise ConflictError("Email already exists")

    user = User.create(
        username=username,
        email=email,
        hashed_password=password_hasher.hash(payload.password),
        farm_name=payload.farm_name,
    )
    created = await uow.users.add(user)
    tokens = await issue_token_pair(uow, created.id, jwt_service)
    await uow.commit()
    logger.info("New account %s (%s)", created.username, created.id)
    return AuthResult(
        user=created,
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
    )
