from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import AuthError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.auth.session_tokens import issue_token_pair
from src.application.use_cases.auth.signup import AuthResult
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class LoginInput:
    username: str
    password: str


async def execute(
    *,
    uow: UnitOfWork,
    payload: LoginInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
) -> AuthResult:
    user = await uow.users.get_by_username(payload.username.strip())
    if not user or not password_hasher.verify(payload.password, user.hashed_password):
        raise AuthError("Invalid username or password")

    if password_hasher.needs_rehash(user.hashed_password):
        user.hashed_password = password_hasher.hash(payload.password)
        await uow.users.update_password(user.id, user.hashed_password)

    await uow.refresh_tokens.delete_expired_for_user(user.id)
    tokens = await issue_token_pair(uow, user.id, jwt_service)
    await uow.commit()
    return AuthResult(
        user=user,
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
    )
