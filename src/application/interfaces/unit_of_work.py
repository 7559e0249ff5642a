from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.refresh_tokens import RefreshTokenRepository
from src.application.interfaces.repositories.sheep import SheepRepository
from src.application.interfaces.repositories.users import UserRepository


class UnitOfWork(Protocol):
    sheep: SheepRepository
    users: UserRepository
    refresh_tokens: RefreshTokenRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
