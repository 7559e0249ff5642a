from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.sheep import Sheep


class SheepRepository(Protocol):
    async def add(self, sheep: Sheep) -> Sheep: ...

    async def get(self, owner_id: UUID, sheep_id: UUID) -> Sheep | None: ...

    async def list(
        self,
        owner_id: UUID,
        *,
        gender: str | None = None,
        health_status: str | None = None,
        breed: str | None = None,
        search: str | None = None,
    ) -> list[Sheep]: ...

    # Full, unfiltered herd snapshot for breeding computations
    async def list_for_owner(self, owner_id: UUID) -> list[Sheep]: ...

    async def find_by_tag(
        self, owner_id: UUID, tag_number: str, *, exclude_id: UUID | None = None
    ) -> Sheep | None: ...

    async def update(self, owner_id: UUID, sheep_id: UUID, data: dict) -> Sheep | None: ...

    async def delete(self, owner_id: UUID, sheep_id: UUID) -> bool: ...

    async def has_offspring(self, owner_id: UUID, sheep_id: UUID) -> bool: ...

    async def list_siblings(self, owner_id: UUID, sheep: Sheep) -> list[Sheep]: ...

    async def list_offspring(self, owner_id: UUID, sheep_id: UUID) -> list[Sheep]: ...
