from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

DEFAULT_FARM_NAME = "My Farm"


@dataclass(slots=True)
class User:
    id: UUID
    username: str
    email: str
    hashed_password: str
    farm_name: str = DEFAULT_FARM_NAME
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        hashed_password: str,
        *,
        farm_name: str | None = None,
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            username=username.strip(),
            email=email.strip().lower(),
            hashed_password=hashed_password,
            farm_name=(farm_name or DEFAULT_FARM_NAME).strip(),
            created_at=now,
            updated_at=now,
        )
