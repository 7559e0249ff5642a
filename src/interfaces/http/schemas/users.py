from __future__ import annotations

from pydantic import EmailStr, Field

from src.interfaces.http.schemas.base import CamelModel


class UpdateProfileRequest(CamelModel):
    email: EmailStr | None = None
    farm_name: str | None = Field(default=None, min_length=1, max_length=100)
