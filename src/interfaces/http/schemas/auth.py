from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from src.domain.models.user import User
from src.interfaces.http.schemas.base import CamelModel, Envelope


class UserSchema(CamelModel):
    id: UUID
    username: str
    email: EmailStr
    farm_name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> UserSchema:
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            farm_name=user.farm_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class SignupRequest(CamelModel):
    username: str = Field(min_length=3, max_length=30)
    email: EmailStr
    password: str = Field(min_length=6, max_length=100)
    farm_name: str | None = Field(default=None, max_length=100)


class LoginRequest(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class RefreshRequest(CamelModel):
    refresh_token: str = Field(min_length=1)


class LogoutRequest(CamelModel):
    refresh_token: str = Field(min_length=1)


class AuthData(CamelModel):
    user: UserSchema
    access_token: str
    refresh_token: str


class AuthResponse(Envelope):
    data: AuthData


class TokenPairData(CamelModel):
    access_token: str
    refresh_token: str


class TokenPairResponse(Envelope):
    data: TokenPairData


class UserData(CamelModel):
    user: UserSchema


class UserResponse(Envelope):
    data: UserData
