from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Mapping
from uuid import UUID, uuid4

from jose import jwt
from jose.exceptions import JWTError

from src.application.errors import AuthError


class JWTService:
    def __init__(
        self,
        *,
        secret_key: str,
        refresh_secret_key: str,
        algorithm: str,
        access_token_expires_minutes: int,
        refresh_token_expires_days: int = 7,
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.refresh_secret_key = refresh_secret_key
        self.algorithm = algorithm
        self.access_token_expires_minutes = access_token_expires_minutes
        self.refresh_token_expires_days = refresh_token_expires_days
        self.issuer = issuer
        self.audience = audience

    def _base_claims(self, subject: UUID, expires_at: datetime, typ: str) -> dict[str, Any]:
        now = datetime.now(timezone.utc)
        claims: dict[str, Any] = {
            "sub": str(subject),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "typ": typ,
            # Unique per token so two tokens minted in the same second differ
            "jti": uuid4().hex,
        }
        if self.issuer:
            claims["iss"] = self.issuer
        if self.audience:
            claims["aud"] = self.audience
        return claims

    def create_access_token(
        self,
        *,
        subject: UUID,
        extra_claims: Mapping[str, Any] | None = None,
    ) -> str:
        expires_at = datetime.now(timezone.utc) + timedelta(
            minutes=self.access_token_expires_minutes
        )
        to_encode = self._base_claims(subject, expires_at, "access")
        if extra_claims:
            to_encode.update(extra_claims)
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def refresh_token_expiry(self) -> datetime:
        return datetime.now(timezone.utc) + timedelta(days=self.refresh_token_expires_days)

    def create_refresh_token(self, *, subject: UUID, expires_at: datetime | None = None) -> str:
        to_encode = self._base_claims(
            subject, expires_at or self.refresh_token_expiry(), "refresh"
        )
        return jwt.encode(to_encode, self.refresh_secret_key, algorithm=self.algorithm)

    def _decode(self, token: str, key: str) -> dict[str, Any]:
        return jwt.decode(
            token,
            key,
            algorithms=[self.algorithm],
            issuer=self.issuer,
            audience=self.audience,
        )

    def decode(self, token: str) -> dict[str, Any]:
        try:
            claims = self._decode(token, self.secret_key)
        except JWTError as exc:
            raise AuthError("Invalid or expired token") from exc
        if claims.get("typ") != "access":
            raise AuthError("Invalid or expired token")
        return claims

    def decode_refresh(self, token: str) -> dict[str, Any]:
        try:
            claims = self._decode(token, self.refresh_secret_key)
        except JWTError as exc:
            raise AuthError("Invalid or expired refresh token") from exc
        if claims.get("typ") != "refresh":
            raise AuthError("Invalid or expired refresh token")
        return claims
