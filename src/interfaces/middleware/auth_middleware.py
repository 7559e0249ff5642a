from __future__ import annotations

from typing import Iterable
from uuid import UUID

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AuthError
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext, fetch_user
from src.interfaces.middleware.error_handler import error_payload

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/api/v1/auth/signup",
    "/api/v1/auth/login",
    "/api/v1/auth/refresh",
    "/docs",
    "/openapi.json",
    "/redoc",
)


class AuthMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            authorization = request.headers.get("Authorization")
            if not authorization:
                raise AuthError("Not authorized, no token")
            scheme, _, token = authorization.partition(" ")
            if scheme.lower() != "bearer" or not token:
                raise AuthError("Invalid Authorization header")
            jwt_service = getattr(request.app.state, "jwt_service", None)
            if jwt_service is None:
                raise RuntimeError("JWT service not configured")
            claims = jwt_service.decode(token)

            subject = claims.get("sub")
            if not subject:
                raise AuthError("Token missing subject")
            try:
                user_id = UUID(str(subject))
            except ValueError as exc:
                raise AuthError("Token subject is not a valid UUID") from exc
            session_factory = getattr(request.app.state, "session_factory", None)
            if session_factory is None:
                raise RuntimeError("Session factory not configured")
            async with session_factory() as session:
                user = await fetch_user(session, user_id)
            if not user:
                raise AuthError("User no longer exists")
            request.state.auth_context = AuthContext(
                user_id=user_id,
                username=user.username,
                claims=claims,
            )
            return await call_next(request)
        except AuthError as exc:
            return JSONResponse(status_code=exc.status_code, content=error_payload(exc))
