from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.application.use_cases.auth import get_me, login, logout, refresh_session, signup
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.interfaces.http.deps import (
    get_auth_context,
    get_jwt_service,
    get_password_hasher,
    get_uow,
)
from src.interfaces.http.schemas.auth import (
    AuthData,
    AuthResponse,
    LoginRequest,
    LogoutRequest,
    RefreshRequest,
    SignupRequest,
    TokenPairData,
    TokenPairResponse,
    UserData,
    UserResponse,
    UserSchema,
)
from src.interfaces.http.schemas.base import MessageResponse

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(result: signup.AuthResult) -> AuthResponse:
    return AuthResponse(
        data=AuthData(
            user=UserSchema.from_domain(result.user),
            access_token=result.access_token,
            refresh_token=result.refresh_token,
        )
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup_user(
    payload: SignupRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AuthResponse:
    result = await signup.execute(
        uow=uow,
        payload=signup.SignupInput(
            username=payload.username,
            email=payload.email,
            password=payload.password,
            farm_name=payload.farm_name,
        ),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    return _auth_response(result)


@router.post("/login", response_model=AuthResponse)
async def login_user(
    payload: LoginRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AuthResponse:
    result = await login.execute(
        uow=uow,
        payload=login.LoginInput(username=payload.username, password=payload.password),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    return _auth_response(result)


@router.post("/refresh", response_model=TokenPairResponse)
async def refresh_tokens(
    payload: RefreshRequest,
    uow=Depends(get_uow),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> TokenPairResponse:
    tokens = await refresh_session.execute(
        uow=uow, refresh_token=payload.refresh_token, jwt_service=jwt_service
    )
    return TokenPairResponse(
        data=TokenPairData(access_token=tokens.access_token, refresh_token=tokens.refresh_token)
    )


@router.post("/logout", response_model=MessageResponse)
async def logout_user(
    payload: LogoutRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> MessageResponse:
    await logout.execute(uow=uow, user_id=context.user_id, refresh_token=payload.refresh_token)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def read_me(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> UserResponse:
    user = await get_me.execute(uow=uow, user_id=context.user_id)
    return UserResponse(data=UserData(user=UserSchema.from_domain(user)))
