from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.use_cases.users import update_profile
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.auth import UserData, UserResponse, UserSchema
from src.interfaces.http.schemas.users import UpdateProfileRequest

router = APIRouter(prefix="/users", tags=["users"])


@router.put("/profile", response_model=UserResponse)
async def update_user_profile(
    payload: UpdateProfileRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> UserResponse:
    user = await update_profile.execute(
        uow=uow,
        user_id=context.user_id,
        payload=update_profile.UpdateProfileInput(
            email=payload.email, farm_name=payload.farm_name
        ),
    )
    return UserResponse(data=UserData(user=UserSchema.from_domain(user)))
