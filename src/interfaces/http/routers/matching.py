from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from src.application.use_cases.matching import get_breeding_stats, get_valid_matches
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.matching import (
    BreedingStatsSchema,
    MatchListData,
    MatchListResponse,
    MatchSchema,
    StatsData,
    StatsResponse,
)

router = APIRouter(prefix="/matching", tags=["matching"])


# Declared before /{sheep_id} so "stats" is not parsed as an id
@router.get("/stats", response_model=StatsResponse)
async def breeding_stats(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> StatsResponse:
    stats = await get_breeding_stats.execute(uow, context.owner_id)
    return StatsResponse(data=StatsData(stats=BreedingStatsSchema.from_domain(stats)))


@router.get("/{sheep_id}", response_model=MatchListResponse)
async def valid_matches(
    sheep_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> MatchListResponse:
    matches = await get_valid_matches.execute(uow, context.owner_id, sheep_id)
    return MatchListResponse(
        results=len(matches),
        data=MatchListData(matches=[MatchSchema.from_result(m) for m in matches]),
    )
