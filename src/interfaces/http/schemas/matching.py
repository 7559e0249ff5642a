from __future__ import annotations

from src.domain.services.compatibility import CompatibilityResult
from src.domain.services.herd_stats import BreedingStats
from src.interfaces.http.schemas.base import CamelModel, Envelope
from src.interfaces.http.schemas.sheep import SheepSchema


class MatchSchema(CamelModel):
    sheep: SheepSchema
    is_compatible: bool
    score: int
    reasons: list[str]
    recommendation: str
    fertility1: str
    fertility2: str
    expected_litter_size: float

    @classmethod
    def from_result(cls, result: CompatibilityResult) -> MatchSchema:
        return cls(
            sheep=SheepSchema.from_domain(result.sheep),
            is_compatible=result.is_compatible,
            score=result.score,
            reasons=list(result.reasons),
            recommendation=result.recommendation,
            fertility1=result.fertility1,
            fertility2=result.fertility2,
            expected_litter_size=result.expected_litter_size,
        )


class MatchListData(CamelModel):
    matches: list[MatchSchema]


class MatchListResponse(Envelope):
    results: int
    data: MatchListData


class BreedingStatsSchema(CamelModel):
    total_males: int
    total_females: int
    males_with_offspring: int
    females_with_offspring: int
    breeding_age_males: int
    breeding_age_females: int
    total_pairs: int
    growth_potential: float

    @classmethod
    def from_domain(cls, stats: BreedingStats) -> BreedingStatsSchema:
        return cls(
            total_males=stats.total_males,
            total_females=stats.total_females,
            males_with_offspring=stats.males_with_offspring,
            females_with_offspring=stats.females_with_offspring,
            breeding_age_males=stats.breeding_age_males,
            breeding_age_females=stats.breeding_age_females,
            total_pairs=stats.total_pairs,
            growth_potential=stats.growth_potential,
        )


class StatsData(CamelModel):
    stats: BreedingStatsSchema


class StatsResponse(Envelope):
    data: StatsData
