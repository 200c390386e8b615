"""Batch-level statistics over ranked analysis results."""

from collections.abc import Sequence

from models.responses import (
    AnalysisResult,
    LeaderboardRow,
    RankingOverview,
    ScoreDistribution,
)

EXCELLENT_MIN = 80
GOOD_MIN = 70
LEADERBOARD_SIZE = 5


def score_distribution(results: Sequence[AnalysisResult]) -> ScoreDistribution:
    """Bucket overall scores into excellent (80+), good (70-79) and needs review (<70)."""
    return ScoreDistribution(
        excellent=sum(1 for r in results if r.overall_score >= EXCELLENT_MIN),
        good=sum(1 for r in results if GOOD_MIN <= r.overall_score < EXCELLENT_MIN),
        needs_review=sum(1 for r in results if r.overall_score < GOOD_MIN),
    )


def summarize(results: Sequence[AnalysisResult]) -> RankingOverview:
    """Summarize an already-ranked result list."""
    if not results:
        return RankingOverview()

    distribution = score_distribution(results)
    average = sum(r.overall_score for r in results) / len(results)
    leaderboard = [
        LeaderboardRow(
            rank=i + 1,
            file_name=r.file_name,
            score=r.overall_score,
            skills=r.skills_match,
            experience=r.experience_match,
            education=r.education_match,
        )
        for i, r in enumerate(results[:LEADERBOARD_SIZE])
    ]

    return RankingOverview(
        total_candidates=len(results),
        average_score=round(average, 1),
        top_matches=distribution.excellent,
        distribution=distribution,
        leaderboard=leaderboard,
    )
