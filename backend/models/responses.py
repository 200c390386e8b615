from pydantic import BaseModel, Field

from models.schemas.job_requirements import JobRequirements


class AnalysisResult(BaseModel):
    """Final per-resume record returned to the presentation layer."""
    resume_id: str
    file_name: str = ""
    overall_score: int = Field(0, ge=0, le=100)
    skills_match: int = Field(0, ge=0, le=100)
    experience_match: int = Field(0, ge=0, le=100)
    education_match: int = Field(0, ge=0, le=100)
    key_strengths: list[str] = []
    gaps: list[str] = []
    recommendation: str = ""
    analysis: str = ""


class ScoreDistribution(BaseModel):
    excellent: int = 0  # overall >= 80
    good: int = 0  # 70-79
    needs_review: int = 0  # < 70


class LeaderboardRow(BaseModel):
    rank: int
    file_name: str = ""
    score: int = 0
    skills: int = 0
    experience: int = 0
    education: int = 0


class RankingOverview(BaseModel):
    total_candidates: int = 0
    average_score: float = 0.0
    top_matches: int = 0
    distribution: ScoreDistribution = ScoreDistribution()
    leaderboard: list[LeaderboardRow] = []


class ScreeningResponse(BaseModel):
    results: list[AnalysisResult] = []
    overview: RankingOverview = RankingOverview()
    requirements: JobRequirements = JobRequirements()
    warnings: list[str] = []
