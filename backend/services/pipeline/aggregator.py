"""Aggregator: weighted overall score and template-based feedback.

Deterministic rules engine. Combines the three dimension scores with fixed
weights and generates strengths, gaps, a recommendation tier and a one-line
analysis from the scores and the resume's signal counts.
"""

import math
from typing import Any

from models.schemas.dimension_scores import DimensionScores
from models.schemas.parsed_resume import ParsedResume
from models.schemas.verdict import Verdict
from services.pipeline.base import BaseStageService

W_SKILLS = 0.4
W_EXPERIENCE = 0.35
W_EDUCATION = 0.25

STRENGTH_THRESHOLD = 80
GAP_THRESHOLD = 60
ANALYSIS_THRESHOLD = 70
DIVERSE_SKILLS_THRESHOLD = 8
COMPREHENSIVE_EXPERIENCE_THRESHOLD = 3
NARROW_SKILLS_THRESHOLD = 3

FALLBACK_STRENGTH = "Candidate shows potential"
FALLBACK_GAP = "No significant gaps identified"

# (minimum overall score, recommendation), checked top-down
RECOMMENDATION_TIERS: tuple[tuple[int, str], ...] = (
    (85, "Excellent match - Priority candidate for interview"),
    (75, "Strong candidate - Recommend for interview"),
    (65, "Good potential - Consider for interview"),
    (50, "Moderate fit - Review carefully"),
)
FALLBACK_RECOMMENDATION = "May not be suitable for this role"


class AggregatorService(BaseStageService):
    stage_name = "aggregator"

    def predict(self, **kwargs: Any) -> Verdict:
        scores: DimensionScores = kwargs["scores"]
        resume: ParsedResume = kwargs["parsed_resume"]
        return aggregate(scores, resume)


def round_half_up(value: float) -> int:
    """Round .5 upwards, unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5))


def compute_overall(scores: DimensionScores) -> int:
    """Weighted overall score, 0-100."""
    raw = (
        W_SKILLS * scores.skills
        + W_EXPERIENCE * scores.experience
        + W_EDUCATION * scores.education
    )
    return min(100, max(0, round_half_up(raw)))


def recommend(overall_score: int) -> str:
    for min_score, recommendation in RECOMMENDATION_TIERS:
        if overall_score >= min_score:
            return recommendation
    return FALLBACK_RECOMMENDATION


# ---------------------------------------------------------------------------
# Template builders
# ---------------------------------------------------------------------------

def _build_strengths(scores: DimensionScores, resume: ParsedResume) -> list[str]:
    strengths: list[str] = []
    if scores.skills > STRENGTH_THRESHOLD:
        strengths.append("Strong technical skill alignment")
    if scores.experience > STRENGTH_THRESHOLD:
        strengths.append("Excellent experience level match")
    if scores.education > STRENGTH_THRESHOLD:
        strengths.append("Strong educational background")
    if len(resume.skills) > DIVERSE_SKILLS_THRESHOLD:
        strengths.append("Diverse technical skill set")
    if len(resume.experience) > COMPREHENSIVE_EXPERIENCE_THRESHOLD:
        strengths.append("Comprehensive work experience")
    return strengths or [FALLBACK_STRENGTH]


def _build_gaps(scores: DimensionScores, resume: ParsedResume) -> list[str]:
    gaps: list[str] = []
    if scores.skills < GAP_THRESHOLD:
        gaps.append("Limited relevant technical skills")
    if scores.experience < GAP_THRESHOLD:
        gaps.append("Experience level below requirements")
    if scores.education < GAP_THRESHOLD:
        gaps.append("Educational background may not meet requirements")
    if len(resume.skills) < NARROW_SKILLS_THRESHOLD:
        gaps.append("Limited technical skill diversity")
    return gaps or [FALLBACK_GAP]


def _build_analysis(overall_score: int, scores: DimensionScores) -> str:
    skills_clause = (
        "Technical skills are well-aligned with requirements."
        if scores.skills > ANALYSIS_THRESHOLD
        else "Technical skills need strengthening."
    )
    experience_clause = (
        "Experience level meets expectations."
        if scores.experience > ANALYSIS_THRESHOLD
        else "Experience level may be below ideal."
    )
    education_clause = (
        "Educational background is appropriate."
        if scores.education > ANALYSIS_THRESHOLD
        else "Educational requirements may not be fully met."
    )
    return (
        f"Candidate scored {overall_score}% overall match. "
        f"{skills_clause} {experience_clause} {education_clause}"
    )


def aggregate(scores: DimensionScores, resume: ParsedResume) -> Verdict:
    overall = compute_overall(scores)
    return Verdict(
        overall_score=overall,
        key_strengths=_build_strengths(scores, resume),
        gaps=_build_gaps(scores, resume),
        recommendation=recommend(overall),
        analysis=_build_analysis(overall, scores),
    )
