"""Dimension Scorers: skills, experience and education sub-scores.

Each scorer is a pure function of (ParsedResume, JobRequirements) returning
a float in [0, 100]. Rounding happens later, in the aggregator.
"""

from typing import Any

from models.schemas.dimension_scores import DimensionScores
from models.schemas.job_requirements import JobRequirements
from models.schemas.parsed_resume import ParsedResume
from services.pipeline.base import BaseStageService
from services.signal_patterns import (
    EDUCATION_RANK,
    RESUME_EDUCATION_LEVELS,
    detect_education_level,
    max_years_mentioned,
)

# Skills
REQUIRED_SKILL_WEIGHT = 0.7
PREFERRED_SKILL_WEIGHT = 0.3
NO_JOB_SKILLS_SCORE = 75.0
BROAD_SKILLS_BONUS = 10.0
BROAD_SKILLS_THRESHOLD = 5  # bonus applies above this many resume skills

# Experience
NO_EXPERIENCE_REQUIREMENT_SCORE = 80.0
# (minimum resume/required ratio, score), checked top-down
EXPERIENCE_TIERS: tuple[tuple[float, float], ...] = (
    (1.2, 95.0),
    (1.0, 90.0),
    (0.8, 75.0),
    (0.5, 60.0),
)
EXPERIENCE_FLOOR_SCORE = 40.0

# Education
ANY_EDUCATION_SCORE = 85.0
EDUCATION_MEETS_SCORE = 90.0
EDUCATION_ONE_BELOW_SCORE = 70.0
EDUCATION_BELOW_SCORE = 50.0


class DimensionScorerService(BaseStageService):
    stage_name = "dimension_scorer"

    def predict(self, **kwargs: Any) -> DimensionScores:
        resume: ParsedResume = kwargs["parsed_resume"]
        requirements: JobRequirements = kwargs["requirements"]
        return score_dimensions(resume, requirements)


def score_skills(resume: ParsedResume, requirements: JobRequirements) -> float:
    """Weighted share of required and preferred job skills found on the resume."""
    if not requirements.all_skills:
        return NO_JOB_SKILLS_SCORE

    resume_skills = set(resume.skills)
    required = requirements.required_skills
    preferred = requirements.preferred_skills

    required_score = 0.0
    if required:
        matched = sum(1 for skill in required if skill in resume_skills)
        required_score = matched / len(required) * 100 * REQUIRED_SKILL_WEIGHT

    preferred_score = 0.0
    if preferred:
        matched = sum(1 for skill in preferred if skill in resume_skills)
        preferred_score = matched / len(preferred) * 100 * PREFERRED_SKILL_WEIGHT

    bonus = BROAD_SKILLS_BONUS if len(resume.skills) > BROAD_SKILLS_THRESHOLD else 0.0
    return min(100.0, required_score + preferred_score + bonus)


def score_experience(resume: ParsedResume, requirements: JobRequirements) -> float:
    """Tiered score from the ratio of claimed to required years."""
    resume_years = max_years_mentioned(resume.experience)

    if requirements.experience_level <= 0:
        return NO_EXPERIENCE_REQUIREMENT_SCORE

    ratio = resume_years / requirements.experience_level
    for min_ratio, score in EXPERIENCE_TIERS:
        if ratio >= min_ratio:
            return score
    return EXPERIENCE_FLOOR_SCORE


def resume_education_rank(resume: ParsedResume) -> int:
    """Ordinal education level found in the resume's education snippets."""
    level = detect_education_level(" ".join(resume.education), RESUME_EDUCATION_LEVELS)
    return EDUCATION_RANK[level] if level else 0


def score_education(resume: ParsedResume, requirements: JobRequirements) -> float:
    """Compare the resume's education rank against the job's required level."""
    if requirements.education_level == "any":
        return ANY_EDUCATION_SCORE

    resume_rank = resume_education_rank(resume)
    required_rank = EDUCATION_RANK.get(requirements.education_level, 0)

    if resume_rank >= required_rank:
        return EDUCATION_MEETS_SCORE
    if resume_rank == required_rank - 1:
        return EDUCATION_ONE_BELOW_SCORE
    return EDUCATION_BELOW_SCORE


def score_dimensions(resume: ParsedResume, requirements: JobRequirements) -> DimensionScores:
    return DimensionScores(
        skills=score_skills(resume, requirements),
        experience=score_experience(resume, requirements),
        education=score_education(resume, requirements),
    )
