"""Requirement Extractor output: structured requirements from a job description."""

from typing import Literal

from pydantic import BaseModel

EducationLevel = Literal["any", "bachelor", "master", "phd"]


class JobRequirements(BaseModel):
    """Structured output of the Requirement Extractor.

    ``required_skills`` and ``preferred_skills`` partition the discovered
    skills positionally: the first ceil(n/2) in vocabulary order are
    "required", the rest "preferred". The split does not read phrases such
    as "must have" or "nice to have".
    """
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    experience_level: int = 0  # years, 0 = unspecified
    education_level: EducationLevel = "any"
    keywords: list[str] = []  # diagnostic only, not used for scoring

    @property
    def all_skills(self) -> list[str]:
        return self.required_skills + self.preferred_skills
