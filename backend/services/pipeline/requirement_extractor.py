"""Requirement Extractor: job description text to JobRequirements.

Purely lexical: skills come from substring matches against the job skill
vocabulary, experience from the first "<n> years of experience" phrase and
education from degree markers anywhere in the text.
"""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from models.schemas.job_requirements import JobRequirements
from services.pipeline.base import BaseStageService
from services.signal_patterns import (
    JOB_EDUCATION_LEVELS,
    detect_education_level,
    extract_keywords,
    extract_required_years,
)
from services.skill_vocabulary import JOB_SKILLS, find_skills, skill_terms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequirementTables:
    skill_terms: tuple[str, ...]
    education_levels: tuple[str, ...]


class RequirementExtractorService(BaseStageService):
    stage_name = "requirement_extractor"

    def __init__(self, vocabulary: dict[str, str] | None = None) -> None:
        super().__init__()
        self._vocabulary = JOB_SKILLS if vocabulary is None else vocabulary

    def build_tables(self) -> RequirementTables:
        tables = RequirementTables(
            skill_terms=skill_terms(self._vocabulary),
            education_levels=JOB_EDUCATION_LEVELS,
        )
        logger.info("Requirement extractor: %d job skill terms", len(tables.skill_terms))
        return tables

    def predict(self, **kwargs: Any) -> JobRequirements:
        tables: RequirementTables = self.tables
        return extract_requirements(
            kwargs["job_description"],
            vocabulary=tables.skill_terms,
            education_levels=tables.education_levels,
        )


def split_skills(skills: list[str]) -> tuple[list[str], list[str]]:
    """Split discovered skills at the midpoint, rounding the required half up."""
    midpoint = math.ceil(len(skills) / 2)
    return skills[:midpoint], skills[midpoint:]


def extract_requirements(
    job_description: str,
    vocabulary: Iterable[str] = JOB_SKILLS,
    education_levels: tuple[str, ...] = JOB_EDUCATION_LEVELS,
) -> JobRequirements:
    text = job_description.lower()

    found_skills = find_skills(text, vocabulary)
    required, preferred = split_skills(found_skills)

    requirements = JobRequirements(
        required_skills=required,
        preferred_skills=preferred,
        experience_level=extract_required_years(text),
        education_level=detect_education_level(text, education_levels) or "any",
        keywords=extract_keywords(text),
    )
    logger.debug(
        "Job requirements: %d required, %d preferred, %d years, education=%s",
        len(requirements.required_skills),
        len(requirements.preferred_skills),
        requirements.experience_level,
        requirements.education_level,
    )
    return requirements
