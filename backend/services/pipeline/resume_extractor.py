"""Resume Signal Extractor: raw resume text to ParsedResume.

Skills are matched on lowercased text; experience and education snippets
are cut from the original text so they can be shown back to the user.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from models.schemas.parsed_resume import ParsedResume
from services.pipeline.base import BaseStageService
from services.signal_patterns import (
    EDUCATION_RULES,
    EXPERIENCE_RULES,
    MAX_EDUCATION_SNIPPETS,
    MAX_EXPERIENCE_SNIPPETS,
    SnippetRule,
    collect_snippets,
)
from services.skill_vocabulary import RESUME_SKILLS, find_skills, skill_terms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResumeTables:
    skill_terms: tuple[str, ...]
    experience_rules: tuple[SnippetRule, ...]
    education_rules: tuple[SnippetRule, ...]


class ResumeExtractorService(BaseStageService):
    stage_name = "resume_extractor"

    def __init__(
        self,
        vocabulary: dict[str, str] | None = None,
        experience_rules: tuple[SnippetRule, ...] = EXPERIENCE_RULES,
        education_rules: tuple[SnippetRule, ...] = EDUCATION_RULES,
    ) -> None:
        super().__init__()
        self._vocabulary = RESUME_SKILLS if vocabulary is None else vocabulary
        self._experience_rules = experience_rules
        self._education_rules = education_rules

    def build_tables(self) -> ResumeTables:
        tables = ResumeTables(
            skill_terms=skill_terms(self._vocabulary),
            experience_rules=tuple(self._experience_rules),
            education_rules=tuple(self._education_rules),
        )
        logger.info(
            "Resume extractor: %d skill terms, %d experience rules, %d education rules",
            len(tables.skill_terms),
            len(tables.experience_rules),
            len(tables.education_rules),
        )
        return tables

    def predict(self, **kwargs: Any) -> ParsedResume:
        tables: ResumeTables = self.tables
        return parse_resume(
            kwargs["content"],
            kwargs.get("file_name", ""),
            vocabulary=tables.skill_terms,
            experience_rules=tables.experience_rules,
            education_rules=tables.education_rules,
        )


def parse_resume(
    content: str,
    file_name: str = "",
    vocabulary: Iterable[str] = RESUME_SKILLS,
    experience_rules: tuple[SnippetRule, ...] = EXPERIENCE_RULES,
    education_rules: tuple[SnippetRule, ...] = EDUCATION_RULES,
) -> ParsedResume:
    # file_name is accepted for traceability only
    return ParsedResume(
        skills=find_skills(content, vocabulary),
        experience=collect_snippets(content, experience_rules, MAX_EXPERIENCE_SNIPPETS),
        education=collect_snippets(content, education_rules, MAX_EDUCATION_SNIPPETS),
        raw_text=content,
    )
