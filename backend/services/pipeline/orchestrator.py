"""Pipeline orchestrator: wires all stages together and ranks the results.

Flow:
    job_description + resumes
      ├─ RequirementExtractor.predict(job_description)   → JobRequirements (once)
      │
      └─ per resume (independent, optionally on a thread pool):
           ├─ ResumeExtractor.predict(content)            → ParsedResume
           ├─ DimensionScorer.predict(parsed, reqs)       → DimensionScores
           └─ Aggregator.predict(scores, parsed)          → Verdict
                         ↓
              _to_analysis_result()  → AnalysisResult
                         ↓
      stable sort by overall_score, descending
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from models.requests import ResumeInput
from models.responses import AnalysisResult
from models.schemas.dimension_scores import DimensionScores
from models.schemas.job_requirements import JobRequirements
from models.schemas.verdict import Verdict
from services.pipeline.aggregator import round_half_up
from services.pipeline.base import BaseStageService
from services.pipeline.stage_registry import get_stage

logger = logging.getLogger(__name__)


def extract_requirements(job_description: str) -> JobRequirements:
    return get_stage("requirement_extractor").predict(job_description=job_description)


def _analyze_one(
    resume: ResumeInput,
    requirements: JobRequirements,
    resume_extractor: BaseStageService,
    dimension_scorer: BaseStageService,
    aggregator: BaseStageService,
) -> AnalysisResult:
    parsed = resume_extractor.predict(content=resume.content, file_name=resume.file_name)
    scores: DimensionScores = dimension_scorer.predict(
        parsed_resume=parsed,
        requirements=requirements,
    )
    verdict: Verdict = aggregator.predict(scores=scores, parsed_resume=parsed)

    logger.debug(
        "Scored %s: overall=%d skills=%.1f experience=%.1f education=%.1f",
        resume.file_name or resume.id,
        verdict.overall_score,
        scores.skills,
        scores.experience,
        scores.education,
    )
    return _to_analysis_result(resume, scores, verdict)


def _to_analysis_result(
    resume: ResumeInput,
    scores: DimensionScores,
    verdict: Verdict,
) -> AnalysisResult:
    return AnalysisResult(
        resume_id=resume.id,
        file_name=resume.file_name,
        overall_score=verdict.overall_score,
        skills_match=round_half_up(scores.skills),
        experience_match=round_half_up(scores.experience),
        education_match=round_half_up(scores.education),
        key_strengths=verdict.key_strengths,
        gaps=verdict.gaps,
        recommendation=verdict.recommendation,
        analysis=verdict.analysis,
    )


def rank_results(results: Sequence[AnalysisResult]) -> list[AnalysisResult]:
    """Order by overall score, highest first. Ties keep their input order."""
    return sorted(results, key=lambda r: r.overall_score, reverse=True)


def rank_resumes(
    resumes: Sequence[ResumeInput],
    requirements: JobRequirements,
    workers: int = 1,
) -> list[AnalysisResult]:
    """Score every resume against pre-extracted requirements and rank them."""
    if not resumes:
        return []

    analyze_one = partial(
        _analyze_one,
        requirements=requirements,
        resume_extractor=get_stage("resume_extractor"),
        dimension_scorer=get_stage("dimension_scorer"),
        aggregator=get_stage("aggregator"),
    )

    logger.info("Analyzing %d resumes (workers=%d)", len(resumes), max(1, workers))
    if workers > 1 and len(resumes) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # map() yields in input order, which keeps the sort stable
            results = list(pool.map(analyze_one, resumes))
    else:
        results = [analyze_one(resume) for resume in resumes]

    return rank_results(results)


def analyze(
    resumes: Sequence[ResumeInput],
    job_description: str,
    workers: int = 1,
) -> list[AnalysisResult]:
    """Rank resumes against a job description.

    Pure function of its inputs: identical inputs always produce identical
    results, and an empty resume sequence yields an empty list.
    """
    requirements = extract_requirements(job_description)
    return rank_resumes(resumes, requirements, workers=workers)
