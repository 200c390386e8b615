"""Screening service: runs the ranking pipeline for one request.

Steps:
1. Soft validation of the job description (warnings only)
2. Optional simulated processing latency
3. Requirement extraction (once per request)
4. Per-resume scoring and ranking, off the event loop
5. Batch overview statistics
"""

import asyncio
import logging

from config import settings
from models.requests import AnalyzeRequest
from models.responses import ScreeningResponse
from services import ranking_overview
from services.pipeline.orchestrator import extract_requirements, rank_resumes

logger = logging.getLogger(__name__)


def _collect_warnings(request: AnalyzeRequest) -> list[str]:
    warnings: list[str] = []
    jd_length = len(request.job_description.strip())
    if jd_length < settings.min_job_description_chars:
        logger.warning(
            "Job description is short (%d chars, %d recommended)",
            jd_length,
            settings.min_job_description_chars,
        )
        warnings.append(
            f"Job description has {jd_length} characters; at least "
            f"{settings.min_job_description_chars} are recommended for reliable matching."
        )

    empty = [r.file_name or r.id for r in request.resumes if not r.content.strip()]
    if empty:
        warnings.append(f"No text found in: {', '.join(empty)}")
    return warnings


async def screen(request: AnalyzeRequest) -> ScreeningResponse:
    """Rank the request's resumes against its job description."""
    warnings = _collect_warnings(request)

    if settings.simulated_latency_seconds > 0:
        await asyncio.sleep(settings.simulated_latency_seconds)

    requirements = extract_requirements(request.job_description)
    results = await asyncio.to_thread(
        rank_resumes,
        request.resumes,
        requirements,
        settings.analysis_workers,
    )

    return ScreeningResponse(
        results=results,
        overview=ranking_overview.summarize(results),
        requirements=requirements,
        warnings=warnings,
    )
