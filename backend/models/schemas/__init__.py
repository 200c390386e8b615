"""Inter-stage Pydantic contracts for the screening pipeline."""

from models.schemas.job_requirements import JobRequirements
from models.schemas.parsed_resume import ParsedResume
from models.schemas.dimension_scores import DimensionScores
from models.schemas.verdict import Verdict

__all__ = [
    "JobRequirements",
    "ParsedResume",
    "DimensionScores",
    "Verdict",
]
