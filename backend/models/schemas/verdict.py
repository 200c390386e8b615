"""Aggregator output: overall score with generated feedback."""

from pydantic import BaseModel


class Verdict(BaseModel):
    """Structured output of the Aggregator.

    Template-based and deterministic: the same dimension scores and
    resume counts always produce the same text.
    """
    overall_score: int = 0  # 0-100
    key_strengths: list[str] = []
    gaps: list[str] = []
    recommendation: str = ""
    analysis: str = ""
