"""Dimension Scorer output: unrounded per-dimension scores."""

from pydantic import BaseModel


class DimensionScores(BaseModel):
    skills: float = 0.0  # 0-100
    experience: float = 0.0  # 0-100
    education: float = 0.0  # 0-100
