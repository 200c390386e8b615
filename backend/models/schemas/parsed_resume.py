"""Resume Signal Extractor output: per-resume signals."""

from pydantic import BaseModel


class ParsedResume(BaseModel):
    """Structured output of the Resume Signal Extractor."""
    skills: list[str] = []  # vocabulary order, distinct
    experience: list[str] = []  # <= 5 snippets
    education: list[str] = []  # <= 3 snippets
    raw_text: str = ""
