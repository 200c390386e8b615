"""Regex signals for experience duration and education level.

Snippet extraction is driven by ordered rule tables: each rule contributes
at most ``cap`` matches, rules are applied in order, and the combined list
is truncated to the table's overall limit.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SnippetRule:
    """One pattern in a snippet table and how many matches it may contribute."""
    name: str
    pattern: re.Pattern
    cap: int


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

# Year figures are ASCII digits only: [0-9], since \d also matches e.g. "٥"
# "5+ years of experience", "3 years exp" (job description, lowercased)
REQUIRED_YEARS_RE = re.compile(
    r"([0-9]+)\s*(?:\+)?\s*years?\s*(?:of\s*)?(?:experience|exp)"
)

# Any "<n> year(s)/yr(s)" mention inside experience snippets
YEARS_MENTION_RE = re.compile(r"([0-9]+)\s*(?:years?|yrs?)")

# Run against original-case resume text, so matching is case-sensitive
EXPERIENCE_RULES: tuple[SnippetRule, ...] = (
    SnippetRule(
        "years_of_experience",
        re.compile(r"([0-9]+)\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)"),
        3,
    ),
    SnippetRule("worked_as", re.compile(r"worked\s+(?:as|at|for)\s+[^.]+"), 3),
    SnippetRule("experience_in", re.compile(r"experience\s+(?:in|with|as)\s+[^.]+"), 3),
)
MAX_EXPERIENCE_SNIPPETS = 5

# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

EDUCATION_RULES: tuple[SnippetRule, ...] = (
    SnippetRule(
        "degree",
        re.compile(
            r"(?:bachelor|master|phd|doctorate|degree|diploma|certificate)\s+[^.]+",
            re.IGNORECASE,
        ),
        2,
    ),
    SnippetRule(
        "institution",
        re.compile(r"(?:university|college|institute|school)\s+[^.]+", re.IGNORECASE),
        2,
    ),
    SnippetRule(
        "abbreviation",
        re.compile(
            r"(?:b\.?s\.?|m\.?s\.?|b\.?a\.?|m\.?a\.?|ph\.?d\.?)\s+[^.]+",
            re.IGNORECASE,
        ),
        2,
    ),
)
MAX_EDUCATION_SNIPPETS = 3

# Substring markers per level, highest level first
EDUCATION_MARKERS: dict[str, tuple[str, ...]] = {
    "phd": ("phd", "doctorate"),
    "master": ("master", "m.s", "m.a"),
    "bachelor": ("bachelor", "b.s", "b.a"),
    "associate": ("associate", "diploma"),
}

EDUCATION_RANK: dict[str, int] = {
    "phd": 4,
    "master": 3,
    "bachelor": 2,
    "associate": 1,
    "any": 0,
}

# Job descriptions never resolve to "associate"
JOB_EDUCATION_LEVELS = ("phd", "master", "bachelor")
RESUME_EDUCATION_LEVELS = ("phd", "master", "bachelor", "associate")

# Generic word tokens for diagnostic keywords
KEYWORD_RE = re.compile(r"\b\w{4,}\b", re.ASCII)


def to_int(value: str | None) -> int:
    """Parse a captured number, treating anything unparsable as 0."""
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


def collect_snippets(text: str, rules: tuple[SnippetRule, ...], limit: int) -> list[str]:
    """Apply snippet rules in order and return at most ``limit`` matches."""
    snippets: list[str] = []
    for rule in rules:
        matches = [m.group(0) for m in rule.pattern.finditer(text)]
        snippets.extend(matches[: rule.cap])
    return snippets[:limit]


def extract_required_years(text: str) -> int:
    """First "<n> years of experience" figure in a job description, 0 if absent."""
    match = REQUIRED_YEARS_RE.search(text.lower())
    return to_int(match.group(1)) if match else 0


def max_years_mentioned(snippets: list[str]) -> int:
    """Largest "<n> years" figure across experience snippets, 0 if none."""
    joined = " ".join(snippets)
    return max((to_int(m.group(1)) for m in YEARS_MENTION_RE.finditer(joined)), default=0)


def detect_education_level(text: str, levels: tuple[str, ...]) -> str | None:
    """Return the highest of ``levels`` whose marker appears in ``text``.

    Position in the text does not matter: a PhD mentioned after a
    bachelor's degree still resolves to "phd".
    """
    text_lower = text.lower()
    for level in levels:
        if any(marker in text_lower for marker in EDUCATION_MARKERS[level]):
            return level
    return None


def extract_keywords(text: str, limit: int = 20) -> list[str]:
    """First ``limit`` word tokens of four or more characters, lowercased."""
    return KEYWORD_RE.findall(text.lower())[:limit]
