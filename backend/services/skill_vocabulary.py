"""Known skill vocabulary and substring-based skill detection.

The vocabulary is a configuration table mapping each term to a category.
Job descriptions are scanned against ``JOB_SKILLS``; resumes are scanned
against the wider ``RESUME_SKILLS`` table, which adds interpersonal and
practice terms. Extending the tables does not require touching any scorer.
"""

from collections.abc import Iterable

# ---------------------------------------------------------------------------
# Technical vocabulary shared by job descriptions and resumes.
# Iteration order is significant: discovered skills keep this order, and the
# required/preferred split of a job description is taken over it.
# ---------------------------------------------------------------------------
JOB_SKILLS: dict[str, str] = {
    # Languages
    "javascript": "language",
    "typescript": "language",
    # Frontend
    "react": "frontend",
    "angular": "frontend",
    "vue": "frontend",
    # Backend / runtimes
    "node.js": "backend",
    # Languages
    "python": "language",
    "java": "language",
    "c++": "language",
    "c#": "language",
    "php": "language",
    "ruby": "language",
    "go": "language",
    "rust": "language",
    # Markup & styling
    "html": "frontend",
    "css": "frontend",
    "sass": "frontend",
    "less": "frontend",
    # Datastores
    "mongodb": "datastore",
    "postgresql": "datastore",
    "mysql": "datastore",
    "redis": "datastore",
    # Cloud
    "aws": "cloud",
    "azure": "cloud",
    "gcp": "cloud",
    # DevOps
    "docker": "devops",
    "kubernetes": "devops",
    "jenkins": "devops",
    "gitlab": "tooling",
    "github": "tooling",
    "git": "tooling",
    # Platforms
    "linux": "platform",
    "windows": "platform",
    # Process
    "agile": "process",
    "scrum": "process",
    "kanban": "process",
    # Collaboration tools
    "jira": "tooling",
    "confluence": "tooling",
    "slack": "tooling",
    "teams": "tooling",
}

# Terms only recognized on resumes
RESUME_ONLY_SKILLS: dict[str, str] = {
    "express": "backend",
    "project management": "practice",
    "leadership": "soft",
    "communication": "soft",
    "problem solving": "soft",
    "teamwork": "soft",
    "analytical": "soft",
    "creative": "soft",
    "detail-oriented": "soft",
}

RESUME_SKILLS: dict[str, str] = {**JOB_SKILLS, **RESUME_ONLY_SKILLS}


def skill_terms(vocabulary: Iterable[str]) -> tuple[str, ...]:
    """Normalize vocabulary terms for matching: lowercased, stripped, distinct, in order."""
    terms = (term.strip().lower() for term in vocabulary)
    return tuple(dict.fromkeys(term for term in terms if term))


def find_skills(text: str, vocabulary: Iterable[str]) -> list[str]:
    """Return vocabulary terms contained in ``text``, in vocabulary order.

    Matching is plain substring containment on the lowercased text, so
    "java" is found inside "javascript" and "go" inside "google".
    """
    text_lower = text.lower()
    return [term for term in vocabulary if term in text_lower]
