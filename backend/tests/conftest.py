"""Shared test configuration, pytest markers and sample inputs."""

import pytest

from models.requests import ResumeInput
from services.pipeline.stage_registry import clear as clear_registry


SAMPLE_JD = """
Senior Full-Stack Engineer

We are hiring an engineer with 5+ years of experience building web products.
You will work with React, TypeScript and Node.js on the frontend and backend,
deploy to AWS with Docker and Kubernetes, and collaborate in an Agile team.

Requirements:
- Bachelor's degree in Computer Science or a related field
- Strong PostgreSQL and Redis knowledge
"""

STRONG_RESUME = """
Jane Smith
Senior Software Engineer

I have 7 years of experience building web applications.
I worked as a lead engineer at Acme Corp building React and TypeScript frontends.
Experience with Node.js, PostgreSQL, Redis, Docker, Kubernetes and AWS.
Practiced Agile and Scrum with strong communication and leadership.

Education
Bachelor of Science in Computer Science, State University
"""

WEAK_RESUME = """
John Roe
Retail associate with customer service background.
Worked at a grocery store
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through TestClient"
    )


@pytest.fixture(autouse=True)
def _reset_registry():
    """Start every test with a fresh stage registry."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD


@pytest.fixture
def sample_resumes() -> list[ResumeInput]:
    return [
        ResumeInput(id="weak", file_name="weak.txt", content=WEAK_RESUME),
        ResumeInput(id="strong", file_name="strong.txt", content=STRONG_RESUME),
    ]
