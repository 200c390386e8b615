import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    max_upload_size_mb: int = 5
    max_resumes: int = 50
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8080",
    ]
    debug: bool = False

    # Input limits
    min_job_description_chars: int = 100  # soft minimum, warns only
    max_job_description_chars: int = 10000
    max_resume_chars: int = 50000

    # Screening pipeline settings
    analysis_workers: int = 1  # thread pool size for per-resume analysis, <=1 runs inline
    simulated_latency_seconds: float = 0.0  # artificial processing delay before analysis
    rate_limit: str = "30/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
