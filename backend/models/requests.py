from pydantic import BaseModel, Field

from config import settings


class ResumeInput(BaseModel):
    id: str = Field(..., min_length=1, description="Caller-assigned resume identifier")
    file_name: str = Field("", description="Original file name, carried through to the result")
    content: str = Field(
        "", max_length=settings.max_resume_chars, description="Plain text resume content"
    )


class AnalyzeRequest(BaseModel):
    job_description: str = Field(
        ..., max_length=settings.max_job_description_chars, description="Job description text"
    )
    resumes: list[ResumeInput] = Field(default_factory=list)
