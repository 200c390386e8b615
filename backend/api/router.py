from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import AnalyzeRequest
from models.responses import ScreeningResponse
from services import screening, text_acquisition
from services.skill_vocabulary import RESUME_SKILLS

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _rate_limit() -> str:
    return settings.rate_limit


def _validate_batch(body: AnalyzeRequest) -> None:
    if not body.job_description.strip():
        raise HTTPException(status_code=400, detail="Job description is required")
    if not body.resumes:
        raise HTTPException(status_code=400, detail="At least one resume is required")
    if len(body.resumes) > settings.max_resumes:
        raise HTTPException(
            status_code=400,
            detail=f"Too many resumes. Max per request: {settings.max_resumes}",
        )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "skill_terms": len(RESUME_SKILLS),
    }


@router.post("/analyze", response_model=ScreeningResponse)
@limiter.limit(_rate_limit)
async def analyze(request: Request, body: AnalyzeRequest):
    _validate_batch(body)
    return await screening.screen(body)


@router.post("/analyze/upload", response_model=ScreeningResponse)
@limiter.limit(_rate_limit)
async def analyze_upload(
    request: Request,
    resume_files: list[UploadFile] = File(...),
    job_description: str = Form(...),
):
    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    resumes = []
    for upload in resume_files:
        file_name = upload.filename or ""
        if not text_acquisition.is_accepted(file_name):
            raise HTTPException(
                status_code=400,
                detail=f"Unsupported file type: {file_name or '<unnamed>'}. Accepted: .pdf, .txt, .docx",
            )

        content = await upload.read()
        if len(content) > max_bytes:
            raise HTTPException(
                status_code=400,
                detail=f"File too large: {file_name}. Max size: {settings.max_upload_size_mb}MB",
            )

        try:
            resumes.append(text_acquisition.to_resume(file_name, content))
        except ValidationError:
            raise HTTPException(
                status_code=400,
                detail=f"Resume text too long: {file_name} (max {settings.max_resume_chars} chars)",
            )

    body = AnalyzeRequest(job_description=job_description, resumes=resumes)
    _validate_batch(body)
    return await screening.screen(body)
