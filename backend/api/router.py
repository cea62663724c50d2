from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_analyzer
from config import settings
from models.requests import QuickAnalyzeRequest
from models.responses import AnalysisResponse
from services.errors import ExtractionError
from services.report import REPORT_FILENAME, render_report
from services.resume_analyzer import ResumeAnalyzer

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def _check_job_description(job_description: str) -> None:
    if not job_description.strip():
        raise HTTPException(status_code=400, detail="Job description is required")

    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "insights_configured": bool(settings.gemini_api_key),
    }


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(...),
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    _check_job_description(job_description)

    try:
        return await analyzer.analyze_document(content, job_description)
    except ExtractionError:
        raise HTTPException(
            status_code=400,
            detail="Could not parse PDF file. Please provide a valid PDF document.",
        )


@router.post("/analyze/quick", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_quick(
    request: Request,
    body: QuickAnalyzeRequest,
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
):
    _check_job_description(body.job_description)
    return await analyzer.analyze_text(body.resume_text, body.job_description)


@router.post("/report", response_class=PlainTextResponse)
async def report(result: AnalysisResponse):
    return PlainTextResponse(
        render_report(result),
        headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
    )
