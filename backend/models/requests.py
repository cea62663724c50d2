from pydantic import BaseModel, Field


class QuickAnalyzeRequest(BaseModel):
    """Plain-text analysis request.

    The job description limit is configurable, so it is checked by the
    router against settings rather than here.
    """
    resume_text: str = Field(..., max_length=50000, description="Resume as plain text")
    job_description: str = Field(..., description="Job posting to score the resume against")
