from pydantic import BaseModel


class KeywordScore(BaseModel):
    word: str
    score: float


class AnalysisResponse(BaseModel):
    fit_score: int = 0
    fit_message: str = ""
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    insights: list[str] = []
    top_keywords: list[KeywordScore] = []
    # Enrichment from the insight provider, empty when it is unavailable
    general_insight: str = ""
    ranked_missing_skills: list[str] = []
    highlight_areas: list[str] = []
    project_suggestions: list[str] = []
    keywords: list[str] = []
    job_links: list[str] = []
    degraded: bool = False
    # Scoring transparency fields
    similarity_score: float = 0.0
    skill_match_ratio: float = 0.0
    scoring_method: str = "local_only"
