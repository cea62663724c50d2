"""Shared dependencies for API routes."""

import logging

from config import settings
from services.gemini_client import GeminiClient
from services.insight_provider import GeminiInsightProvider, InsightProvider
from services.job_links import SearchUrlJobLinkFinder
from services.resume_analyzer import ResumeAnalyzer

logger = logging.getLogger(__name__)

_client: GeminiClient | None = None


def get_gemini_client() -> GeminiClient | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - AI insights disabled")
        return None
    if _client is None:
        _client = GeminiClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            temperature=settings.gemini_temperature,
            retry_policy=settings.retry_policy(),
        )
    return _client


def get_insight_provider() -> InsightProvider | None:
    client = get_gemini_client()
    if client is None:
        return None
    return GeminiInsightProvider(client)


def get_analyzer() -> ResumeAnalyzer:
    job_link_finder = (
        SearchUrlJobLinkFinder(settings.job_board_urls) if settings.job_board_urls else None
    )
    return ResumeAnalyzer(
        config=settings.analyzer_config(),
        insight_provider=get_insight_provider(),
        job_link_finder=job_link_finder,
    )
