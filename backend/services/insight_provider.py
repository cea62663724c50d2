"""Insight providers: optional qualitative enrichment of an analysis.

The analyzer only depends on the InsightProvider protocol. The Gemini
implementation issues two independent calls (alignment insights and project
ideas); a failed call leaves its fields empty.
"""

import asyncio
import logging
from typing import Any, Protocol

from models.schemas.insight_bundle import InsightBundle
from services import prompt_builder
from services.errors import EnrichmentUnavailable, MalformedProviderResponse
from services.gemini_client import GeminiClient

logger = logging.getLogger(__name__)


class InsightProvider(Protocol):
    async def enrich(
        self,
        job_text: str,
        resume_text: str,
        missing_skills: list[str],
        fit_score: int,
    ) -> InsightBundle | None:
        ...


def _string_field(data: dict[str, Any], key: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise MalformedProviderResponse(f"'{key}' should be a string, got {type(value).__name__}")
    return value.strip()


def _string_list_field(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise MalformedProviderResponse(f"'{key}' should be a list, got {type(value).__name__}")
    items = [item.strip() for item in value if isinstance(item, str) and item.strip()]
    if len(items) != len(value):
        logger.debug("Dropped %d non-string/empty entries from '%s'", len(value) - len(items), key)
    return list(dict.fromkeys(items))


def _read_field(data: dict[str, Any], key: str, reader) -> Any:
    """Read one field, degrading to an empty value if it has the wrong shape."""
    try:
        return reader(data, key)
    except MalformedProviderResponse as e:
        logger.warning("Ignoring malformed insight field: %s", e)
        return reader({}, key)


def parse_insights(data: dict[str, Any]) -> InsightBundle:
    return InsightBundle(
        general_insight=_read_field(data, "general_insight", _string_field),
        ranked_missing_skills=_read_field(data, "ranked_missing_skills", _string_list_field),
        highlight_areas=_read_field(data, "highlight_areas", _string_list_field),
        matched_skills=_read_field(data, "matched_skills", _string_list_field),
        keywords=_read_field(data, "keywords", _string_list_field),
    )


def parse_projects(data: dict[str, Any]) -> list[str]:
    return _read_field(data, "project_suggestions", _string_list_field)


class GeminiInsightProvider:
    def __init__(self, client: GeminiClient) -> None:
        self.client = client

    async def enrich(
        self,
        job_text: str,
        resume_text: str,
        missing_skills: list[str],
        fit_score: int,
    ) -> InsightBundle | None:
        insights_prompt = prompt_builder.build_insights_prompt(
            job_text, resume_text, missing_skills, fit_score
        )
        projects_prompt = prompt_builder.build_projects_prompt(job_text, missing_skills)

        insights_data, projects_data = await asyncio.gather(
            self.client.generate_json(insights_prompt),
            self.client.generate_json(projects_prompt),
            return_exceptions=True,
        )

        failures = 0
        bundle = InsightBundle()

        if isinstance(insights_data, BaseException):
            _raise_if_unexpected(insights_data)
            logger.warning("Gemini insights call failed: %s", insights_data)
            failures += 1
        else:
            bundle = parse_insights(insights_data)

        if isinstance(projects_data, BaseException):
            _raise_if_unexpected(projects_data)
            logger.warning("Gemini project suggestions call failed: %s", projects_data)
            failures += 1
        else:
            bundle.project_suggestions = parse_projects(projects_data)

        if failures == 2:
            raise EnrichmentUnavailable("All Gemini insight calls failed")
        if bundle.is_empty():
            return None
        return bundle


def _raise_if_unexpected(exc: BaseException) -> None:
    """Re-raise anything that is not a provider failure (e.g. cancellation)."""
    if not isinstance(exc, EnrichmentUnavailable):
        raise exc
