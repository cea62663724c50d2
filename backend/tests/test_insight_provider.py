import asyncio

import pytest

from models.schemas.insight_bundle import InsightBundle
from services.errors import EnrichmentUnavailable, MalformedProviderResponse
from services.insight_provider import GeminiInsightProvider, parse_insights, parse_projects


class FakeGeminiClient:
    """Answers insight and project prompts from canned results."""

    def __init__(self, insights, projects):
        self.insights = insights
        self.projects = projects
        self.prompts: list[str] = []

    async def generate_json(self, prompt: str):
        self.prompts.append(prompt)
        await asyncio.sleep(0)
        result = self.projects if "portfolio" in prompt else self.insights
        if isinstance(result, BaseException):
            raise result
        return result


INSIGHTS = {
    "general_insight": "  Solid frontend profile, light on cloud.  ",
    "ranked_missing_skills": ["AWS", "Kubernetes"],
    "highlight_areas": ["React migration project", "TypeScript adoption"],
    "matched_skills": ["React", "TypeScript"],
    "keywords": ["Frontend Engineer", "React Developer"],
}
PROJECTS = {"project_suggestions": ["Serverless dashboard: deploy a React app on AWS Lambda"]}


def test_parse_insights_full():
    bundle = parse_insights(INSIGHTS)
    assert bundle.general_insight == "Solid frontend profile, light on cloud."
    assert bundle.ranked_missing_skills == ["AWS", "Kubernetes"]
    assert bundle.keywords == ["Frontend Engineer", "React Developer"]


def test_parse_insights_drops_malformed_fields():
    bundle = parse_insights({
        "general_insight": ["not", "a", "string"],
        "highlight_areas": "should be a list",
        "keywords": ["ok", 3, "", "ok"],
    })
    assert bundle.general_insight == ""
    assert bundle.highlight_areas == []
    assert bundle.keywords == ["ok"]


def test_parse_projects():
    assert parse_projects(PROJECTS) == PROJECTS["project_suggestions"]
    assert parse_projects({"project_suggestions": {"bad": "shape"}}) == []


@pytest.mark.asyncio
async def test_enrich_combines_both_calls():
    client = FakeGeminiClient(INSIGHTS, PROJECTS)
    provider = GeminiInsightProvider(client)

    bundle = await provider.enrich("job", "resume", ["AWS"], 73)

    assert isinstance(bundle, InsightBundle)
    assert bundle.highlight_areas == INSIGHTS["highlight_areas"]
    assert bundle.project_suggestions == PROJECTS["project_suggestions"]
    assert len(client.prompts) == 2
    assert any("73/100" in p for p in client.prompts)
    assert all("AWS" in p for p in client.prompts)


@pytest.mark.asyncio
async def test_enrich_partial_failure_keeps_other_fields():
    client = FakeGeminiClient(INSIGHTS, MalformedProviderResponse("garbage"))
    bundle = await GeminiInsightProvider(client).enrich("job", "resume", [], 40)

    assert bundle.general_insight
    assert bundle.project_suggestions == []


@pytest.mark.asyncio
async def test_enrich_projects_only():
    client = FakeGeminiClient(EnrichmentUnavailable("quota"), PROJECTS)
    bundle = await GeminiInsightProvider(client).enrich("job", "resume", [], 40)

    assert bundle.general_insight == ""
    assert bundle.project_suggestions == PROJECTS["project_suggestions"]


@pytest.mark.asyncio
async def test_enrich_all_calls_failing_raises():
    client = FakeGeminiClient(EnrichmentUnavailable("down"), EnrichmentUnavailable("down"))
    with pytest.raises(EnrichmentUnavailable):
        await GeminiInsightProvider(client).enrich("job", "resume", [], 40)


@pytest.mark.asyncio
async def test_enrich_empty_answers_return_none():
    client = FakeGeminiClient({}, {})
    assert await GeminiInsightProvider(client).enrich("job", "resume", [], 40) is None


@pytest.mark.asyncio
async def test_enrich_matched_skills_alone_return_none():
    client = FakeGeminiClient({"matched_skills": ["React"]}, {})
    assert await GeminiInsightProvider(client).enrich("job", "resume", [], 40) is None


@pytest.mark.asyncio
async def test_enrich_propagates_unexpected_errors():
    client = FakeGeminiClient(RuntimeError("bug"), PROJECTS)
    with pytest.raises(RuntimeError):
        await GeminiInsightProvider(client).enrich("job", "resume", [], 40)
