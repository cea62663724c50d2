"""Orchestrator: resume-to-job fit analysis pipeline.

Pipeline:
1. Text extraction (PDF -> plain text)
2. Term-frequency cosine similarity (base score)
3. Skill extraction from both texts + matched/missing split
4. Fit score combination (similarity + skill coverage)
5. Insight provider enrichment (optional, never fatal)
6. Assemble the AnalysisResponse

Each analysis is a pure function of its inputs plus the optional
collaborators. Nothing is cached or shared between calls.
"""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

from config import AnalyzerConfig
from models.responses import AnalysisResponse
from models.schemas.insight_bundle import InsightBundle
from services import pdf_parser, scoring, skill_extractor
from services.insight_provider import InsightProvider
from services.job_links import JobLinkFinder
from services.similarity import text_similarity, top_keywords

logger = logging.getLogger(__name__)


class AnalysisStage(str, Enum):
    EXTRACT_TEXT = "extract_text"
    COMPUTE_SIMILARITY = "compute_similarity"
    EXTRACT_SKILLS = "extract_skills"
    COMBINE_SCORE = "combine_score"
    REQUEST_ENRICHMENT = "request_enrichment"
    ASSEMBLE_RESULT = "assemble_result"


StageObserver = Callable[[AnalysisStage], None]


class ResumeAnalyzer:
    def __init__(
        self,
        config: AnalyzerConfig | None = None,
        insight_provider: InsightProvider | None = None,
        job_link_finder: JobLinkFinder | None = None,
    ) -> None:
        self.config = config or AnalyzerConfig()
        self.insight_provider = insight_provider
        self.job_link_finder = job_link_finder

    async def analyze_document(
        self,
        pdf_bytes: bytes,
        job_description: str,
        on_stage: StageObserver | None = None,
    ) -> AnalysisResponse:
        """Extract the resume text from a PDF, then run analyze_text.

        Raises ExtractionError if the payload is not a valid PDF.
        """
        _notify(on_stage, AnalysisStage.EXTRACT_TEXT)
        resume_text = pdf_parser.extract_text(pdf_bytes)
        return await self.analyze_text(resume_text, job_description, on_stage=on_stage)

    async def analyze_text(
        self,
        resume_text: str,
        job_description: str,
        on_stage: StageObserver | None = None,
    ) -> AnalysisResponse:
        weights = self.config.weights

        # --- Stage 1: Similarity ---
        _notify(on_stage, AnalysisStage.COMPUTE_SIMILARITY)
        base_similarity = text_similarity(job_description, resume_text)

        # --- Stage 2: Skills ---
        _notify(on_stage, AnalysisStage.EXTRACT_SKILLS)
        job_skills = skill_extractor.extract_skills(job_description)
        resume_skills = skill_extractor.extract_skills(resume_text)
        matched_skills, missing_skills = skill_extractor.get_skill_gap(resume_skills, job_skills)

        # --- Stage 3: Fit score ---
        _notify(on_stage, AnalysisStage.COMBINE_SCORE)
        fit_score = scoring.combine_fit_score(
            base_similarity, matched_skills, job_skills, weights
        )
        fit_message = scoring.fit_message(fit_score)
        logger.info(
            "Fit score %d (similarity %.2f, %d/%d job skills matched)",
            fit_score, base_similarity, len(matched_skills), len(job_skills),
        )

        # --- Stage 4: Enrichment ---
        bundle: InsightBundle | None = None
        if self.insight_provider is not None:
            _notify(on_stage, AnalysisStage.REQUEST_ENRICHMENT)
            bundle = await self._request_enrichment(
                job_description, resume_text, missing_skills, fit_score
            )
        if bundle is not None and bundle.is_empty():
            logger.info("Insight provider returned nothing usable, using rule-based insights")
            bundle = None
        degraded = bundle is None

        job_links: list[str] = []
        if bundle is not None and bundle.keywords:
            job_links = await self._find_job_links(bundle.keywords)

        # --- Stage 5: Assemble ---
        _notify(on_stage, AnalysisStage.ASSEMBLE_RESULT)
        bundle = bundle or InsightBundle()
        scoring_method = "local_only" if degraded else "enriched"
        return AnalysisResponse(
            fit_score=fit_score,
            fit_message=fit_message,
            matched_skills=matched_skills,
            missing_skills=missing_skills,
            insights=scoring.rule_based_insights(
                matched_skills, missing_skills, job_description, resume_text
            ),
            top_keywords=top_keywords(job_description, resume_text),
            general_insight=bundle.general_insight or fit_message,
            ranked_missing_skills=bundle.ranked_missing_skills,
            highlight_areas=bundle.highlight_areas,
            project_suggestions=bundle.project_suggestions,
            keywords=bundle.keywords,
            job_links=job_links,
            degraded=degraded,
            similarity_score=round(base_similarity, 4),
            skill_match_ratio=round(scoring.skill_match_ratio(matched_skills, job_skills), 4),
            scoring_method=scoring_method,
        )

    async def _request_enrichment(
        self,
        job_description: str,
        resume_text: str,
        missing_skills: list[str],
        fit_score: int,
    ) -> InsightBundle | None:
        try:
            return await asyncio.wait_for(
                self.insight_provider.enrich(
                    job_description, resume_text, list(missing_skills), fit_score
                ),
                timeout=self.config.provider_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Insight provider timed out after %.1fs, using rule-based insights",
                self.config.provider_timeout_seconds,
            )
        except Exception as e:
            logger.warning("Insight provider unavailable, using rule-based insights: %s", e)
        return None

    async def _find_job_links(self, keywords: list[str]) -> list[str]:
        if self.job_link_finder is None:
            return []
        try:
            return await self.job_link_finder.find_listings(keywords)
        except Exception as e:
            logger.warning("Job link lookup failed: %s", e)
            return []


def _notify(on_stage: StageObserver | None, stage: AnalysisStage) -> None:
    if on_stage is None:
        return
    try:
        on_stage(stage)
    except Exception as e:
        logger.debug("Stage observer raised on %s: %s", stage.value, e)
