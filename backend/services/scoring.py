"""Fit score blending and rule-based feedback."""

import logging
import math
from collections.abc import Sequence

from config import ScoringWeights

logger = logging.getLogger(__name__)

# (lower bound, message), checked from the top down
FIT_MESSAGES: tuple[tuple[int, str], ...] = (
    (80, "Excellent match! Your resume aligns very well with the job requirements."),
    (70, "Strong match. Your resume covers most of the key requirements for this role."),
    (60, "Good match with room for improvement. Consider highlighting relevant experience more prominently."),
    (50, "Moderate match. Focus on developing the missing skills and better showcasing relevant experience."),
    (0, "Limited match. Consider gaining experience in the key areas mentioned in the job description."),
)

EXPERIENCE_INDICATORS = ("years", "experience", "led", "managed", "developed", "created")
SOFT_SKILLS = ("leadership", "communication", "teamwork", "problem solving")


def skill_match_ratio(matched_skills: Sequence[str], job_skills: Sequence[str]) -> float:
    if not job_skills:
        return 0.0
    return len(matched_skills) / len(job_skills)


def blend_score(
    base_similarity: float,
    matched_skills: Sequence[str],
    job_skills: Sequence[str],
    weights: ScoringWeights,
) -> float:
    """Unbounded weighted blend of similarity (0-100) and skill coverage."""
    adjusted = base_similarity * weights.similarity
    if job_skills:
        adjusted += skill_match_ratio(matched_skills, job_skills) * 100 * weights.skill
    return adjusted


def combine_fit_score(
    base_similarity: float,
    matched_skills: Sequence[str],
    job_skills: Sequence[str],
    weights: ScoringWeights | None = None,
) -> int:
    """Blend, clamp to 0-100 and round half up to an integer fit score."""
    weights = weights or ScoringWeights()
    adjusted = blend_score(base_similarity, matched_skills, job_skills, weights)
    if math.isnan(adjusted):
        adjusted = 0.0
    clamped = min(100.0, max(0.0, adjusted))
    return int(math.floor(clamped + 0.5))


def fit_message(fit_score: int) -> str:
    """Canned message for the score bucket (<50, 50s, 60s, 70s, 80+)."""
    for lower_bound, message in FIT_MESSAGES:
        if fit_score >= lower_bound:
            return message
    return FIT_MESSAGES[-1][1]


def rule_based_insights(
    matched_skills: Sequence[str],
    missing_skills: Sequence[str],
    job_text: str,
    resume_text: str,
) -> list[str]:
    """Deterministic suggestions that do not depend on the insight provider."""
    insights: list[str] = []
    resume_lower = resume_text.lower()

    if matched_skills:
        insights.append(f"Strong alignment in {', '.join(matched_skills[:3])} skills.")

    if missing_skills:
        insights.append(
            f"Consider developing skills in {', '.join(missing_skills[:3])} to improve your match."
        )

    if not any(word in resume_lower for word in EXPERIENCE_INDICATORS):
        insights.append(
            "Consider adding more specific examples of your accomplishments and years of experience."
        )

    if "leadership" in job_text.lower() and not any(s in resume_lower for s in SOFT_SKILLS):
        insights.append(
            "The role requires leadership skills - consider highlighting your leadership experience."
        )

    return insights
