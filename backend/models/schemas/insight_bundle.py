"""Insight provider output: qualitative suggestions beyond the fit score."""

from pydantic import BaseModel


class InsightBundle(BaseModel):
    """Structured enrichment returned by an insight provider.

    Every field is optional. A provider that could only answer part of the
    request leaves the rest empty.
    """
    general_insight: str = ""
    ranked_missing_skills: list[str] = []
    highlight_areas: list[str] = []
    project_suggestions: list[str] = []
    matched_skills: list[str] = []
    keywords: list[str] = []

    def is_empty(self) -> bool:
        """True when nothing in the bundle would reach the analysis result.

        matched_skills is not counted: the result's matched skills always
        come from the local vocabulary match.
        """
        return not any((
            self.general_insight,
            self.ranked_missing_skills,
            self.highlight_areas,
            self.project_suggestions,
            self.keywords,
        ))
