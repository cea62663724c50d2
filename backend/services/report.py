"""Plain-text report export for an analysis result."""

from models.responses import AnalysisResponse

REPORT_FILENAME = "resume-fit-analysis-report.txt"


def _bullets(items: list[str]) -> str:
    return "\n".join(f"• {item}" for item in items) if items else "N/A"


def render_report(result: AnalysisResponse) -> str:
    """Render the downloadable report. Empty sections read "N/A"."""
    general = list(result.insights)
    # general_insight falls back to fit_message, which already has its own line
    if result.general_insight and result.general_insight != result.fit_message:
        general.insert(0, result.general_insight)

    sections = [
        "Resume Fit Analysis Report",
        "=========================",
        "",
        f"Fit Score: {result.fit_score}%",
        f"Fit Message: {result.fit_message or 'N/A'}",
        "",
        "Matched Skills:",
        _bullets(result.matched_skills),
        "",
        "Missing Skills:",
        _bullets(result.missing_skills),
        "",
        "Areas to Highlight:",
        _bullets(result.highlight_areas),
        "",
        "Project Suggestions:",
        _bullets(result.project_suggestions),
        "",
        "General Insights:",
        _bullets(general),
    ]
    if result.job_links:
        sections += ["", "Related Job Searches:", _bullets(result.job_links)]
    return "\n".join(sections) + "\n"
