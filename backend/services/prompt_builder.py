"""All prompt templates for Gemini API calls."""


def build_insights_prompt(
    job_description: str,
    resume_text: str,
    missing_skills: list[str],
    fit_score: int,
) -> str:
    """Call A: alignment summary, ranked gaps, highlight areas and search keywords.

    The locally computed fit score and skill gaps are passed in as context so
    the model explains the score instead of inventing a new one.
    """
    missing = ", ".join(missing_skills) if missing_skills else "none detected"

    return f"""You are an experienced technical recruiter and career coach.

Compare the resume with the job description below.

LOCAL PRE-ANALYSIS (treat as ground truth, do not re-score):
- Fit score: {fit_score}/100
- Skills from the job description missing in the resume: {missing}
---

JOB DESCRIPTION:
---
{job_description}
---

RESUME:
---
{resume_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "general_insight": "<one paragraph on how well the candidate aligns with the role and why>",
  "ranked_missing_skills": [<missing skills ordered from most to least important for this job>],
  "highlight_areas": [<3-5 experiences or strengths from the resume worth emphasizing for this job>],
  "matched_skills": [<skills clearly present in both the resume and the job description>],
  "keywords": [<3-5 short job-search keywords, e.g. job titles, describing this role>]
}}"""


def build_projects_prompt(
    job_description: str,
    missing_skills: list[str],
) -> str:
    """Call B: portfolio project ideas that close the skill gaps."""
    missing = ", ".join(missing_skills) if missing_skills else "none detected"

    return f"""You are a senior engineer mentoring a candidate who wants to strengthen their portfolio.

Suggest portfolio projects that would demonstrate the skills this job asks for,
prioritizing the skills the candidate is missing.

MISSING SKILLS: {missing}

JOB DESCRIPTION:
---
{job_description}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "project_suggestions": [<2-4 project ideas, each "Title: one or two sentence description naming the skills it demonstrates">]
}}"""
