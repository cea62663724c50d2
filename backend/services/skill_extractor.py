"""Fixed-vocabulary skill extraction.

Skills are detected by case-insensitive substring presence in the full text.
Matching is not word-bounded, so short terms can fire inside longer words
("AI" inside "maintain", "UI" inside "build"). Synonyms are not resolved
("JS" does not count as "JavaScript").
"""

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

SKILL_VOCABULARY: tuple[str, ...] = (
    # Languages and frameworks
    "JavaScript", "TypeScript", "React", "Vue", "Angular", "Node.js",
    "Python", "Java", "C++", "C#", "HTML", "CSS", "SQL",
    # Data stores
    "PostgreSQL", "MySQL", "MongoDB", "Redis",
    # Infrastructure
    "Docker", "Kubernetes", "AWS", "Azure", "GCP", "Git", "Linux",
    # Process
    "Agile", "Scrum", "DevOps", "CI/CD", "REST", "GraphQL",
    # Data
    "Machine Learning", "AI", "Data Science", "Analytics",
    # Business and soft skills
    "Project Management", "Leadership", "Communication", "Problem Solving",
    "Teamwork", "Strategic Planning", "Marketing", "Sales", "Customer Service",
    # Design
    "Design", "UX", "UI", "Figma", "Photoshop", "Illustrator",
)


def extract_skills(text: str, vocabulary: Iterable[str] = SKILL_VOCABULARY) -> list[str]:
    """Return vocabulary terms found in text, in vocabulary order."""
    haystack = text.lower()
    found: list[str] = []
    for skill in vocabulary:
        if skill.lower() in haystack and skill not in found:
            found.append(skill)
    return found


def get_skill_gap(
    resume_skills: Iterable[str],
    job_skills: Iterable[str],
) -> tuple[list[str], list[str]]:
    """Split job skills into (matched, missing) against the resume skills.

    Both lists are de-duplicated and keep the order of job_skills.
    """
    resume_set = set(resume_skills)
    matched: list[str] = []
    missing: list[str] = []
    for skill in dict.fromkeys(job_skills):
        if skill in resume_set:
            matched.append(skill)
        else:
            missing.append(skill)
    return matched, missing
