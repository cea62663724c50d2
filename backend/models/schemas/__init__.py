"""Contracts exchanged with external collaborators."""

from models.schemas.insight_bundle import InsightBundle

__all__ = [
    "InsightBundle",
]
