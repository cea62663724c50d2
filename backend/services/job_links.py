"""Related job listings built from provider keywords."""

import logging
from typing import Protocol
from urllib.parse import quote_plus

logger = logging.getLogger(__name__)


class JobLinkFinder(Protocol):
    async def find_listings(self, keywords: list[str]) -> list[str]:
        ...


class SearchUrlJobLinkFinder:
    """Turn keywords into job-board search URLs.

    Each template contains a "{query}" placeholder. One URL is produced per
    keyword and board, up to max_keywords keywords.
    """

    def __init__(self, board_templates: dict[str, str], max_keywords: int = 3) -> None:
        self.board_templates = dict(board_templates)
        self.max_keywords = max_keywords

    async def find_listings(self, keywords: list[str]) -> list[str]:
        terms = list(dict.fromkeys(k.strip() for k in keywords if k and k.strip()))
        links: list[str] = []
        for keyword in terms[: self.max_keywords]:
            query = quote_plus(keyword)
            for board, template in self.board_templates.items():
                try:
                    links.append(template.format(query=query))
                except (KeyError, IndexError, ValueError) as e:
                    logger.warning("Skipping malformed job board template for %s: %s", board, e)
        return links
