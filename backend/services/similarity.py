"""Term-frequency cosine similarity between resume and job description."""

import logging
from collections import Counter

import numpy as np

from models.responses import KeywordScore
from services.tokenizer import tokenize

logger = logging.getLogger(__name__)


def term_frequency(tokens: list[str]) -> dict[str, float]:
    """Map each distinct token to count / total tokens. Empty in, empty out."""
    total = len(tokens)
    if total == 0:
        return {}
    return {token: count / total for token, count in Counter(tokens).items()}


def cosine_similarity(tf_a: dict[str, float], tf_b: dict[str, float]) -> float:
    """Cosine similarity of two frequency maps, as a percentage (0-100).

    Returns 0.0 when either map has zero magnitude. The union of terms is
    walked in sorted order so that swapping the arguments gives the exact
    same float.
    """
    terms = sorted(tf_a.keys() | tf_b.keys())
    if not terms:
        return 0.0

    vec_a = np.array([tf_a.get(t, 0.0) for t in terms], dtype=np.float64)
    vec_b = np.array([tf_b.get(t, 0.0) for t in terms], dtype=np.float64)

    mag_a = float(np.dot(vec_a, vec_a))
    mag_b = float(np.dot(vec_b, vec_b))
    if mag_a == 0.0 or mag_b == 0.0:
        return 0.0

    dot = float(np.dot(vec_a, vec_b))
    return float(dot / (np.sqrt(mag_a) * np.sqrt(mag_b)) * 100)


def text_similarity(text_a: str, text_b: str) -> float:
    """Tokenize both texts and compare their term-frequency vectors (0-100)."""
    score = cosine_similarity(
        term_frequency(tokenize(text_a)),
        term_frequency(tokenize(text_b)),
    )
    logger.debug("Term-frequency cosine similarity: %.2f", score)
    return score


def top_keywords(job_text: str, resume_text: str, limit: int = 8) -> list[KeywordScore]:
    """Tokens shared by both texts, ranked by their mean term frequency."""
    job_tf = term_frequency(tokenize(job_text))
    resume_tf = term_frequency(tokenize(resume_text))

    shared = [
        (term, (job_tf[term] + resume_tf[term]) / 2)
        for term in job_tf.keys() & resume_tf.keys()
    ]
    shared.sort(key=lambda item: (-item[1], item[0]))
    return [KeywordScore(word=word, score=round(score, 4)) for word, score in shared[:limit]]
