"""
Cosine similarity scoring and result ordering.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List

from .schema import RankedResult

logger = logging.getLogger(__name__)


def cosine_similarity(a: Dict[str, float], b: Dict[str, float]) -> float:
    """Cosine of the angle between two sparse weight vectors.

    Keys missing from one vector count as zero.  Returns 0.0 when either
    vector has zero magnitude.  With non‑negative TF‑IDF weights the
    result lies in [0, 1].
    """
    dot_product = 0.0
    magnitude_a = 0.0
    magnitude_b = 0.0
    terms = list(a) + [term for term in b if term not in a]
    for term in terms:
        x = a.get(term, 0.0)
        y = b.get(term, 0.0)
        dot_product += x * y
        magnitude_a += x * x
        magnitude_b += y * y
    magnitude_a = math.sqrt(magnitude_a)
    magnitude_b = math.sqrt(magnitude_b)
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0
    return dot_product / (magnitude_a * magnitude_b)


def rank_results(results: Iterable[RankedResult]) -> List[RankedResult]:
    """Sort results by score, highest first.

    Equal scores keep their input order.
    """
    ranked = sorted(results, key=lambda result: result.score, reverse=True)
    logger.debug("Ranked %d results by similarity", len(ranked))
    return ranked
