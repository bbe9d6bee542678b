"""
Ranking result schema.

Defines the immutable record produced for each résumé in a ranking
request.  ``score`` is the cosine similarity scaled to a 0–100
percentage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class RankedResult:
    """One ranked résumé."""

    name: str
    score: float
    keywords: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def formatted_score(self) -> str:
        return f"{self.score:.2f}"
