"""
Shared keyword extraction.

Surfaces the terms a résumé has in common with the job description,
most salient first.  Salience is the product of a term's frequency in
the résumé and in the job description; IDF plays no part here.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Sequence

DEFAULT_KEYWORD_COUNT = 10


def top_keywords(
    document_terms: Sequence[str], query_terms: Sequence[str], count: int = DEFAULT_KEYWORD_COUNT
) -> List[str]:
    """Return up to ``count`` terms shared by a document and a query.

    Args:
        document_terms: Tokenized résumé.
        query_terms: Tokenized job description.
        count: Maximum number of keywords to return.

    Returns:
        Shared terms sorted by ``query_freq * document_freq`` descending.
        Ties keep the order in which terms first appear in the résumé.
    """
    if count <= 0:
        return []
    document_freq = Counter(document_terms)
    query_freq = Counter(query_terms)
    shared = [term for term in document_freq if query_freq[term] > 0]
    shared.sort(key=lambda term: query_freq[term] * document_freq[term], reverse=True)
    return shared[:count]
