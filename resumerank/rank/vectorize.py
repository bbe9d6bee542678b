"""
TF‑IDF vectorization stage.

Builds one TF‑IDF space per ranking request from the tokenized
résumés and the tokenized job description.  Term frequency is the raw
count of a term in a document; inverse document frequency uses the
smoothed form ``ln(1 + N / df)`` where ``df`` is floored at 0.01 so
that terms seen only in the job description keep a large but finite
weight.  The job description never counts towards document frequency.

Every vector returned carries an entry for every term of the
request's universe, so any two of them can be compared directly.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Dict, List, Sequence, Tuple

logger = logging.getLogger(__name__)

MIN_DOCUMENT_FREQUENCY = 0.01


def term_frequencies(terms: Sequence[str]) -> Dict[str, int]:
    """Count occurrences of each term, keyed in first‑seen order."""
    return dict(Counter(terms))


def document_frequencies(frequency_maps: Sequence[Dict[str, int]]) -> Dict[str, int]:
    """Count how many documents contain each term at least once."""
    df: Dict[str, int] = {}
    for tf in frequency_maps:
        for term in tf:
            df[term] = df.get(term, 0) + 1
    return df


def term_universe(
    frequency_maps: Sequence[Dict[str, int]], query_frequencies: Dict[str, int]
) -> List[str]:
    """Union of document and query terms in first‑seen order."""
    universe: Dict[str, None] = {}
    for tf in frequency_maps:
        universe.update(dict.fromkeys(tf))
    universe.update(dict.fromkeys(query_frequencies))
    return list(universe)


def inverse_document_frequencies(
    universe: Sequence[str], df: Dict[str, int], total_documents: int
) -> Dict[str, float]:
    """Compute ``ln(1 + N / max(df, 0.01))`` for every term of the universe."""
    return {
        term: math.log(1 + total_documents / (df.get(term) or MIN_DOCUMENT_FREQUENCY))
        for term in universe
    }


def _weigh(tf: Dict[str, int], idf: Dict[str, float]) -> Dict[str, float]:
    return {term: tf.get(term, 0) * weight for term, weight in idf.items()}


def build_vectors(
    documents: Sequence[Sequence[str]], query: Sequence[str]
) -> Tuple[List[Dict[str, float]], Dict[str, float]]:
    """Build TF‑IDF vectors for a batch of documents and a query.

    Args:
        documents: Tokenized résumés, one term list per résumé.
        query: Tokenized job description.

    Returns:
        A tuple ``(document_vectors, query_vector)``.  Document vectors
        are in the same order as ``documents``.

    Raises:
        ValueError: If ``documents`` is empty.
    """
    if not documents:
        raise ValueError("At least one document is required to build TF-IDF vectors")
    document_tfs = [term_frequencies(doc) for doc in documents]
    query_tf = term_frequencies(query)
    df = document_frequencies(document_tfs)
    universe = term_universe(document_tfs, query_tf)
    idf = inverse_document_frequencies(universe, df, len(document_tfs))
    document_vectors = [_weigh(tf, idf) for tf in document_tfs]
    query_vector = _weigh(query_tf, idf)
    logger.debug(
        "Built TF-IDF vectors for %d documents over %d terms", len(document_vectors), len(universe)
    )
    return document_vectors, query_vector
