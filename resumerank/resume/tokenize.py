"""
Résumé and job description tokenizer.

Turns raw text into the list of terms that the ranking stage
compares.  Text is lower‑cased, every character that is not an ASCII
word character or whitespace becomes a space, and the remaining words
are filtered by length and against the stopword list.  Symbols are
not preserved: "C++" becomes "c" (and is then dropped for length),
"co-operate" becomes "co" and "operate".
"""

from __future__ import annotations

import logging
import re
from typing import AbstractSet, Iterable, List

from .stopwords import STOPWORDS

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")


def build_stopwords(extra: Iterable[str] = ()) -> AbstractSet[str]:
    """Return the default stopword set extended with ``extra`` words."""
    extra_words = {word.lower() for word in extra}
    if not extra_words:
        return STOPWORDS
    return STOPWORDS | extra_words


def tokenize(text: str, stopwords: AbstractSet[str] = STOPWORDS) -> List[str]:
    """Split text into normalized terms.

    Args:
        text: Raw text extracted from a résumé or typed as a job
            description.
        stopwords: Words to discard.  Defaults to the built‑in English
            list.

    Returns:
        Terms in the order they occur.  Empty or whitespace‑only input
        yields an empty list.
    """
    cleaned = _NON_WORD.sub(" ", text.lower())
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    if not cleaned:
        return []
    terms = [word for word in cleaned.split(" ") if len(word) > 1 and word not in stopwords]
    logger.debug("Tokenized %d characters into %d terms", len(text), len(terms))
    return terms
