"""
Résumé text handling.

This package turns an uploaded résumé into terms: the PDF text is
extracted by a lazily loaded backend and then split into normalized,
stopword‑free terms for ranking.
"""

from .extract_text import PdfTextExtractor, get_default_extractor, is_pdf  # noqa: F401
from .stopwords import STOPWORDS  # noqa: F401
from .tokenize import build_stopwords, tokenize  # noqa: F401
