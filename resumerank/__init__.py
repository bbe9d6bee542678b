"""
Resumerank package.

This package ranks a batch of résumés against a job description.  Each
submodule implements one step of the ranking request:

1. **resume** – Extract raw text from uploaded PDF résumés and
   tokenize it into normalized terms with stopwords removed.
2. **rank** – Build a TF‑IDF space over the batch plus the job
   description, score each résumé by cosine similarity, and surface
   the keywords it shares with the job description.
3. **pipeline** – The `ResumeRanker` orchestrator that sequences the
   steps above for one request and reports failures as a single
   human‑readable message.
4. **export** – Write ranked results to a CSV file for download.
5. **cli** – Command line entry point wiring together the above
   components.

Nothing is cached between requests: every ranking builds its own term
universe, IDF table and vectors from scratch.
"""

from importlib import metadata  # noqa: F401 (expose package version)

from .errors import (  # noqa: F401
    ComputationError,
    DependencyUnavailableError,
    ExtractionError,
    RankingError,
    UnsupportedFormatError,
    ValidationError,
)
from .pipeline import ResumeRanker, SourceDocument  # noqa: F401
from .rank.schema import RankedResult  # noqa: F401
