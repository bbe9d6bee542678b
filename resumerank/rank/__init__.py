"""
Ranking subsystem for resumerank.

The `rank` package turns tokenized résumés and a tokenized job
description into ordered results.  The stages are:

* `vectorize` – Builds one TF‑IDF space over the batch and the job
  description.
* `similarity` – Scores each résumé vector against the job
  description vector by cosine similarity and orders the results.
* `keywords` – Lists the terms each résumé shares with the job
  description.
* `schema` – The `RankedResult` record returned to callers.
"""

from .keywords import top_keywords  # noqa: F401
from .schema import RankedResult  # noqa: F401
from .similarity import cosine_similarity, rank_results  # noqa: F401
from .vectorize import build_vectors  # noqa: F401
