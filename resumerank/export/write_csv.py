"""
CSV export for ranked résumés.

Writes ranked results with the columns ``Resume Name``,
``Similarity Score (%)`` (two decimal places) and ``Top Keywords``
(comma separated), in rank order.  Existing files are overwritten and
text is written as UTF‑8.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Dict, Iterable, List, TextIO

from ..rank.schema import RankedResult

logger = logging.getLogger(__name__)

RANKING_HEADERS = ["Resume Name", "Similarity Score (%)", "Top Keywords"]


def _to_row(result: RankedResult) -> Dict[str, str]:
    return {
        "Resume Name": result.name,
        "Similarity Score (%)": result.formatted_score,
        "Top Keywords": ", ".join(result.keywords),
    }


def write_rankings(results: Iterable[RankedResult], stream: TextIO) -> int:
    """Write results to an open text stream and return the row count."""
    writer = csv.DictWriter(stream, fieldnames=RANKING_HEADERS)
    writer.writeheader()
    count = 0
    for result in results:
        writer.writerow(_to_row(result))
        count += 1
    return count


def rankings_to_csv(results: Iterable[RankedResult]) -> str:
    """Render results as CSV text."""
    buffer = io.StringIO()
    write_rankings(results, buffer)
    return buffer.getvalue()


def write_rankings_csv(results: Iterable[RankedResult], path: str) -> None:
    """Write ranked results to a CSV file.

    Args:
        results: Ranked results, already in rank order.
        path: Destination path for the CSV.
    """
    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        count = write_rankings(results, csvfile)
    logger.info("Wrote %d rankings to %s", count, path)


def read_rankings_csv(path: str) -> List[Dict[str, str]]:
    """Read rows back from a CSV written by :func:`write_rankings_csv`."""
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = [h for h in RANKING_HEADERS if h not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"{path} is missing columns: {', '.join(missing)}")
        return list(reader)
