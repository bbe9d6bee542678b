"""
Export of ranked results.

Ranked résumés can be downloaded as a CSV file; see `write_csv`.
"""

from .write_csv import (  # noqa: F401
    RANKING_HEADERS,
    rankings_to_csv,
    read_rankings_csv,
    write_rankings_csv,
)
