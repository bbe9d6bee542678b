"""
Error taxonomy for ranking requests.

Every error raised while serving a ranking request derives from
:class:`RankingError` and carries a message that can be shown to the
user as is.  The orchestrator catches these at its boundary; nothing
below it swallows them.
"""

from __future__ import annotations

from typing import Iterable, List


class RankingError(Exception):
    """Base class for failures of a ranking request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(RankingError):
    """No résumés were supplied or the job description is blank."""


class UnsupportedFormatError(RankingError):
    """One or more supplied files are not PDF documents."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names: List[str] = list(names)
        super().__init__(
            f"Only PDF files are supported. Please remove: {', '.join(self.names)}"
        )


class DependencyUnavailableError(RankingError):
    """The PDF text extraction backend is not ready."""


class ExtractionError(RankingError):
    """A specific document could not be converted to text."""

    def __init__(self, name: str, cause: BaseException | str) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to process {name}: {cause}")


class ComputationError(RankingError):
    """Vectorization or scoring failed unexpectedly."""
