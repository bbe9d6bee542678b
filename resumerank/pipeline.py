"""
Ranking request orchestration.

:class:`ResumeRanker` drives one ranking request end to end:

1. Validate the request (at least one résumé, a non‑blank job
   description, PDF files only, extraction backend ready).  Nothing is
   extracted until every check passes.
2. Extract and tokenize every résumé concurrently.  The first failure
   cancels the remaining extractions and fails the whole batch; no
   partial results are reported.
3. Build one TF‑IDF space over the batch plus the job description,
   score each résumé, attach its shared keywords and sort.

Failures are reported through :class:`~resumerank.errors.RankingError`
subclasses.  :meth:`ResumeRanker.rank` is the boundary that turns them
into a single message on ``error``; :meth:`ResumeRanker.rank_documents`
lets them propagate.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Sequence

from .config import RankingSettings
from .errors import (
    ComputationError,
    DependencyUnavailableError,
    ExtractionError,
    RankingError,
    UnsupportedFormatError,
    ValidationError,
)
from .rank.keywords import top_keywords
from .rank.schema import RankedResult
from .rank.similarity import cosine_similarity, rank_results
from .rank.vectorize import build_vectors
from .resume.extract_text import PdfTextExtractor, get_default_extractor, is_pdf
from .resume.tokenize import build_stopwords, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceDocument:
    """An uploaded résumé: its file name, raw bytes and declared type."""

    name: str
    data: bytes
    content_type: Optional[str] = None

    @classmethod
    def from_path(cls, path: str, content_type: Optional[str] = None) -> "SourceDocument":
        with open(path, "rb") as f:
            data = f.read()
        return cls(name=os.path.basename(path), data=data, content_type=content_type)


class ResumeRanker:
    """Rank résumés against a job description.

    Attributes:
        is_processing: True while a request is running.  This is a
            hint for callers, not a lock; overlapping calls are not
            prevented.
        error: Message of the last failed request, empty otherwise.
        results: Results of the last successful request.
    """

    def __init__(
        self,
        extractor: Optional[PdfTextExtractor] = None,
        settings: Optional[RankingSettings] = None,
    ) -> None:
        self.extractor = extractor or get_default_extractor()
        self.settings = settings or RankingSettings()
        self.stopwords: AbstractSet[str] = build_stopwords(self.settings.extra_stopwords)
        self.is_processing = False
        self.error = ""
        self.results: List[RankedResult] = []

    async def rank(self, documents: Sequence[SourceDocument], job_description: str) -> List[RankedResult]:
        """Run a ranking request and record its outcome.

        Returns the ranked results, or an empty list when the request
        failed, in which case ``error`` holds the reason.
        """
        self.results = []
        self.error = ""
        self.is_processing = True
        try:
            self.results = await self.rank_documents(documents, job_description)
        except ComputationError as exc:
            logger.exception("Error processing resumes")
            self.error = f"Error: {exc}"
        except RankingError as exc:
            logger.error("Ranking request failed: %s", exc)
            self.error = str(exc)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error processing resumes")
            self.error = f"Error: {exc}"
        finally:
            self.is_processing = False
        return self.results

    async def rank_documents(
        self, documents: Sequence[SourceDocument], job_description: str
    ) -> List[RankedResult]:
        """Rank résumés, raising on the first failure.

        Raises:
            ValidationError: No documents, or a blank job description.
            UnsupportedFormatError: Some documents are not PDFs.
            DependencyUnavailableError: The PDF backend is not ready.
            ExtractionError: A document could not be read.
            ComputationError: Scoring failed unexpectedly.
        """
        self._validate(documents, job_description)
        query_terms = tokenize(job_description, self.stopwords)
        document_terms = await self._extract_all(documents)
        results = self._score(documents, document_terms, query_terms)
        logger.info("Ranked %d resumes", len(results))
        return results

    def _validate(self, documents: Sequence[SourceDocument], job_description: str) -> None:
        if not documents:
            raise ValidationError("Please upload at least one resume.")
        if not job_description or not job_description.strip():
            raise ValidationError("Please enter a job description.")
        unsupported = [
            doc.name
            for doc in documents
            if not is_pdf(
                doc.name,
                doc.content_type,
                content_types=self.settings.accepted_content_types,
                extensions=self.settings.accepted_extensions,
            )
        ]
        if unsupported:
            raise UnsupportedFormatError(unsupported)
        if not self.extractor.load():
            raise DependencyUnavailableError(
                "PDF processing library is not available. Please wait a moment and try again."
            )

    async def _extract_terms(self, document: SourceDocument) -> List[str]:
        try:
            text = await self.extractor.extract_async(document.name, document.data)
        except RankingError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise ExtractionError(document.name, exc) from exc
        return tokenize(text, self.stopwords)

    async def _extract_all(self, documents: Sequence[SourceDocument]) -> List[List[str]]:
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(self._extract_terms(doc)) for doc in documents]
        except ExceptionGroup as group_error:
            # _extract_terms only raises RankingError subclasses
            first = group_error.exceptions[0]
            first.__suppress_context__ = True
            raise first
        logger.debug("Extracted text from %d documents", len(tasks))
        return [task.result() for task in tasks]

    def _score(
        self,
        documents: Sequence[SourceDocument],
        document_terms: List[List[str]],
        query_terms: List[str],
    ) -> List[RankedResult]:
        try:
            document_vectors, query_vector = build_vectors(document_terms, query_terms)
            results = [
                RankedResult(
                    name=doc.name,
                    score=cosine_similarity(vector, query_vector) * 100,
                    keywords=tuple(top_keywords(terms, query_terms, self.settings.keyword_count)),
                )
                for doc, terms, vector in zip(documents, document_terms, document_vectors)
            ]
            return rank_results(results)
        except Exception as exc:  # noqa: BLE001
            raise ComputationError(str(exc) or exc.__class__.__name__) from exc
