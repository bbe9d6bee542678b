"""
PDF text extraction.

Résumés arrive as PDF bytes.  This module wraps ``pdfplumber`` behind
a small capability object so the orchestrator can ask whether
extraction is available before it starts a request, instead of
failing half way through a batch.  The backend is imported lazily on
the first call to :meth:`PdfTextExtractor.load` and shared by the
whole process through :func:`get_default_extractor`.
"""

from __future__ import annotations

import asyncio
import importlib
import io
import logging
import os
import threading
from typing import Iterable, Optional

from ..errors import DependencyUnavailableError, ExtractionError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def is_pdf(
    name: str,
    content_type: Optional[str] = None,
    *,
    content_types: Iterable[str] = (PDF_CONTENT_TYPE,),
    extensions: Iterable[str] = (".pdf",),
) -> bool:
    """Return whether a file is an accepted document.

    The declared content type wins when the caller supplied one (as a
    browser upload does); otherwise the file extension decides.
    """
    if content_type:
        return content_type.split(";")[0].strip().lower() in {c.lower() for c in content_types}
    ext = os.path.splitext(name)[1].lower()
    return ext in {e.lower() for e in extensions}


class PdfTextExtractor:
    """Lazily initialised PDF to text converter backed by pdfplumber."""

    backend_module = "pdfplumber"

    def __init__(self) -> None:
        self._backend = None
        self._lock = threading.Lock()

    @property
    def is_ready(self) -> bool:
        return self._backend is not None

    def load(self) -> bool:
        """Import the backend if needed and report whether it is usable.

        Safe to call repeatedly; only the first successful call does any
        work.  A missing backend is not cached so a later call can pick
        it up once it has been installed.
        """
        if self._backend is not None:
            return True
        with self._lock:
            if self._backend is None:
                try:
                    self._backend = importlib.import_module(self.backend_module)
                except ImportError as exc:
                    logger.warning("PDF backend %s is unavailable: %s", self.backend_module, exc)
                    return False
                logger.debug("Loaded PDF backend %s", self.backend_module)
        return True

    def extract(self, name: str, data: bytes) -> str:
        """Extract the text of every page of a PDF.

        Args:
            name: Document name, used in error messages.
            data: Raw PDF bytes.

        Returns:
            Page texts in page order joined by a single space, with
            surrounding whitespace stripped.

        Raises:
            DependencyUnavailableError: If the backend was never loaded.
            ExtractionError: If the document cannot be parsed.
        """
        if self._backend is None:
            raise DependencyUnavailableError(
                "PDF processing library is not available. Please wait a moment and try again."
            )
        try:
            with self._backend.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:  # noqa: BLE001
            logger.error("Error processing %s: %s", name, exc)
            raise ExtractionError(name, exc) from exc
        text = " ".join(pages).strip()
        logger.debug("Extracted %d characters from %d pages of %s", len(text), len(pages), name)
        return text

    async def extract_async(self, name: str, data: bytes) -> str:
        """Run :meth:`extract` in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.extract, name, data)


_default_extractor: Optional[PdfTextExtractor] = None
_default_lock = threading.Lock()


def get_default_extractor() -> PdfTextExtractor:
    """Return the process‑wide extractor, creating it on first use."""
    global _default_extractor
    if _default_extractor is None:
        with _default_lock:
            if _default_extractor is None:
                _default_extractor = PdfTextExtractor()
    return _default_extractor
