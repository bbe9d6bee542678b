"""Shared fixtures for the resumerank test suite."""

from __future__ import annotations

from typing import Dict, Iterable, List

import pytest

from resumerank.errors import ExtractionError
from resumerank.resume.extract_text import PdfTextExtractor


class FakeExtractor(PdfTextExtractor):
    """Extractor that serves canned text keyed by document name."""

    def __init__(self, texts: Dict[str, str], failures: Iterable[str] = (), ready: bool = True) -> None:
        super().__init__()
        self.texts = texts
        self.failures = set(failures)
        self.ready = ready
        self.calls: List[str] = []

    def load(self) -> bool:
        return self.ready

    def extract(self, name: str, data: bytes) -> str:
        self.calls.append(name)
        if name in self.failures:
            raise ExtractionError(name, "corrupt file")
        return self.texts[name]


def _build_pdf(pages: List[str]) -> bytes:
    """Assemble a minimal PDF with one line of Helvetica text per page."""
    font_id = 3 + 2 * len(pages)
    objects: Dict[int, bytes] = {1: b"<< /Type /Catalog /Pages 2 0 R >>"}
    kids = []
    for i, text in enumerate(pages):
        page_id, content_id = 3 + 2 * i, 4 + 2 * i
        kids.append(f"{page_id} 0 R")
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
        objects[page_id] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Contents {content_id} 0 R /Resources << /Font << /F1 {font_id} 0 R >> >> >>"
        ).encode("latin-1")
        objects[content_id] = b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
    objects[2] = f"<< /Type /Pages /Kids [{' '.join(kids)}] /Count {len(pages)} >>".encode("latin-1")
    objects[font_id] = b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>"

    out = bytearray(b"%PDF-1.4\n")
    offsets: Dict[int, int] = {}
    for num in sorted(objects):
        offsets[num] = len(out)
        out += b"%d 0 obj\n" % num + objects[num] + b"\nendobj\n"
    xref_offset = len(out)
    size = max(objects) + 1
    out += b"xref\n0 %d\n" % size
    out += b"0000000000 65535 f \n"
    for num in range(1, size):
        out += b"%010d 00000 n \n" % offsets[num]
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (size, xref_offset)
    return bytes(out)


@pytest.fixture
def make_pdf():
    """Return a callable building PDF bytes from a list of page texts."""
    return _build_pdf


@pytest.fixture
def fake_extractor():
    """Return the FakeExtractor class for tests to instantiate."""
    return FakeExtractor


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RESUMERANK_KEYWORD_COUNT", raising=False)
    monkeypatch.delenv("RESUMERANK_LOG_LEVEL", raising=False)
