"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - pdf_factory: Builds small in-memory PDFs with given page texts
    - fake_decoder_factory: Decoder stub whose pages finish in reverse order
    - async_client: HTTPX client for API testing
    - analysis_config: Config pointing at a test webhook
"""

import asyncio
from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from src.analysis.config import AnalysisConfig
from src.api import app

TEST_WEBHOOK_URL = "https://hooks.example.test/analysis"


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: list[list[str]]) -> bytes:
    """Build a minimal PDF where each page shows its fragments, one per line."""
    page_ids = [4 + 2 * index for index in range(len(pages))]
    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
    ]
    for page_id, fragments in zip(page_ids, pages):
        content = "".join(
            f"BT /F1 12 Tf 72 {720 - 24 * line} Td ({_escape(fragment)}) Tj ET\n"
            for line, fragment in enumerate(fragments)
        ).encode("cp1252")
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_offset,
    )
    return bytes(out)


class FakeDocument:
    """Document stub; later pages complete before earlier ones."""

    def __init__(self, pages: list[list[str]]) -> None:
        self._pages = pages
        self.completion_order: list[int] = []

    @property
    def page_count(self) -> int:
        return len(self._pages)

    async def page_fragments(self, page_number: int) -> list[str]:
        await asyncio.sleep(0.002 * (self.page_count - page_number))
        self.completion_order.append(page_number)
        return list(self._pages[page_number - 1])


class FakeDecoder:
    """Decoder stub returning canned pages, or raising a canned error."""

    def __init__(self, pages: list[list[str]] | None = None, error: Exception | None = None) -> None:
        self._pages = pages or []
        self._error = error
        self.documents: list[FakeDocument] = []
        self.opened: list[bytes] = []

    async def open(self, data: bytes) -> FakeDocument:
        self.opened.append(data)
        if self._error is not None:
            raise self._error
        document = FakeDocument(self._pages)
        self.documents.append(document)
        return document


@pytest.fixture
def pdf_factory() -> Callable[[list[list[str]]], bytes]:
    """Return a builder for in-memory PDFs.

    Returns:
        Function taking a list of pages (each a list of text lines).
    """
    return build_pdf


@pytest.fixture
def fake_decoder_factory() -> Callable[..., FakeDecoder]:
    """Return a factory for decoder stubs."""
    return FakeDecoder


@pytest.fixture
def analysis_config() -> AnalysisConfig:
    """Return analysis config pointing at the test webhook."""
    return AnalysisConfig(webhook_url=TEST_WEBHOOK_URL, timeout=5.0)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
