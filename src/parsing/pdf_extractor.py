"""PDF text extraction with a pluggable decoder.

The extractor only knows how to walk pages and assemble text. Decoding the
PDF itself is delegated to a PDFDecoder; the default one is backed by pypdf.
"""

import asyncio
import io
import logging
import threading
from pathlib import Path
from typing import Protocol

from pypdf import PageObject, PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
PDF_MAGIC_BYTES = b"%PDF"
PAGE_SEPARATOR = "\n\n"
FRAGMENT_SEPARATOR = " "


class PDFExtractionError(Exception):
    """Raised when text cannot be extracted from a document.

    Attributes:
        document: Label of the report that failed, when known.
    """

    def __init__(self, message: str, *, document: str | None = None) -> None:
        super().__init__(message)
        self.document = document


class PDFDecodeError(PDFExtractionError):
    """Raised when the PDF is corrupt, encrypted or otherwise unreadable."""

    pass


class PDFSourceError(PDFExtractionError):
    """Raised when the document bytes cannot be read from their source."""

    pass


class PDFDocumentHandle(Protocol):
    """An opened document as seen by the extractor."""

    @property
    def page_count(self) -> int:
        """Number of pages in the document."""
        ...

    async def page_fragments(self, page_number: int) -> list[str]:
        """Return the text fragments of a page (1-based) in content order."""
        ...


class PDFDecoder(Protocol):
    """Protocol for PDF decoding backends."""

    async def open(self, data: bytes) -> PDFDocumentHandle:
        """Decode raw PDF bytes into a document handle."""
        ...


def _validate_pdf_bytes(data: bytes) -> None:
    """Validate PDF content before handing it to the decoder.

    Args:
        data: Raw bytes of the PDF file.

    Raises:
        PDFDecodeError: If the buffer is empty or lacks a PDF header.
    """
    if not data:
        raise PDFDecodeError("Empty file provided")

    if not data.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFDecodeError("Invalid PDF: file does not start with PDF header")


def _clean_fragment(text: str) -> str:
    # pypdf reports layout line breaks and inter-word gaps as text runs of
    # their own; those carry no text and are dropped.
    if not text.strip():
        return ""
    return text.strip("\r\n")


class PypdfDocument:
    """Document handle over a pypdf reader.

    A PdfReader resolves objects lazily from one shared stream, so page
    access is serialized per document. Separate documents still decode
    in parallel.
    """

    def __init__(self, reader: PdfReader) -> None:
        self._reader = reader
        self._lock = threading.Lock()

    @property
    def page_count(self) -> int:
        return len(self._reader.pages)

    def _read_fragments(self, page_number: int) -> list[str]:
        fragments: list[str] = []

        def visit(text: str, *_args: object) -> None:
            fragment = _clean_fragment(text)
            if fragment:
                fragments.append(fragment)

        with self._lock:
            page: PageObject = self._reader.pages[page_number - 1]
            page.extract_text(visitor_text=visit)

        return fragments

    async def page_fragments(self, page_number: int) -> list[str]:
        return await asyncio.to_thread(self._read_fragments, page_number)


class PypdfDecoder:
    """Default decoder built on pypdf."""

    def _open(self, data: bytes) -> PypdfDocument:
        _validate_pdf_bytes(data)

        try:
            reader = PdfReader(io.BytesIO(data))
        except PdfReadError as e:
            raise PDFDecodeError(f"Corrupt or invalid PDF: {e}") from e
        except Exception as e:
            raise PDFDecodeError(f"Failed to read PDF: {e}") from e

        if reader.is_encrypted:
            # Permission-only protection opens with an empty user password
            try:
                unlocked = reader.decrypt("")
            except Exception as e:
                raise PDFDecodeError(f"PDF is password protected: {e}") from e
            if not unlocked:
                raise PDFDecodeError("PDF is password protected")

        return PypdfDocument(reader)

    async def open(self, data: bytes) -> PypdfDocument:
        return await asyncio.to_thread(self._open, data)


class PDFTextExtractor:
    """Extracts the plain text of a PDF, page by page, in document order.

    Page texts are requested concurrently and reassembled in ascending
    page order. Fragments within a page are joined with a single space and
    pages with a blank line.
    """

    def __init__(self, decoder: PDFDecoder | None = None) -> None:
        """Initialize the extractor.

        Args:
            decoder: Decoding backend. Defaults to PypdfDecoder.
        """
        self._decoder = decoder or PypdfDecoder()

    async def _page_text(self, document: PDFDocumentHandle, page_number: int) -> str:
        fragments = await document.page_fragments(page_number)
        return FRAGMENT_SEPARATOR.join(fragments)

    async def extract(self, data: bytes) -> str:
        """Extract the text of every page.

        Args:
            data: Raw bytes of the PDF file.

        Returns:
            Page texts joined by a blank line. Empty for a document
            without pages.

        Raises:
            PDFExtractionError: If the document cannot be decoded.
        """
        try:
            document = await self._decoder.open(data)
            page_count = document.page_count
            # gather keeps argument order, whatever order pages finish in
            page_texts = await asyncio.gather(
                *(self._page_text(document, number) for number in range(1, page_count + 1))
            )
        except PDFExtractionError:
            raise
        except Exception as e:
            raise PDFDecodeError(f"Failed to extract PDF text: {e}") from e

        logger.info(f"Extracted text from {page_count} page(s)")
        return PAGE_SEPARATOR.join(page_texts)


async def extract_text(data: bytes) -> str:
    """Extract text from PDF bytes with the default decoder."""
    return await PDFTextExtractor().extract(data)


async def read_document(path: Path) -> bytes:
    """Read a PDF file from disk.

    Args:
        path: Location of the PDF file.

    Returns:
        The file's bytes.

    Raises:
        PDFSourceError: If the file cannot be read.
    """
    try:
        return await asyncio.to_thread(Path(path).read_bytes)
    except OSError as e:
        raise PDFSourceError(f"Failed to read {path}: {e}") from e
