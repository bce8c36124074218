"""PDF text extraction and cleanup for inspection reports.

Turns a report PDF into clean, comparable plain text.

Responsibilities:
    - Page-by-page text extraction behind a pluggable decoder (pypdf by default)
    - Deterministic page ordering with concurrent page decoding
    - Removal of per-page boilerplate (codes, placeholders, pagination, signatures)
    - Blank-line collapsing

Output feeds the analysis service, which compares the entrada and saída
reports.
"""

from src.parsing.normalizer import DEFAULT_RULES, NormalizationRule, apply_rule, normalize_text
from src.parsing.pdf_extractor import (
    PDFDecodeError,
    PDFDecoder,
    PDFDocumentHandle,
    PDFExtractionError,
    PDFSourceError,
    PDFTextExtractor,
    PypdfDecoder,
    extract_text,
    read_document,
)

__all__ = [
    "DEFAULT_RULES",
    "NormalizationRule",
    "PDFDecodeError",
    "PDFDecoder",
    "PDFDocumentHandle",
    "PDFExtractionError",
    "PDFSourceError",
    "PDFTextExtractor",
    "PypdfDecoder",
    "apply_rule",
    "extract_text",
    "normalize_text",
    "read_document",
]
