"""Vistoria Compare - entrada/saída inspection report comparison.

Extracts text from two PDF inspection reports, strips per-page boilerplate,
and hands both texts to a remote analysis service.

Components:
    - parsing: PDF text extraction and normalization
    - analysis: Analysis service client and two-report pipeline
    - api: HTTP endpoints
    - models: Request/response schemas
"""

__version__ = "0.1.0"
