"""Test package for Vistoria Compare.

Structure:
    - unit/: Normalizer rules, extractor assembly, client and pipeline
    - integration/: HTTP endpoints with real in-memory PDFs

PDFs are generated by the pdf_factory fixture; no binary fixtures are
checked in. Leverages pytest with pytest-check for soft assertions.
"""
