"""Integration tests for components working together as a system.

Uploads real PDFs to the FastAPI app through ASGITransport and decodes
them with pypdf. Only the remote analysis webhook is mocked.
"""
