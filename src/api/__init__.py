"""HTTP API for inspection report comparison.

Endpoints:
    - GET /health: Service health status
    - POST /analysis/extract: Clean text of both uploaded reports
    - POST /analysis/compare: Analysis report for both uploaded reports
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
