"""Pydantic models for payloads and API responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - AnalysisRequest: Payload sent to the analysis service
    - ReportTexts: Clean texts of both reports
    - ExtractionResponse: Extraction preview response
    - AnalysisResponse: Comparison report response
"""

from src.models.schemas import (
    AnalysisRequest,
    AnalysisResponse,
    ExtractionResponse,
    ReportLabel,
    ReportTexts,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "ExtractionResponse",
    "ReportLabel",
    "ReportTexts",
]
