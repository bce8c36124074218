"""Report upload endpoints for extraction and comparison.

Handles upload validation, text extraction, and the analysis service call.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status
from pydantic import ValidationError

from src.analysis.client import AnalysisClient, AnalysisServiceError
from src.analysis.pipeline import analyze_texts, prepare_reports
from src.models.schemas import AnalysisResponse, ExtractionResponse, ReportLabel, ReportTexts
from src.parsing.pdf_extractor import PDFExtractionError, PDFSourceError, PDFTextExtractor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analysis", tags=["analysis"])

MAX_UPLOAD_SIZE = 20 * 1024 * 1024  # 20MB


def get_pdf_extractor() -> PDFTextExtractor:
    """Provide the PDF extractor used by the endpoints."""
    return PDFTextExtractor()


def get_analysis_client() -> AnalysisClient:
    """Provide an analysis client configured from environment.

    Raises:
        HTTPException: 503 if the analysis service is not configured.
    """
    try:
        return AnalysisClient()
    except ValidationError as e:
        logger.error(f"Analysis service is not configured: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Analysis service is not configured",
        ) from e


def _validate_file_extension(label: ReportLabel, filename: str | None) -> str:
    """Validate that file has .pdf extension.

    Args:
        label: Which report the file was uploaded as.
        filename: The uploaded filename.

    Returns:
        The validated filename.

    Raises:
        HTTPException: 400 if extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Filename is required for the {label.value} report",
        )

    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Only PDF files are accepted ({label.value} report)",
        )

    return filename


async def _read_report(label: ReportLabel, file: UploadFile) -> bytes:
    """Validate an uploaded report and read its content.

    Raises:
        HTTPException: 400 for a non-PDF filename, 413 if the file is too
            large, 422 if the upload cannot be read.
    """
    filename = _validate_file_extension(label, file.filename)

    try:
        content = await file.read()
    except OSError as e:
        error = PDFSourceError(f"Failed to read upload {filename}: {e}", document=label.value)
        raise _extraction_failed(error) from e

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        logger.warning(f"Rejected oversized {label.value} report {filename} ({size_mb:.1f}MB)")
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (20MB)",
        )

    return content


def _extraction_failed(error: PDFExtractionError) -> HTTPException:
    document = error.document or "uploaded"
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        detail=(
            f"Could not read the {document} report: {error}. "
            "Check that the PDF is not password protected or corrupt."
        ),
    )


async def _prepare(
    entrada: UploadFile, saida: UploadFile, extractor: PDFTextExtractor
) -> ReportTexts:
    entrada_bytes = await _read_report(ReportLabel.ENTRADA, entrada)
    saida_bytes = await _read_report(ReportLabel.SAIDA, saida)

    try:
        return await prepare_reports(entrada_bytes, saida_bytes, extractor)
    except PDFExtractionError as e:
        raise _extraction_failed(e) from e


@router.post("/extract", response_model=ExtractionResponse)
async def extract_reports(
    entrada: UploadFile,
    saida: UploadFile,
    extractor: PDFTextExtractor = Depends(get_pdf_extractor),
) -> ExtractionResponse:
    """Extract and clean the text of both reports without analyzing them.

    Args:
        entrada: The entrada report PDF (multipart/form-data).
        saida: The saída report PDF (multipart/form-data).

    Returns:
        ExtractionResponse with both clean texts.

    Raises:
        400: Non-PDF filename.
        413: File exceeds the upload limit.
        422: PDF cannot be decoded.
    """
    texts = await _prepare(entrada, saida, extractor)
    return ExtractionResponse(entrada=texts.entrada, saida=texts.saida)


@router.post("/compare", response_model=AnalysisResponse)
async def compare_reports(
    entrada: UploadFile,
    saida: UploadFile,
    extractor: PDFTextExtractor = Depends(get_pdf_extractor),
    client: AnalysisClient = Depends(get_analysis_client),
) -> AnalysisResponse:
    """Compare the entrada and saída reports.

    Extracts and cleans both PDFs concurrently, then sends the texts to the
    analysis service and returns its Markdown report.

    Raises:
        400: Non-PDF filename.
        413: File exceeds the upload limit.
        422: PDF cannot be decoded.
        502: Analysis service failed.
        503: Analysis service not configured.
    """
    texts = await _prepare(entrada, saida, extractor)

    try:
        result = await analyze_texts(texts, client)
    except AnalysisServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    logger.info(f"Analysis completed for {entrada.filename} / {saida.filename}")
    return result
