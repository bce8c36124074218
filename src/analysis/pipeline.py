"""Two-report pipeline: extract, normalize, analyze.

Both reports are prepared concurrently. A failure in either one fails the
whole run; a report is never replaced by empty text.
"""

import asyncio
import logging
from pathlib import Path

from src.analysis.client import AnalysisClient
from src.models.schemas import AnalysisResponse, ReportLabel, ReportTexts
from src.parsing.normalizer import normalize_text
from src.parsing.pdf_extractor import PDFExtractionError, PDFTextExtractor, read_document

logger = logging.getLogger(__name__)

ReportSource = bytes | Path


async def prepare_report(source: ReportSource, extractor: PDFTextExtractor | None = None) -> str:
    """Turn one report into clean text.

    Args:
        source: PDF bytes, or the path of a PDF file.
        extractor: Optional extractor. Uses the pypdf-backed default if omitted.

    Returns:
        Normalized report text.

    Raises:
        PDFExtractionError: If the report cannot be read or decoded.
    """
    extractor = extractor or PDFTextExtractor()
    data = await read_document(source) if isinstance(source, Path) else source
    raw = await extractor.extract(data)
    return normalize_text(raw)


async def _prepare_labeled(
    label: ReportLabel, source: ReportSource, extractor: PDFTextExtractor
) -> str:
    try:
        text = await prepare_report(source, extractor)
    except PDFExtractionError as e:
        e.document = label.value
        logger.warning(f"Extraction failed for {label.value} report: {e}")
        raise

    logger.info(f"Prepared {label.value} report ({len(text)} chars)")
    return text


async def prepare_reports(
    entrada: ReportSource,
    saida: ReportSource,
    extractor: PDFTextExtractor | None = None,
) -> ReportTexts:
    """Prepare the entrada and saída reports concurrently.

    Raises:
        PDFExtractionError: If either report fails; ``document`` names it.
    """
    extractor = extractor or PDFTextExtractor()
    entrada_text, saida_text = await asyncio.gather(
        _prepare_labeled(ReportLabel.ENTRADA, entrada, extractor),
        _prepare_labeled(ReportLabel.SAIDA, saida, extractor),
    )
    return ReportTexts(entrada=entrada_text, saida=saida_text)


async def analyze_reports(
    entrada: ReportSource,
    saida: ReportSource,
    client: AnalysisClient | None = None,
    extractor: PDFTextExtractor | None = None,
) -> AnalysisResponse:
    """Prepare both reports and send them to the analysis service.

    Args:
        entrada: The entrada report (bytes or path).
        saida: The saída report (bytes or path).
        client: Optional analysis client. Built from environment if omitted.
        extractor: Optional extractor.

    Returns:
        AnalysisResponse with the Markdown report.

    Raises:
        PDFExtractionError: If either report cannot be extracted.
        AnalysisServiceError: If the analysis service fails.
    """
    texts = await prepare_reports(entrada, saida, extractor)
    return await analyze_texts(texts, client)


async def analyze_texts(
    texts: ReportTexts, client: AnalysisClient | None = None
) -> AnalysisResponse:
    """Send already prepared report texts to the analysis service.

    Raises:
        AnalysisServiceError: If the analysis service fails.
    """
    client = client or AnalysisClient()
    report = await client.analyze(texts.to_request())

    return AnalysisResponse(
        report=report,
        entrada_chars=len(texts.entrada),
        saida_chars=len(texts.saida),
    )
