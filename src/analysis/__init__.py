"""Analysis of entrada/saída inspection reports.

Responsibilities:
    - Concurrent preparation of both reports (extraction + normalization)
    - Client for the remote analysis webhook
    - Configuration loaded from environment

The comparison itself happens in the remote service; this package only
prepares its input and relays its Markdown report.
"""

from src.analysis.client import AnalysisClient, AnalysisServiceError
from src.analysis.config import AnalysisConfig, get_analysis_config
from src.analysis.pipeline import analyze_reports, prepare_report, prepare_reports

__all__ = [
    "AnalysisClient",
    "AnalysisConfig",
    "AnalysisServiceError",
    "analyze_reports",
    "get_analysis_config",
    "prepare_report",
    "prepare_reports",
]
