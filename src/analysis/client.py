"""HTTP client for the remote analysis service.

Posts the two clean report texts as JSON and returns the Markdown report
from the response body.
"""

import logging

import httpx

from src.analysis.config import AnalysisConfig, get_analysis_config
from src.models.schemas import AnalysisRequest

logger = logging.getLogger(__name__)


class AnalysisServiceError(Exception):
    """Raised when the analysis service fails or cannot be reached.

    Attributes:
        status_code: HTTP status returned by the service, if any.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AnalysisClient:
    """Client for the analysis webhook."""

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, mainly for tests.
        """
        self._config = config or get_analysis_config()
        self._transport = transport

    @property
    def config(self) -> AnalysisConfig:
        """Current client configuration."""
        return self._config

    async def analyze(self, request: AnalysisRequest) -> str:
        """Send both report texts and return the analysis report.

        Args:
            request: Payload with the entrada and saída texts.

        Returns:
            Markdown report produced by the service.

        Raises:
            AnalysisServiceError: On transport failure or non-2xx response.
        """
        logger.info(
            f"Sending reports for analysis "
            f"(entrada={len(request.entrada)} chars, saida={len(request.saida)} chars)"
        )

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._config.webhook_url,
                    json=request.model_dump(),
                )
        except httpx.HTTPError as e:
            logger.error(f"Analysis service unreachable: {e}")
            raise AnalysisServiceError(f"Failed to reach analysis service: {e}") from e

        if not response.is_success:
            logger.error(
                f"Analysis service returned {response.status_code} {response.reason_phrase}"
            )
            raise AnalysisServiceError(
                f"Analysis service error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        logger.info(f"Received analysis report ({len(response.text)} chars)")
        return response.text
