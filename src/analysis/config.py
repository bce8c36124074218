"""Analysis service configuration with environment variable loading.

The analysis service is a webhook that receives both report texts and
answers with a Markdown comparison.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

# Value shipped in .env.example; never a real endpoint.
PLACEHOLDER_WEBHOOK_URL = "https://hook.example.com/your-webhook-id"


class AnalysisConfig(BaseModel):
    """Configuration for the analysis service client.

    Attributes:
        webhook_url: Endpoint that receives the entrada/saída payload.
        timeout: Seconds to wait for the analysis report.
    """

    webhook_url: str = Field(
        default_factory=lambda: os.getenv("ANALYSIS_WEBHOOK_URL", ""),
        validate_default=True,
        description="Analysis service webhook URL",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("ANALYSIS_TIMEOUT", "120")),
        validate_default=True,
        gt=0.0,
        le=600.0,
        description="Request timeout in seconds",
    )

    @field_validator("webhook_url")
    @classmethod
    def validate_webhook_url(cls, v: str) -> str:
        """Validate that a real webhook URL is configured."""
        v = v.strip()
        if not v:
            raise ValueError("Webhook URL required. Set ANALYSIS_WEBHOOK_URL in .env")
        if v == PLACEHOLDER_WEBHOOK_URL:
            raise ValueError(
                "Webhook URL is still the example placeholder. "
                "Set ANALYSIS_WEBHOOK_URL in .env to the analysis service endpoint"
            )
        if not v.startswith(("http://", "https://")):
            raise ValueError("Webhook URL must start with http:// or https://")
        return v


def get_analysis_config() -> AnalysisConfig:
    """Create analysis configuration from environment.

    Returns:
        Configured AnalysisConfig instance.

    Raises:
        ValidationError: If the webhook URL is unset or a placeholder, or the
            timeout is out of range.
    """
    return AnalysisConfig()
