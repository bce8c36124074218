from enum import Enum

from pydantic import BaseModel, Field


class ReportLabel(str, Enum):
    """Names of the two reports, as used in payloads and error messages."""

    ENTRADA = "entrada"
    SAIDA = "saida"


class AnalysisRequest(BaseModel):
    """Payload posted to the analysis service.

    Attributes:
        entrada: Clean text of the move-in (entrada) report.
        saida: Clean text of the move-out (saída) report.
    """

    entrada: str
    saida: str


class ReportTexts(BaseModel):
    """Clean texts of both reports, ready for analysis."""

    entrada: str
    saida: str

    def to_request(self) -> AnalysisRequest:
        """Build the analysis service payload."""
        return AnalysisRequest(entrada=self.entrada, saida=self.saida)


class ExtractionResponse(BaseModel):
    """Response of the extraction preview endpoint.

    Attributes:
        entrada: Clean text of the entrada report.
        saida: Clean text of the saída report.
    """

    entrada: str
    saida: str


class AnalysisResponse(BaseModel):
    """Response of the comparison endpoint.

    Attributes:
        report: Markdown report returned by the analysis service.
        entrada_chars: Length of the entrada text that was analyzed.
        saida_chars: Length of the saída text that was analyzed.
    """

    report: str
    entrada_chars: int = Field(ge=0)
    saida_chars: int = Field(ge=0)
