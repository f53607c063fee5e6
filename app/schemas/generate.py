from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TovConfigIn(BaseModel):
    # Unbounded on input; values are clamped to [0, 1] when normalized.
    formality: float | None = Field(None, description="0=casual, 1=formal")
    warmth: float | None = Field(None, description="0=business-focused, 1=warm")
    directness: float | None = Field(None, description="0=subtle, 1=direct")


class GenerateSequenceRequest(BaseModel):
    # Presence of prospect_url / company_context is checked by the route so it can
    # answer with the API's own error envelope.
    prospect_url: str | None = None
    tov_config: TovConfigIn | None = None
    company_context: str | None = None
    sequence_length: int | None = Field(None, ge=0)


class ConfidenceScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: float = Field(..., ge=0, le=1)
    personalization: float = Field(..., ge=0, le=1)
    tone: float = Field(..., ge=0, le=1)


class ProspectAnalysisOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    role: str
    company: str
    insights: list[str] = Field(default_factory=list)


class GenerationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    messages: list[str]
    thinking_process: str
    confidence_scores: ConfidenceScores
    prospect_analysis: ProspectAnalysisOutput
    using_mock: bool
    ai_provider: str


class GenerateSequenceResponse(BaseModel):
    success: bool = True
    data: GenerationResult


class StatusData(BaseModel):
    configured: bool
    status: str


class StatusResponse(BaseModel):
    success: bool = True
    data: StatusData


class ErrorResponse(BaseModel):
    success: bool = False
    error: Any
