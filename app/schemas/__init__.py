from .generate import (
    GenerateSequenceRequest,
    GenerateSequenceResponse,
    GenerationResult,
    TovConfigIn,
    ConfidenceScores,
    ProspectAnalysisOutput,
    StatusData,
    StatusResponse,
    ErrorResponse,
)

__all__ = [
    "GenerateSequenceRequest",
    "GenerateSequenceResponse",
    "GenerationResult",
    "TovConfigIn",
    "ConfidenceScores",
    "ProspectAnalysisOutput",
    "StatusData",
    "StatusResponse",
    "ErrorResponse",
]
