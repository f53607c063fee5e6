import logging
from functools import lru_cache

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.config import settings
from app.schemas.generate import (
    ErrorResponse,
    GenerateSequenceRequest,
    GenerateSequenceResponse,
    StatusData,
    StatusResponse,
)
from app.services.generate import GenerateSequenceService

logger = logging.getLogger(__name__)

DEFAULT_SEQUENCE_LENGTH = 3
MISSING_FIELDS_ERROR = "prospect_url and company_context required"

router = APIRouter(prefix="/api/ai", tags=["ai"])


@lru_cache
def get_generate_service() -> GenerateSequenceService:
    return GenerateSequenceService(settings)


def _error(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=error).model_dump())


@router.get("/status", response_model=StatusResponse)
async def status(service: GenerateSequenceService = Depends(get_generate_service)) -> StatusResponse:
    """Report whether an AI provider key is configured."""
    configured = service.status()
    return StatusResponse(
        data=StatusData(configured=configured, status="ready" if configured else "not_configured"),
    )


@router.post(
    "/generate-sequence",
    response_model=GenerateSequenceResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_sequence(
    body: GenerateSequenceRequest,
    service: GenerateSequenceService = Depends(get_generate_service),
):
    """Generate a personalized messaging sequence for a LinkedIn prospect."""
    if not body.prospect_url or not body.company_context:
        return _error(400, MISSING_FIELDS_ERROR)
    try:
        result = await service.run(
            body.prospect_url,
            body.tov_config,
            body.company_context,
            body.sequence_length or DEFAULT_SEQUENCE_LENGTH,
        )
    except Exception:
        logger.exception("Sequence generation failed for %s", body.prospect_url)
        return _error(500, "Internal error")
    return GenerateSequenceResponse(data=result)
