import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.routes import router
from app.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Log startup info
    print("=" * 60)
    print("Application starting up...")
    if settings.gemini_configured:
        print("✓ GEMINI_API_KEY found, Gemini will be used first")
    if settings.openai_configured:
        print(f"✓ OPENAI_API_KEY found, model {settings.openai_model}")
    if not settings.provider_configured:
        print("⚠ No AI provider key configured, sequences will use the offline fallback message")
    print("=" * 60)
    yield


app = FastAPI(
    title="Valley – LinkedIn Sequence API",
    description="Generate personalized LinkedIn messaging sequences from prospect URLs and company context.",
    version="0.2.0",
    lifespan=lifespan,
)
app.include_router(router)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"success": False, "error": "Invalid request body"})


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/")
async def root():
    return {"message": "Valley – LinkedIn Sequence API", "endpoints": {"ai": "/api/ai"}}
