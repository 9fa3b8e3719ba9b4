"""
MAIN API - FastAPI wrapper around the message analyzer

ENDPOINTS:
POST /api/analyze  {"message": "..."} → AnalysisResult
GET  /health

ERRORS:
400 {"error": "Invalid message format"}  missing / non-text / empty message
500 {"error": "Analysis failed"}         unexpected fault, details only in logs
"""

import os
import logging
from dotenv import load_dotenv
from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .models import AnalyzeRequest, AnalysisResult, ErrorResponse
from .auth import get_api_key
from .analyzer import message_analyzer

load_dotenv()


def _resolve_log_level() -> int:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    # Unknown names fall back to INFO
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(level=_resolve_log_level())
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

app = FastAPI(title="Business Message Analyzer API", version=VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request to {request.url.path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(status_code=400, content={"error": "Invalid message format"})


@app.post(
    "/api/analyze",
    response_model=AnalysisResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_handler(request: AnalyzeRequest, api_key: str = Depends(get_api_key)):
    """
    Classify one message.

    PIPELINE:
    1. Fraud indicator scan
    2. Risk level thresholds
    3. Lead detection and quality score
    4. Intent cascade
    5. Decision table
    """
    try:
        analysis = message_analyzer.analyze(request.message)
    except Exception:
        logger.exception("Analysis error")
        return JSONResponse(status_code=500, content={"error": "Analysis failed"})

    logger.info(
        f"Analyzed message: length={len(request.message)}, "
        f"risk={analysis.risk_level.value}, score={analysis.risk_score}, "
        f"lead={analysis.is_lead}, intent={analysis.intent.value}"
    )
    return analysis.to_result()


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": VERSION}
