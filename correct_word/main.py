"""Main module for the FastAPI application."""
import json
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, status

from .config import settings
from .correction import Corrector
from .logger import logger
from .models import CorrectRequest, CorrectResponse


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Handle FastAPI startup and shutdown events."""
    logger.info(
        "Starting up correct-word API (default algorithm: {algorithm})...",
        algorithm=settings.DEFAULT_ALGORITHM.value,
    )
    yield
    logger.info("Shutting down correct-word API...")


app = FastAPI(
    title="correct-word - Word Correction Service",
    lifespan=lifespan
)


def build_corrector(req: CorrectRequest) -> Corrector:
    """Build the corrector for a request (request values override settings)."""
    algorithm = req.algorithm or settings.DEFAULT_ALGORITHM
    return Corrector(algorithm=algorithm, threshold=req.threshold)


@app.post("/correct", response_model=CorrectResponse)
async def correct(req: CorrectRequest):
    """
    POST /correct endpoint.

    Returns the best candidate (if it clears the threshold), its score, and
    optionally the ranked "did you mean" suggestions when `limit` is set.
    """
    try:
        pretty_request_body = json.dumps(req.model_dump(mode="json"), indent=2, ensure_ascii=False)
        logger.info("Received request:\n{request_body}", request_body=pretty_request_body)

        corrector = build_corrector(req)

        result = corrector.correct(req.input, req.candidates)
        suggestions = []
        if req.limit:
            suggestions = corrector.suggest(req.input, req.candidates, limit=req.limit)

        return CorrectResponse(
            word=result.word,
            confidence=result.confidence,
            algorithm=corrector.algorithm,
            threshold=corrector.threshold,
            suggestions=suggestions,
        )
    except Exception as e:
        logger.exception("Error processing correction request")
        raise HTTPException(status_code=500, detail={"error": str(e)}) from e


@app.get("/")
def root():
    """Root endpoint to check API status."""
    return {"status": "ok", "message": "correct-word API is running"}


@app.get("/health", status_code=status.HTTP_200_OK, tags=["Monitoring"])
async def health_check():
    """Health check endpoint (no external services to check)."""
    return {"status": "ok"}
