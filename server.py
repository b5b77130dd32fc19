"""
Symptom Checker FastAPI Server

REST API for the symptom checker, enabling web UI integration.

Usage:
    pip install -e ".[server]"
    uvicorn server:app --reload --port 8000

Endpoints:
    GET  /api/v1/health    - Health check
    GET  /api/v1/symptoms  - Known symptom names (autocomplete)
    POST /api/v1/analyze   - Analyze symptoms and rank conditions
    POST /api/v1/suggest   - Closest vocabulary matches for one symptom
    POST /api/v1/chart     - Sunburst chart data for an analysis
    POST /api/v1/export    - Ontology codes CSV for the top condition

Configuration is read from the environment (SYMPTOM_CHECKER_DATA,
SYMPTOM_CHECKER_LINKS, SYMPTOM_CHECKER_THRESHOLD, SYMPTOM_CHECKER_TIMEOUT)
or from a YAML file named by SYMPTOM_CHECKER_CONFIG.

Author: Cleansheet LLC
License: CC BY 4.0
"""

import logging
import os
from typing import Optional
from urllib.parse import quote

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from symptom_checker import SymptomChecker, __version__
from symptom_checker.dataset.prevalence import DataLoadError
from symptom_checker.pipeline.config import CheckerConfig, load_config
from symptom_checker.presentation.export import ontology_csv, ontology_rows
from symptom_checker.presentation.sunburst import build_sunburst
from symptom_checker.scoring.scoring_types import AnalysisResult

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("symptom_checker.server")

# =============================================================================
# App Configuration
# =============================================================================

app = FastAPI(
    title="Symptom Checker API",
    description="Fuzzy symptom matching and condition prioritization",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:8000",
        "http://localhost:8080",
        "http://127.0.0.1:8000",
        "http://127.0.0.1:8080",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# Checker Initialization
# =============================================================================

_checker: SymptomChecker | None = None
_load_error: str | None = None


def get_checker() -> SymptomChecker:
    """Get or create the shared checker, raising 503 if the dataset failed to load."""
    global _checker, _load_error

    if _checker is None and _load_error is None:
        config_path = os.getenv("SYMPTOM_CHECKER_CONFIG")
        config = load_config(config_path) if config_path else CheckerConfig.from_env()
        checker = SymptomChecker(config)
        try:
            checker.load()
        except DataLoadError as e:
            _load_error = str(e)
            logger.error("Failed to load data: %s", e)
        else:
            _checker = checker
            logger.info(
                "Checker ready: %d symptoms, %d conditions",
                checker.table.n_symptoms,
                checker.table.n_conditions,
            )

    if _checker is None:
        raise HTTPException(
            status_code=503,
            detail=f"Failed to load data file: {_load_error}",
        )
    return _checker


# =============================================================================
# Request/Response Models
# =============================================================================

class AnalyzeRequest(BaseModel):
    """Request body for symptom analysis."""
    symptoms: list[str]


class SuggestRequest(BaseModel):
    """Request body for suggestions."""
    symptom: str
    threshold: Optional[float] = None
    limit: int = 3


class MatchModel(BaseModel):
    """A suggested vocabulary match."""
    full: str
    simple: str
    similarity: float


class ConditionModel(BaseModel):
    """A ranked condition."""
    condition: str
    score: int
    matched_symptoms: list[str] = []
    url: Optional[str] = None


class AnalysisResponse(BaseModel):
    """Response from the analyze endpoint."""
    valid_symptoms: list[str] = []
    invalid_symptoms: list[str] = []
    suggested_matches: dict[str, list[MatchModel]] = {}
    prioritized_conditions: list[ConditionModel] = []
    matched_symptoms: dict[str, list[str]] = {}
    top_condition: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    pipeline_ready: bool
    error: Optional[str] = None


def _to_response(result: AnalysisResult, checker: SymptomChecker) -> AnalysisResponse:
    data = result.to_dict()
    data["prioritized_conditions"] = [
        ConditionModel(
            condition=entry.condition,
            score=entry.score,
            matched_symptoms=result.matched_symptoms.get(entry.condition, []),
            url=checker.condition_url(entry.condition),
        )
        for entry in result.prioritized_conditions
    ]
    return AnalysisResponse(**data)


def _run_analysis(request: AnalyzeRequest) -> tuple[AnalysisResult, SymptomChecker]:
    checker = get_checker()
    symptoms = [s.strip() for s in request.symptoms if s.strip()]
    if not symptoms:
        raise HTTPException(status_code=400, detail="At least one symptom is required")
    # Exact duplicates collapse, as in the interactive session
    return checker.analyze(dict.fromkeys(symptoms)), checker


# =============================================================================
# Endpoints
# =============================================================================

@app.get("/api/v1/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    try:
        get_checker()
        ready = True
    except HTTPException:
        ready = False

    return HealthResponse(
        status="ok",
        version=__version__,
        pipeline_ready=ready,
        error=_load_error,
    )


@app.get("/api/v1/symptoms")
async def list_symptoms(common: bool = False):
    """Known symptom names for autocomplete, or the quick-add list."""
    checker = get_checker()
    names = checker.common_symptoms if common else checker.symptom_names()
    return {"symptoms": names}


@app.post("/api/v1/analyze", response_model=AnalysisResponse)
async def analyze_symptoms(request: AnalyzeRequest):
    """
    Validate symptoms and rank matching conditions.

    Unrecognized symptoms are reported with up to three suggestions each
    instead of failing the request.
    """
    result, checker = _run_analysis(request)
    return _to_response(result, checker)


@app.post("/api/v1/suggest")
async def suggest_symptoms(request: SuggestRequest):
    """Closest vocabulary matches for one symptom."""
    checker = get_checker()
    if request.threshold is not None and not 0.0 <= request.threshold <= 1.0:
        raise HTTPException(status_code=400, detail="threshold must be between 0 and 1")
    if request.limit < 0:
        raise HTTPException(status_code=400, detail="limit must be non-negative")

    matches = checker.suggest(request.symptom, threshold=request.threshold, limit=request.limit)
    return {"symptom": request.symptom, "matches": [m.to_dict() for m in matches]}


@app.post("/api/v1/chart")
async def sunburst_chart(request: AnalyzeRequest):
    """Sunburst chart trace for an analysis."""
    result, _ = _run_analysis(request)
    return build_sunburst(result)


@app.post("/api/v1/export", response_class=PlainTextResponse)
async def export_ontology_codes(request: AnalyzeRequest):
    """CSV of symptom/ontology code pairs for the top condition."""
    result, checker = _run_analysis(request)
    if not result.top_condition:
        raise HTTPException(status_code=404, detail="No conditions match the provided symptoms")

    rows = ontology_rows(result, checker.index)
    filename = f"{result.top_condition}_ontology_codes.csv".replace(" ", "_")
    return PlainTextResponse(
        ontology_csv(rows),
        media_type="text/csv",
        headers={"Content-Disposition": content_disposition(filename)},
    )


def content_disposition(filename: str) -> str:
    """
    Attachment header value safe for non-latin-1 filenames.

    Carries an ASCII fallback in filename= and the exact UTF-8 name in
    filename* (RFC 6266).
    """
    fallback = "".join(
        c if c.isascii() and c.isprintable() and c not in '"\\' else "_" for c in filename
    )
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


# =============================================================================
# Main
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "8000"))
    logger.info("Starting Symptom Checker API server on port %d", port)
    logger.info("Docs available at: http://localhost:%d/docs", port)

    uvicorn.run(app, host="0.0.0.0", port=port)
