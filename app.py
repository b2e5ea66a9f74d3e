# app.py
"""
Trolling Spread Advisor API - FastAPI application for lure suggestions.

Scores a lure catalog against observed fishing conditions, builds a 1-5 line
trolling spread with towing distances and a speed envelope, and exposes the
attribute inference and note extraction helpers used to curate the catalog.

Run with: uvicorn app:app --reload --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import base64
import logging
import os
import secrets
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from trollint.errors import CatalogError, InvalidQueryError
from trollint.extract.notes import extract_notes
from trollint.features.contrast import CONTRAST_BY_COLOR, luminance
from trollint.features.inference import infer_all
from trollint.log import configure_logging
from trollint.models.catalog import (
    BoatProfile,
    Light,
    Moon,
    SeaState,
    Species,
    Tide,
    TimeOfDay,
    Turbidity,
    Zone,
)
from trollint.models.lure import Lure, load_catalog, lure_from_dict
from trollint.models.query import FishingConditionsQuery
from trollint.spread.assign import rank_and_assign
from trollint.spread.speed import compute_speed_envelope

# Load environment variables
load_dotenv()

# =============================================================================
# CONFIGURATION
# =============================================================================

API_VERSION = "1.0.0"

CATALOG_PATH = os.getenv("TROLLINT_CATALOG_PATH", "").strip()
LOG_LEVEL = os.getenv("TROLLINT_LOG_LEVEL", "INFO")

AUTH_USERS_STR = os.getenv("TROLLINT_AUTH_USERS", "")
AUTH_PASSWORD = os.getenv("TROLLINT_AUTH_PASSWORD", "")

AUTHORIZED_USERS: Dict[str, str] = {}
if AUTH_USERS_STR and AUTH_PASSWORD:
    for username in AUTH_USERS_STR.split(","):
        username = username.strip()
        if username:
            AUTHORIZED_USERS[username] = AUTH_PASSWORD

AUTH_ENABLED = bool(AUTHORIZED_USERS)

configure_logging(LOG_LEVEL)
logger = logging.getLogger("trollint.api")

_server_catalog: Optional[List[Lure]] = None


def get_server_catalog() -> Optional[List[Lure]]:
    """Catalog from TROLLINT_CATALOG_PATH, loaded once. None when not configured."""
    global _server_catalog
    if _server_catalog is None and CATALOG_PATH:
        _server_catalog = load_catalog(CATALOG_PATH)
    return _server_catalog


# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class QueryIn(BaseModel):
    """Observed fishing conditions. Numeric ranges are checked by the engine."""
    zone: Zone
    bottom_depth: float = Field(..., description="Bottom depth in metres")
    boat_speed: float = Field(..., description="Boat speed in knots")
    time_of_day: TimeOfDay
    light: Light
    turbidity: Turbidity
    sea_state: SeaState
    tide: Tide
    moon: Moon
    priority_species: Optional[Species] = None
    lines: int = Field(3, description="Requested number of lines (1-5)")
    boat_profile: BoatProfile = BoatProfile.CLASSIC

    def to_query(self) -> FishingConditionsQuery:
        return FishingConditionsQuery(**self.model_dump())


class SuggestRequest(BaseModel):
    query: QueryIn
    catalog: Optional[List[Dict[str, Any]]] = Field(
        None,
        description="Lure records (snake_case or legacy export keys). Falls back to the server catalog.",
    )


class SpeedRequest(BaseModel):
    priority_species: Optional[Species] = None
    boat_profile: BoatProfile = BoatProfile.CLASSIC
    zone: Zone
    sea_state: SeaState
    turbidity: Turbidity
    time_of_day: TimeOfDay


class NotesRequest(BaseModel):
    text: str = ""


class SpeedOut(BaseModel):
    min: float
    max: float
    recommended: float
    basis: str
    notes: List[str]


class CandidateOut(BaseModel):
    """One scored lure."""
    lure: Dict[str, Any]
    technique: float = Field(..., ge=0.0, le=40.0)
    color: float = Field(..., ge=0.0, le=30.0)
    conditions: float = Field(..., ge=0.0, le=30.0)
    total: float = Field(..., ge=0.0, le=100.0)
    contrast: str
    position: Optional[str] = None
    distance_m: Optional[float] = None
    justifications: Dict[str, str]
    winning_axis: str
    catch_probability: float = Field(..., ge=0.0, le=100.0)
    details: Dict[str, Any]
    rank: int = Field(..., description="Rank by total score (1 = best)")


class SpreadOut(BaseModel):
    slots: List[CandidateOut]
    requested_lines: int
    filled_lines: int
    mean_distance_m: float
    speed: SpeedOut
    status: str
    status_message: str
    warnings: List[str]
    analysis: List[str]


class SuggestResponse(BaseModel):
    spread: SpreadOut
    candidates: List[CandidateOut]
    total_candidates: int
    catalog_size: int
    catalog_source: str
    processing_info: Dict[str, Any]


# =============================================================================
# FASTAPI APP
# =============================================================================

app = FastAPI(
    title="Trolling Spread Advisor API",
    description="""
    Deterministic lure suggestions for trolling.

    * **Scoring**: technique (0-40), colour (0-30) and conditions (0-30) per lure
    * **Spread**: 1-5 named slots with towing distances
    * **Speed**: recommended trolling speed with contextual adjustments
    * **Catalog helpers**: attribute inference and free-text note extraction
    """,
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def parse_catalog(records: List[Dict[str, Any]]) -> List[Lure]:
    """Convert raw lure records, reporting the index of a bad record."""
    lures = []
    for i, rec in enumerate(records):
        try:
            lures.append(lure_from_dict(rec))
        except CatalogError as e:
            raise CatalogError(f"catalog[{i}]: {e}") from e
    return lures


def to_candidate(data: Dict[str, Any], rank: int) -> CandidateOut:
    return CandidateOut(rank=rank, **data)


# =============================================================================
# API ENDPOINTS
# =============================================================================

@app.middleware("http")
async def auth_middleware(request, call_next):
    """
    Enforce Basic Auth on all requests when credentials are configured.
    Skips OPTIONS requests (CORS preflight).
    """
    if not AUTH_ENABLED or request.method == "OPTIONS":
        return await call_next(request)

    auth_header = request.headers.get("Authorization")
    challenge = {"WWW-Authenticate": 'Basic realm="Trolling Spread Advisor"'}

    if not auth_header or not auth_header.startswith("Basic "):
        return JSONResponse(status_code=401, headers=challenge, content={"detail": "Authentication required"})

    try:
        decoded = base64.b64decode(auth_header.split(" ", 1)[1]).decode("utf-8")
        username, password = decoded.split(":", 1)
    except (ValueError, UnicodeDecodeError):
        return JSONResponse(status_code=401, headers=challenge, content={"detail": "Invalid authentication format"})

    stored_password = AUTHORIZED_USERS.get(username)
    if stored_password is None or not secrets.compare_digest(password, stored_password):
        return JSONResponse(status_code=401, headers=challenge, content={"detail": "Invalid credentials"})

    request.state.username = username
    return await call_next(request)


@app.get("/")
async def root(request: Request):
    """Root endpoint with API info."""
    return {
        "name": "Trolling Spread Advisor API",
        "version": API_VERSION,
        "authenticated_user": getattr(request.state, "username", "anonymous"),
        "auth_enabled": AUTH_ENABLED,
        "features": ["scoring", "spread", "speed", "inference", "notes"],
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    catalog_info: Dict[str, Any] = {"configured": bool(CATALOG_PATH), "size": None}
    if CATALOG_PATH:
        try:
            catalog_info["size"] = len(get_server_catalog() or [])
        except (OSError, ValueError) as e:
            catalog_info["error"] = str(e)

    return {
        "status": "ok",
        "version": API_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "auth_enabled": AUTH_ENABLED,
        "catalog": catalog_info,
    }


@app.get("/palette")
async def palette():
    """Colour to contrast-class table."""
    colors = {
        color.value: {"contrast": cls.value, "luminance": luminance(color)}
        for color, cls in CONTRAST_BY_COLOR.items()
    }
    return {"colors": colors, "total": len(colors)}


@app.post("/suggest", response_model=SuggestResponse)
async def suggest(body: SuggestRequest):
    """Rank the catalog and build a spread for the given conditions."""
    import time

    start_time = time.time()

    try:
        if body.catalog is not None:
            catalog = parse_catalog(body.catalog)
            source = "request"
        else:
            try:
                catalog = get_server_catalog()
            except OSError as e:
                logger.error("Cannot read server catalog %s: %s", CATALOG_PATH, e)
                raise HTTPException(status_code=503, detail=f"Server catalog unavailable: {e.strerror or e}")
            source = "server"
            if catalog is None:
                raise HTTPException(status_code=404, detail="No catalog in request and no server catalog configured")

        spread = rank_and_assign(catalog, body.query.to_query())
    except InvalidQueryError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except CatalogError as e:
        logger.warning("Rejected catalog: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    ranked = spread.candidates
    spread_data = spread.to_dict()
    rank_by_id = {id(c.lure): i for i, c in enumerate(ranked, 1)}
    slots = [to_candidate(d, rank_by_id.get(id(c.lure), 0)) for d, c in zip(spread_data.pop("slots"), spread.slots)]

    return SuggestResponse(
        spread=SpreadOut(slots=slots, **spread_data),
        candidates=[to_candidate(c.to_dict(), i) for i, c in enumerate(ranked, 1)],
        total_candidates=len(ranked),
        catalog_size=len(catalog),
        catalog_source=source,
        processing_info={
            "processing_time_ms": round((time.time() - start_time) * 1000, 2),
        },
    )


@app.post("/lures/infer")
async def infer_lure(record: Dict[str, Any]):
    """Inferred zones, species, speed range, positions and conditions for one lure."""
    try:
        lure = lure_from_dict(record)
    except CatalogError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "lure": lure.to_dict(),
        "inferred": infer_all(lure).to_dict(),
        "note_hints": extract_notes(lure.notes).to_dict(),
    }


@app.post("/notes/extract")
async def notes_extract(body: NotesRequest):
    """Zones, species, spread positions and finish mentioned in a free-text note."""
    return extract_notes(body.text).to_dict()


@app.post("/speed", response_model=SpeedOut)
async def speed(body: SpeedRequest):
    """Speed envelope for a target species (or boat profile) and the current conditions."""
    env = compute_speed_envelope(
        body.priority_species,
        body.boat_profile,
        body.zone,
        body.sea_state,
        body.turbidity,
        body.time_of_day,
    )
    return SpeedOut(**env.to_dict())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
