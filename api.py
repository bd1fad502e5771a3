"""
FastAPI application for the SoulPrint engine.
Scores questionnaire answers and matches travellers to destinations.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

import config
from ai.quality_check import check_assessment_quality
from explanation.explanation_llm import ExplanationEngine
from ingestion.read_destination_data import load_destination_catalog
from inference.answer_converter import compute_traits
from link.service import compute_and_store_soulprint, regenerate_matches, run_assessment
from link.supabase_client import PersistenceError, RespondentNotFound, SupabaseClient
from matching.compare import compare_matches
from models.destination_profile import DestinationProfile
from questionnaires.answers import AnswerError
from questionnaires.questions import SECTION_TITLES
from questionnaires.session import QuestionnaireSession

config.configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="SoulPrint Engine API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# REQUEST MODELS
# ============================================================================

class AnswersSubmission(BaseModel):
    """Raw questionnaire answers from the frontend"""
    answers: Dict[str, Any]


class MatchRequest(AnswersSubmission):
    destinations: Optional[List[Dict[str, Any]]] = None
    limit: Optional[int] = Field(default=None, ge=0)
    geographic_constraint: str = "anywhere"
    geographic_value: str = ""
    enhance_explanations: bool = False


class CompareRequest(MatchRequest):
    destination_ids: List[str]


class RespondentSoulPrintRequest(BaseModel):
    narrate: bool = False


class RespondentMatchRequest(BaseModel):
    limit: int = Field(default=config.MATCH_LIMIT, ge=1)


class SectionValidationRequest(BaseModel):
    section: int
    answers: Dict[str, Any]


# ============================================================================
# DEPENDENCIES
# ============================================================================

_store: Optional[SupabaseClient] = None


def get_store() -> SupabaseClient:
    global _store
    if _store is None:
        _store = SupabaseClient()
    return _store


def _catalog(rows: Optional[List[Dict[str, Any]]]) -> List[DestinationProfile]:
    if rows is None:
        return load_destination_catalog()
    try:
        return [DestinationProfile.from_row(row) for row in rows]
    except (KeyError, TypeError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid destination entry: {e}")


def _ranked(request: MatchRequest, limit: Optional[int]):
    return run_assessment(
        request.answers,
        _catalog(request.destinations),
        request.geographic_constraint,
        request.geographic_value,
        limit=limit,
    )


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/")
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "soulprint-engine",
        "timestamp": datetime.now().isoformat()
    }


# ============================================================================
# STATELESS SCORING
# ============================================================================

@app.post("/soulprint/compute")
async def compute_soulprint(submission: AnswersSubmission):
    """Score answers into a SoulPrint profile. Nothing is stored."""
    profile = compute_traits(submission.answers)
    return {
        "profile": profile.to_dict(),
        "record": profile.to_record(),
        "quality": check_assessment_quality(submission.answers),
    }


@app.post("/destinations/match")
async def match(request: MatchRequest):
    """Rank destinations for the answers (bundled catalog if none supplied)."""
    profile, matches = _ranked(request, request.limit)
    payload = [m.to_dict() for m in matches]

    if request.enhance_explanations:
        engine = ExplanationEngine()
        for item, result in zip(payload, matches):
            item["explanation"] = engine.explain_match(profile.labels, result)

    return {
        "labels": profile.labels,
        "matches": payload,
    }


@app.post("/destinations/compare")
async def compare(request: CompareRequest):
    """Side-by-side comparison of the selected destinations."""
    _profile, matches = _ranked(request, limit=None)

    by_id = {m.destination_id: m for m in matches}
    unknown = [d for d in request.destination_ids if d not in by_id]
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown destinations: {', '.join(unknown)}")

    selected = [by_id[d] for d in dict.fromkeys(request.destination_ids)]
    try:
        return compare_matches(selected)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ============================================================================
# RESPONDENT ENDPOINTS (persisted)
# ============================================================================

@app.post("/respondents/{respondent_id}/soulprint")
async def recompute_soulprint(
        respondent_id: str,
        request: Optional[RespondentSoulPrintRequest] = None,
        store: SupabaseClient = Depends(get_store),
):
    """Recompute and store a respondent's SoulPrint from their saved answers"""
    narrate = request.narrate if request else False
    try:
        return await compute_and_store_soulprint(store, respondent_id, narrate=narrate)
    except RespondentNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        logger.error("[API] SoulPrint persistence failed for %s: %s", respondent_id, e)
        raise HTTPException(status_code=502, detail=str(e))


@app.post("/respondents/{respondent_id}/matches")
async def recompute_matches(
        respondent_id: str,
        request: Optional[RespondentMatchRequest] = None,
        store: SupabaseClient = Depends(get_store),
):
    """Regenerate and store a respondent's top destination matches"""
    limit = request.limit if request else config.MATCH_LIMIT
    try:
        matches = await regenerate_matches(store, respondent_id, limit=limit)
    except RespondentNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        logger.error("[API] Match persistence failed for %s: %s", respondent_id, e)
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "respondent_id": respondent_id,
        "matches": [m.to_dict() for m in matches],
    }


# ============================================================================
# QUESTIONNAIRE
# ============================================================================

@app.post("/questionnaire/validate-section")
async def validate_section(request: SectionValidationRequest):
    """Check one wizard section: invalid answers and missing required questions."""
    if not 0 <= request.section < len(SECTION_TITLES):
        raise HTTPException(status_code=400, detail=f"Unknown section: {request.section}")

    session = QuestionnaireSession()
    errors = {}
    for qid, value in request.answers.items():
        try:
            session.answer(qid, value)
        except AnswerError as e:
            errors[qid] = str(e)

    missing = session.missing_in_section(request.section)
    return {
        "section": request.section,
        "title": SECTION_TITLES[request.section],
        "complete": not missing and not errors,
        "missing": missing,
        "errors": errors,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
