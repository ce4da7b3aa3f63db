from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from .catalog.sanitize import sanitize_wines
from .catalog.store import UnknownWineError, apply_operations, get_wines
from .matching.models import MatchRequest, MatchResponse
from .matching.scorer import find_matches
from .menu.models import (
    ApplyOperationsRequest,
    ApplyOperationsResponse,
    MenuDiffRequest,
    MenuDiffResponse,
)
from .menu.operations import build_operations
from .menu.reconcile import reconcile_menus
from .quiz.classifier import InvalidInput, build_quiz_result, classify_answers
from .quiz.config import DEFAULT_QUIZ_CONFIG
from .quiz.models import QuizResult, QuizSubmitRequest

logger = logging.getLogger(__name__)

app = FastAPI(title="Wine Match API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/quiz")
def quiz_questions() -> dict:
    return {"questions": [q.model_dump() for q in DEFAULT_QUIZ_CONFIG.questions]}


@app.post("/quiz/submit", response_model=QuizResult)
def quiz_submit(body: QuizSubmitRequest) -> QuizResult:
    try:
        profile = classify_answers(body.answers)
    except InvalidInput as exc:
        logger.warning("Rejected quiz submission: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))

    logger.info("Quiz resolved to profile %s", profile.id)
    return build_quiz_result(profile)


# ── Diner endpoints ──────────────────────────────────────────────────────


@app.get("/restaurants/{restaurant_id}/wines")
def restaurant_wines(restaurant_id: str) -> dict:
    wines = get_wines(restaurant_id)
    return {
        "restaurantId": restaurant_id,
        "wines": [w.model_dump(mode="json", by_alias=True) for w in wines],
        "count": len(wines),
    }


@app.post("/pairings/find", response_model=MatchResponse)
def find_pairings(body: MatchRequest) -> MatchResponse:
    catalog = get_wines(body.restaurant_id)
    return find_matches(body.restaurant_id, body.user_preferences, catalog)


# ── Menu upload endpoints ────────────────────────────────────────────────


@app.post("/restaurants/{restaurant_id}/menu/diff", response_model=MenuDiffResponse)
def menu_diff(restaurant_id: str, body: MenuDiffRequest) -> MenuDiffResponse:
    try:
        incoming = sanitize_wines(body.wines)
    except ValidationError as exc:
        logger.warning("Rejected menu upload for %s: %s", restaurant_id, exc)
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        )

    diff = reconcile_menus(get_wines(restaurant_id), incoming)
    return MenuDiffResponse(
        restaurant_id=restaurant_id,
        diff=diff,
        summary=diff.summary(),
        operations=build_operations(diff),
    )


@app.post("/restaurants/{restaurant_id}/menu/apply", response_model=ApplyOperationsResponse)
def menu_apply(restaurant_id: str, body: ApplyOperationsRequest) -> ApplyOperationsResponse:
    try:
        applied = apply_operations(restaurant_id, body.operations)
    except UnknownWineError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown wine id {exc.args[0]}")

    return ApplyOperationsResponse(applied=applied, count=len(get_wines(restaurant_id)))
