from __future__ import annotations

import logging
import os
import random

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, StreamingResponse
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from .assistant.chat import AssistantRequest, open_stream, sse_events
from .auth.dependencies import require_user
from .auth.models import (
    ForgotPasswordRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
)
from .auth.users import (
    authenticate,
    create_user,
    get_user_by_email,
    issue_reset_token,
    public_user,
    reset_password,
)
from .db.models import utcnow
from .db.repo import get_session, init_db
from .llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from .planning.models import BudgetIn, ChecklistsIn, QuestionnaireIn, TimelineIn
from .planning.store import (
    dashboard_summary,
    get_budget,
    get_checklists,
    get_questionnaire,
    get_timeline,
    list_templates,
    save_budget,
    save_checklists,
    save_questionnaire,
    save_timeline,
)
from .recommendations.ai import generate_recommendations
from .recommendations.engine import build_moodboard, category_recommendations
from .recommendations.models import (
    PlanResponse,
    RecommendationsResponse,
    UserPreferencesOut,
)
from .recommendations.preferences import guest_count_lower_bound, preferences_from_details
from .vendors.cache import SearchCache
from .vendors.catalog import category_list
from .vendors.models import SearchMetadata, VendorSearchRequest, VendorSearchResponse
from .vendors.ranking import LLMRanker
from .vendors.search import VendorSearchService

logger = logging.getLogger(__name__)

init_db()

app = FastAPI(title="Wedding Planner API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "wedding-planner-secret-change-in-production"),
)

app.state.search_cache = SearchCache()
app.state.vendor_search = VendorSearchService(
    app.state.search_cache,
    ranker=LLMRanker(DEFAULT_LLM_CONFIG),
    rng=random.Random(),
)

NEEDS_QUESTIONNAIRE = {
    "success": False,
    "error": "Please complete your wedding questionnaire first",
    "needs_questionnaire": True,
}
RESET_REQUESTED_MESSAGE = (
    "If an account with that email exists, we have sent a password reset link."
)


def get_vendor_search(request: Request) -> VendorSearchService:
    return request.app.state.vendor_search


def get_llm_config() -> LLMConfig:
    return DEFAULT_LLM_CONFIG


def _is_development() -> bool:
    return os.environ.get("APP_ENV", "production").lower() == "development"


# ── Error rendering ──────────────────────────────────────────────────────


def _field_name(loc: tuple) -> str:
    # First element is the source ("body", "query"); the rest is the field path.
    return ".".join(str(part) for part in loc[1:]) or str(loc[0])


def validation_message(errors: list[dict]) -> str:
    missing = [_field_name(err["loc"]) for err in errors if err["type"] == "missing"]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    first = errors[0]
    return f"Invalid value for {_field_name(first['loc'])}: {first['msg']}"


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"error": validation_message(exc.errors())}, status_code=400)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/signup", status_code=201)
def signup(body: SignupRequest, session: Session = Depends(get_session)) -> dict:
    if not body.email:
        raise HTTPException(status_code=400, detail="Email is required")
    if not body.password:
        raise HTTPException(status_code=400, detail="Password is required")
    if not body.partner_one_name:
        raise HTTPException(status_code=400, detail="Partner one name is required")
    if not body.partner_two_name:
        raise HTTPException(status_code=400, detail="Partner two name is required")
    if get_user_by_email(session, body.email):
        raise HTTPException(status_code=400, detail="User already exists with this email")

    user = create_user(
        session, body.email, body.password, body.partner_one_name, body.partner_two_name
    )
    logger.info("Created account %s", user.id)
    return {"message": "User created successfully", "user": public_user(user)}


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request, session: Session = Depends(get_session)) -> dict:
    user = authenticate(session, body.email, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


@app.post("/auth/forgot-password")
def forgot_password(body: ForgotPasswordRequest, session: Session = Depends(get_session)) -> dict:
    if not body.email:
        raise HTTPException(status_code=400, detail="Email is required")

    user = get_user_by_email(session, body.email)
    if user is None:
        return {"message": RESET_REQUESTED_MESSAGE}

    token = issue_reset_token(session, user)
    reset_url = f"{os.environ.get('APP_URL', 'http://localhost:8000')}/auth/reset-password?token={token}"
    logger.info("Password reset requested for account %s", user.id)

    response = {"message": RESET_REQUESTED_MESSAGE}
    if _is_development():
        response.update(reset_token=token, reset_url=reset_url)
    return response


@app.post("/auth/reset-password")
def reset_password_route(body: ResetPasswordRequest, session: Session = Depends(get_session)) -> dict:
    if not body.password:
        raise HTTPException(status_code=400, detail="Password is required")
    if not reset_password(session, body.token, body.password):
        raise HTTPException(status_code=400, detail="Invalid or expired reset token")
    return {"message": "Password has been reset successfully"}


# ── Planning endpoints ───────────────────────────────────────────────────


@app.post("/questionnaire")
def questionnaire_save(
    body: QuestionnaireIn,
    user: dict = Depends(require_user),
    session: Session = Depends(get_session),
) -> dict:
    details = save_questionnaire(session, user["id"], body)
    return {"message": "Wedding details saved successfully", "wedding_details": details.model_dump()}


@app.get("/questionnaire")
def questionnaire_get(
    user: dict = Depends(require_user), session: Session = Depends(get_session)
) -> dict:
    details = get_questionnaire(session, user["id"])
    return {"wedding_details": details.model_dump() if details else None}


@app.post("/budget")
def budget_save(
    body: BudgetIn,
    user: dict = Depends(require_user),
    session: Session = Depends(get_session),
) -> dict:
    return {"message": "Budget saved successfully", "budget": save_budget(session, user["id"], body)}


@app.get("/budget")
def budget_get(user: dict = Depends(require_user), session: Session = Depends(get_session)) -> dict:
    return {"budget": get_budget(session, user["id"])}


@app.post("/timeline")
def timeline_save(
    body: TimelineIn,
    user: dict = Depends(require_user),
    session: Session = Depends(get_session),
) -> dict:
    return {"message": "Timeline saved successfully", "timeline": save_timeline(session, user["id"], body)}


@app.get("/timeline")
def timeline_get(user: dict = Depends(require_user), session: Session = Depends(get_session)) -> dict:
    return {"timeline": get_timeline(session, user["id"])}


@app.post("/checklist")
def checklist_save(
    body: ChecklistsIn,
    user: dict = Depends(require_user),
    session: Session = Depends(get_session),
) -> dict:
    return {
        "message": "Checklist saved successfully",
        "checklists": save_checklists(session, user["id"], body),
    }


@app.get("/checklist")
def checklist_get(user: dict = Depends(require_user), session: Session = Depends(get_session)) -> dict:
    return {"checklists": get_checklists(session, user["id"])}


@app.get("/templates")
def templates(
    template_type: str | None = Query(default=None, alias="type"),
    user: dict = Depends(require_user),
    session: Session = Depends(get_session),
) -> dict:
    return {"templates": [t.model_dump() for t in list_templates(session, template_type)]}


@app.get("/dashboard")
def dashboard(user: dict = Depends(require_user), session: Session = Depends(get_session)) -> dict:
    return dashboard_summary(session, user["id"])


# ── Recommendations ──────────────────────────────────────────────────────


@app.get("/recommendations")
def recommendations(
    user: dict = Depends(require_user),
    session: Session = Depends(get_session),
    config: LLMConfig = Depends(get_llm_config),
):
    details = get_questionnaire(session, user["id"])
    if details is None or not details.wedding_location:
        return NEEDS_QUESTIONNAIRE

    prefs = preferences_from_details(details)
    items, source = generate_recommendations(prefs, config)
    return RecommendationsResponse(
        recommendations=items,
        source=source,
        user_preferences=UserPreferencesOut(
            location=prefs.location,
            guest_count=guest_count_lower_bound(prefs.guest_count),
            budget=prefs.budget,
            date=prefs.wedding_date or utcnow(),
            style=prefs.style or "",
            priorities=[],
        ),
    )


@app.get("/recommendations/plan")
def recommendation_plan(
    user: dict = Depends(require_user), session: Session = Depends(get_session)
):
    details = get_questionnaire(session, user["id"])
    if details is None or not details.wedding_location:
        return NEEDS_QUESTIONNAIRE

    prefs = preferences_from_details(details)
    return PlanResponse(
        recommendations=category_recommendations(prefs),
        moodboard=build_moodboard(prefs),
    )


# ── Vendor search ────────────────────────────────────────────────────────


@app.post("/vendor-search", response_model=VendorSearchResponse)
def vendor_search(
    body: VendorSearchRequest,
    user: dict = Depends(require_user),
    service: VendorSearchService = Depends(get_vendor_search),
) -> VendorSearchResponse:
    outcome = service.search(body)
    now = utcnow()
    logger.info(
        "Vendor search for user %s: %s in %s returned %d vendors (cache_used=%s)",
        user["id"], body.category, body.location, len(outcome.vendors), outcome.cache_used,
    )
    return VendorSearchResponse(
        search_id=f"search_{int(now.timestamp() * 1000)}",
        vendors=outcome.vendors,
        search_metadata=SearchMetadata(
            total_results=len(outcome.vendors),
            search_time=now.isoformat(),
            cache_used=outcome.cache_used,
            ai_ranking_applied=outcome.strategy == "llm",
            sources=outcome.sources,
        ),
    )


@app.get("/vendor-search")
def vendor_search_info(
    action: str | None = None,
    user: dict = Depends(require_user),
    service: VendorSearchService = Depends(get_vendor_search),
) -> dict:
    if action == "categories":
        return {"success": True, "categories": category_list()}
    if action == "history":
        return {"success": True, "search_history": []}
    return {
        "success": True,
        "message": "Vendor search API is ready",
        "features": [
            "LLM-assisted vendor ranking",
            "Multiple vendor sources",
            "Location, budget and capacity filtering",
            "Search result caching",
        ],
        "cache": service.cache.stats(),
    }


# ── AI assistant ─────────────────────────────────────────────────────────


@app.post("/ai-assistant")
def ai_assistant(
    body: AssistantRequest,
    user: dict = Depends(require_user),
    config: LLMConfig = Depends(get_llm_config),
) -> StreamingResponse:
    if not config.available:
        raise HTTPException(status_code=503, detail="AI assistant is not configured")
    try:
        deltas = open_stream(body, config)
    except Exception:
        logger.warning("Groq streaming call failed", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to get AI response")

    return StreamingResponse(
        sse_events(deltas),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"},
    )
