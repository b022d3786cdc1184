from __future__ import annotations

import json
import logging
from datetime import datetime

from pydantic import ValidationError

from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import complete
from .models import Recommendation, WeddingPreferences
from .preferences import currency_symbol
from .rules import fallback_recommendations

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert wedding planner creating personalized recommendations for a couple. "
    "Based on their preferences, provide 4-6 specific, actionable recommendations.\n\n"
    "Return ONLY valid JSON in this exact format:\n"
    '{"recommendations": [{"priority": "high|medium|low", '
    '"category": "venue|catering|photography|music|flowers|decoration|planning", '
    '"title": "...", "description": "...", "reasoning": "...", '
    '"actionable_steps": ["...", "..."], "estimated_cost": "...", "timeframe": "..."}]}\n\n'
    "Focus on budget constraints, guest count, location-specific advice, timeline urgency, "
    "and cultural or religious requirements. Respond with raw JSON only."
)


def _or_unspecified(values: list[str] | str | None, empty: str = "Not specified") -> str:
    if isinstance(values, list):
        return ", ".join(values) if values else empty
    return values or empty


def _build_user_message(prefs: WeddingPreferences) -> str:
    date = prefs.wedding_date.strftime("%d %B %Y") if prefs.wedding_date else "Not specified"
    budget = (
        f"{currency_symbol(prefs.currency)}{prefs.budget:,.0f}" if prefs.budget else "Not specified"
    )
    lines = [
        "## Wedding Details",
        f"- Location: {prefs.location}",
        f"- Date: {date}",
        f"- Guest Count: {_or_unspecified(prefs.guest_count)}",
        f"- Budget: {budget}",
        f"- Cultural Traditions: {_or_unspecified(prefs.cultural_traditions, 'None specified')}",
        f"- Religious Traditions: {_or_unspecified(prefs.religious_traditions, 'None specified')}",
        f"- Planned Events: {_or_unspecified(prefs.planned_events)}",
        f"- Wedding Style: {_or_unspecified(prefs.style)}",
        f"- Special Requirements: {_or_unspecified(prefs.special_requirements, 'None specified')}",
    ]
    return "\n".join(lines)


def ai_recommendations(
    prefs: WeddingPreferences,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> list[Recommendation]:
    """
    Ask the LLM for tailored recommendations.

    Returns an empty list on any failure (disabled, API error, bad JSON,
    records that do not fit the Recommendation schema).
    """
    if not config.available:
        return []

    try:
        content = complete(
            [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": _build_user_message(prefs)},
            ],
            config,
            max_tokens=2000,
            temperature=0.7,
            json_mode=True,
        )
        parsed = json.loads(content)
        return [Recommendation(**item) for item in parsed.get("recommendations", [])]

    except (ValidationError, TypeError, AttributeError, json.JSONDecodeError):
        logger.warning("LLM returned unusable recommendations, using rules", exc_info=True)
        return []
    except Exception:
        logger.warning("Groq LLM call failed, falling back to rule-based recommendations", exc_info=True)
        return []


def generate_recommendations(
    prefs: WeddingPreferences,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
    now: datetime | None = None,
) -> tuple[list[Recommendation], str]:
    """Return ``(recommendations, source)`` where source is ``"ai"`` or ``"rules"``."""
    recommendations = ai_recommendations(prefs, config)
    if recommendations:
        return recommendations, "ai"
    return fallback_recommendations(prefs, now), "rules"
