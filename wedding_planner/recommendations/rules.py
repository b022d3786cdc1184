"""
Rule-based planning recommendations.

Used whenever the LLM cannot produce recommendations. Venue and
photography are always emitted, then budget, urgency and
tradition tips are appended when their condition holds. Output is capped at
MAX_RECOMMENDATIONS by list order.
"""
from __future__ import annotations

from datetime import datetime

from .models import Priority, Recommendation, WeddingPreferences
from .preferences import format_money, format_money_range, months_until

MAX_RECOMMENDATIONS = 5
# Compared against the raw budget figure whatever the currency.
LOW_BUDGET_THRESHOLD = 10000
URGENT_MONTHS = 6


def _venue(prefs: WeddingPreferences, months: int) -> Recommendation:
    budget = prefs.budget
    guests = prefs.guest_count or "your estimated"
    return Recommendation(
        priority=Priority.high,
        category="venue",
        title="Secure Your Wedding Venue",
        description=(
            f"Find and book your wedding venue in {prefs.location}. With {guests} guests, "
            "you'll need a space that can comfortably accommodate everyone."
        ),
        reasoning=(
            "Venue is typically the largest expense and sets the tone for your entire wedding. "
            "Popular venues book up quickly, especially in desirable locations."
        ),
        actionable_steps=[
            "Research venues in your area that fit your budget and guest count",
            "Schedule site visits for your top 3-5 choices",
            "Ask about availability for your wedding date",
            "Compare pricing packages and what's included",
        ],
        estimated_cost=(
            format_money_range(budget * 0.4, budget * 0.5, prefs.currency)
            if budget
            else format_money_range(3000, 15000, prefs.currency)
        ),
        timeframe="12-18 months before wedding" if months > 12 else "Book immediately",
    )


def _photography(prefs: WeddingPreferences, months: int) -> Recommendation:
    budget = prefs.budget
    return Recommendation(
        priority=Priority.high,
        category="photography",
        title="Book Your Wedding Photographer",
        description=(
            "Secure a professional photographer to capture your special moments. Quality wedding "
            "photography is an investment in memories that will last forever."
        ),
        reasoning=(
            "The best photographers in your area book up quickly, and photography is one element "
            "you cannot recreate after the wedding."
        ),
        actionable_steps=[
            "Research photographers whose style matches your vision",
            "Review full wedding galleries, not just highlight reels",
            "Meet with photographers to ensure personality fit",
            "Compare packages and understand what's included",
        ],
        estimated_cost=(
            format_money_range(budget * 0.1, budget * 0.15, prefs.currency)
            if budget
            else format_money_range(1000, 3000, prefs.currency)
        ),
        timeframe="9-12 months before wedding" if months > 9 else "Book as soon as possible",
    )


def _budget_stretch(prefs: WeddingPreferences) -> Recommendation:
    return Recommendation(
        priority=Priority.medium,
        category="planning",
        title="Maximize Your Budget with Smart Choices",
        description=(
            f"With your budget of {format_money(prefs.budget, prefs.currency)}, focus on the "
            "elements that matter most to you and find creative ways to save on others."
        ),
        reasoning=(
            "Strategic planning can help you achieve your dream wedding within your budget constraints."
        ),
        actionable_steps=[
            "Prioritize your top 3 most important wedding elements",
            "Consider weekday or off-season dates for better pricing",
            "Look into DIY options for decorations and favors",
            "Research local vendors who offer package deals",
        ],
        estimated_cost="Stay within existing budget",
        timeframe="Start planning immediately",
    )


def _urgency(months: int) -> Recommendation:
    return Recommendation(
        priority=Priority.high,
        category="planning",
        title="Accelerate Your Wedding Planning",
        description=(
            f"With only {months} months until your wedding, you need to move quickly on key "
            "decisions and bookings."
        ),
        reasoning="Many vendors require 6+ months lead time, so you'll need to be flexible and act fast.",
        actionable_steps=[
            "Book venue and photographer immediately",
            "Be flexible with vendor choices and dates",
            "Consider simplified menu options",
            "Focus on essential elements first",
        ],
        timeframe="All actions are urgent",
    )


def _traditions() -> Recommendation:
    return Recommendation(
        priority=Priority.medium,
        category="planning",
        title="Honor Your Cultural and Religious Traditions",
        description=(
            "Incorporate your cultural and religious traditions meaningfully into your wedding celebration."
        ),
        reasoning=(
            "These elements add personal significance and ensure your wedding reflects your values "
            "and heritage."
        ),
        actionable_steps=[
            "Research vendors experienced with your traditions",
            "Plan ceremony elements that honor your beliefs",
            "Consider traditional music, food, or customs",
            "Communicate requirements clearly to all vendors",
        ],
        timeframe="Include in all vendor discussions",
    )


def fallback_recommendations(
    prefs: WeddingPreferences,
    now: datetime | None = None,
) -> list[Recommendation]:
    months = months_until(prefs.wedding_date, now)

    recommendations = [_venue(prefs, months), _photography(prefs, months)]

    if prefs.budget and prefs.budget < LOW_BUDGET_THRESHOLD:
        recommendations.append(_budget_stretch(prefs))

    if months < URGENT_MONTHS:
        recommendations.append(_urgency(months))

    if prefs.cultural_traditions or prefs.religious_traditions:
        recommendations.append(_traditions())

    return recommendations[:MAX_RECOMMENDATIONS]
