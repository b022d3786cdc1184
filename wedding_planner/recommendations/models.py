from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Priority(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class WeddingPreferences(BaseModel):
    budget: float = 0.0
    currency: str = "GBP"
    guest_count: str | None = Field(
        default=None, description='Guest-count bucket, e.g. "100-150" or "200+"'
    )
    location: str = ""
    style: str | None = None
    wedding_date: datetime | None = None
    cultural_traditions: list[str] = Field(default_factory=list)
    religious_traditions: list[str] = Field(default_factory=list)
    planned_events: list[str] = Field(default_factory=list)
    special_requirements: str | None = None


class Recommendation(BaseModel):
    priority: Priority
    category: str
    title: str
    description: str
    reasoning: str
    actionable_steps: list[str] = Field(default_factory=list)
    estimated_cost: str | None = None
    timeframe: str | None = None


class UserPreferencesOut(BaseModel):
    location: str
    guest_count: int
    budget: float
    date: datetime
    style: str
    priorities: list[str] = Field(default_factory=list)


class RecommendationsResponse(BaseModel):
    success: bool = True
    recommendations: list[Recommendation]
    source: str
    user_preferences: UserPreferencesOut


class EstimatedCost(BaseModel):
    min: int
    max: int
    currency: str


class CategoryRecommendation(BaseModel):
    id: str
    type: str
    title: str
    description: str
    estimated_cost: EstimatedCost
    priority: Priority
    reasons: list[str]
    suggested_vendors: list[str] = Field(default_factory=list)


class Moodboard(BaseModel):
    style: str
    colors: list[str]
    themes: list[str]
    elements: list[str]


class PlanResponse(BaseModel):
    success: bool = True
    recommendations: list[CategoryRecommendation]
    moodboard: Moodboard
