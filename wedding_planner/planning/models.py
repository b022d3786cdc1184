from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..db.models import as_utc


class _Payload(BaseModel):
    """Accepts both snake_case and the camelCase keys the web forms send."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class QuestionnaireIn(_Payload):
    partner_one_name: str | None = None
    partner_two_name: str | None = None
    wedding_location: str | None = None
    wedding_date: datetime | None = None
    guest_count: str | None = None
    budget: float | None = Field(default=None, ge=0)
    currency: str = "GBP"
    cultural_traditions: list[str] = Field(default_factory=list)
    religious_traditions: list[str] = Field(default_factory=list)
    planned_events: list[str] = Field(default_factory=list)
    wedding_style: str | None = None
    venue_type: str | None = None
    special_requirements: str | None = None

    @field_validator("wedding_date", "budget", "guest_count", mode="before")
    @classmethod
    def blank_is_none(cls, value):
        return _blank_to_none(value)

    @field_validator("wedding_date")
    @classmethod
    def assume_utc(cls, value):
        return as_utc(value)


class BudgetItemIn(_Payload):
    category: str
    item: str
    estimated_cost: float = 0.0
    actual_cost: float | None = None
    is_paid: bool = False
    priority: str = "medium"
    notes: str | None = None

    @field_validator("actual_cost", "notes", mode="before")
    @classmethod
    def blank_is_none(cls, value):
        return _blank_to_none(value)

    @field_validator("estimated_cost", mode="before")
    @classmethod
    def zero_when_blank(cls, value):
        return _blank_to_none(value) or 0.0


class BudgetIn(_Payload):
    total_budget: float = Field(..., ge=0)
    currency: str = "GBP"
    items: list[BudgetItemIn] = Field(default_factory=list)


class TimelineTaskIn(_Payload):
    title: str
    description: str | None = None
    due_date: datetime
    is_completed: bool = False
    category: str = "Custom"
    priority: str = "medium"

    @field_validator("due_date")
    @classmethod
    def assume_utc(cls, value):
        return as_utc(value)


class TimelineIn(_Payload):
    name: str | None = None
    wedding_date: datetime
    tasks: list[TimelineTaskIn] = Field(default_factory=list)

    @field_validator("wedding_date")
    @classmethod
    def assume_utc(cls, value):
        return as_utc(value)


class ChecklistItemIn(_Payload):
    title: str
    description: str | None = None
    is_completed: bool = False
    category: str = ""
    importance: str = "medium"


class ChecklistIn(_Payload):
    name: str
    category: str
    items: list[ChecklistItemIn] = Field(default_factory=list)


class ChecklistsIn(_Payload):
    checklists: list[ChecklistIn]
