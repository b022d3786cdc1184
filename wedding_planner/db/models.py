"""
SQLModel tables for everything a couple saves: account, questionnaire,
budget, timeline, checklists, plus the seeded template/category catalogs.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive values, which is how SQLite hands datetimes back."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    password_hash: str
    name: str = ""
    partner_one_name: str = ""
    partner_two_name: str = ""
    reset_token: Optional[str] = Field(default=None, index=True)
    reset_token_expiry: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)


class WeddingDetails(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True, unique=True)
    partner_one_name: str = ""
    partner_two_name: str = ""
    wedding_location: Optional[str] = None
    wedding_date: Optional[datetime] = None
    guest_count: Optional[str] = None
    budget: Optional[float] = None
    currency: str = "GBP"
    cultural_traditions: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    religious_traditions: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    planned_events: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    wedding_style: Optional[str] = None
    venue_type: Optional[str] = None
    special_requirements: Optional[str] = None
    updated_at: datetime = Field(default_factory=utcnow)


class Budget(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    name: str = "My Wedding Budget"
    total_budget: float = 0.0
    currency: str = "GBP"
    created_at: datetime = Field(default_factory=utcnow)


class BudgetItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    budget_id: int = Field(foreign_key="budget.id", index=True)
    category: str
    item: str
    estimated_cost: float = 0.0
    actual_cost: Optional[float] = None
    is_paid: bool = False
    priority: str = "medium"
    notes: Optional[str] = None


class Timeline(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    name: str = "My Wedding Timeline"
    wedding_date: datetime
    created_at: datetime = Field(default_factory=utcnow)


class TimelineTask(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    timeline_id: int = Field(foreign_key="timeline.id", index=True)
    title: str
    description: Optional[str] = None
    due_date: datetime
    is_completed: bool = False
    category: str = "Custom"
    priority: str = "medium"


class Checklist(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    name: str
    category: str
    created_at: datetime = Field(default_factory=utcnow)


class ChecklistItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    checklist_id: int = Field(foreign_key="checklist.id", index=True)
    title: str
    description: Optional[str] = None
    is_completed: bool = False
    category: str = ""
    importance: str = "medium"
    created_at: datetime = Field(default_factory=utcnow)


class WeddingTemplate(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    type: str = Field(index=True)
    title: str = Field(unique=True)
    content: str = Field(sa_column=Column(Text))
    style: str = ""
    category: str = ""
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utcnow)


class VendorCategory(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)
    description: str = ""
    icon: str = ""
