"""
Database bootstrap: engine from DB_URL (default SQLite file), table
creation, request-scoped sessions and the idempotent seed data.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import Any

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from ..auth.users import hash_password
from .models import User, VendorCategory, WeddingTemplate

logger = logging.getLogger(__name__)

DB_URL = os.getenv("DB_URL", "sqlite:///./wedding_planner.db")


def _engine_kwargs(url: str) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"echo": False}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory databases live per connection; share a single one.
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(DB_URL, **_engine_kwargs(DB_URL))


def get_session() -> Iterator[Session]:
    with Session(engine) as session:
        yield session


def init_db() -> None:
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        _seed(session)


# ── Seed data ────────────────────────────────────────────────────────────

DEMO_EMAIL = "john@doe.com"
DEMO_PASSWORD = "johndoe123"

VENDOR_CATEGORIES = [
    {"name": "Venues", "description": "Wedding venues and reception halls", "icon": "building"},
    {"name": "Photography", "description": "Wedding photographers and videographers", "icon": "camera"},
    {"name": "Catering", "description": "Food and beverage services", "icon": "utensils"},
    {"name": "Flowers & Decor", "description": "Florists and decoration services", "icon": "flower"},
    {"name": "Music & Entertainment", "description": "DJs, bands, and entertainment", "icon": "music"},
    {"name": "Transportation", "description": "Wedding transport services", "icon": "car"},
    {"name": "Beauty & Wellness", "description": "Hair, makeup, and spa services", "icon": "sparkles"},
    {"name": "Fashion & Attire", "description": "Bridal wear and formal attire", "icon": "shirt"},
    {"name": "Stationery", "description": "Invitations and wedding stationery", "icon": "mail"},
    {"name": "Cakes & Desserts", "description": "Wedding cakes and dessert services", "icon": "cake"},
]

WEDDING_TEMPLATES = [
    {
        "type": "invitation",
        "title": "Classic Formal Invitation",
        "content": (
            "Together with our families,\n"
            "[Partner One Name] & [Partner Two Name]\n"
            "request the honour of your presence\n"
            "at their wedding celebration\n\n"
            "[Date]\nat [Time]\n[Venue Name]\n[Venue Address]\n\n"
            "Reception to follow\n\n"
            "RSVP by [RSVP Date]\n[Contact Information]"
        ),
        "style": "formal",
        "category": "invitation",
        "tags": ["traditional", "formal", "classic"],
    },
    {
        "type": "invitation",
        "title": "Romantic Garden Invitation",
        "content": (
            "Love is in bloom...\n\n"
            "[Partner One Name] & [Partner Two Name]\n"
            "invite you to share in their joy\n"
            "as they say \"I Do\"\n\n"
            "[Date] at [Time]\n[Venue Name]\n[Venue Address]\n\n"
            "Dinner and dancing to follow\n"
            "Garden party attire suggested\n\n"
            "Please RSVP by [RSVP Date]"
        ),
        "style": "romantic",
        "category": "invitation",
        "tags": ["romantic", "garden", "casual"],
    },
    {
        "type": "vows",
        "title": "Traditional Wedding Vows",
        "content": (
            "I, [Your Name], take you, [Partner's Name], to be my [wife/husband],\n"
            "to have and to hold from this day forward,\n"
            "for better, for worse,\n"
            "for richer, for poorer,\n"
            "in sickness and in health,\n"
            "to love and to cherish,\n"
            "till death do us part,\n"
            "according to God's holy ordinance;\n"
            "and thereto I pledge you my faith."
        ),
        "style": "traditional",
        "category": "vows",
        "tags": ["traditional", "religious", "classic"],
    },
    {
        "type": "vows",
        "title": "Personal Modern Vows",
        "content": (
            "[Partner's Name],\n"
            "today I choose you to be my partner in life.\n"
            "I promise to love you unconditionally,\n"
            "to support your dreams and ambitions,\n"
            "to laugh with you in times of joy,\n"
            "and to comfort you in times of sorrow.\n"
            "I promise to grow alongside you,\n"
            "to be your biggest cheerleader,\n"
            "and your most loyal friend.\n"
            "With this ring, I give you my heart,\n"
            "and promise to love you for all the days of my life."
        ),
        "style": "modern",
        "category": "vows",
        "tags": ["modern", "personal", "heartfelt"],
    },
]


def _seed(session: Session) -> None:
    """Insert demo user, vendor categories and templates if missing."""
    if session.exec(select(User).where(User.email == DEMO_EMAIL)).first() is None:
        session.add(User(
            email=DEMO_EMAIL,
            password_hash=hash_password(DEMO_PASSWORD),
            partner_one_name="John",
            partner_two_name="Jane",
            name="John & Jane",
        ))

    existing_categories = set(session.exec(select(VendorCategory.name)).all())
    for category in VENDOR_CATEGORIES:
        if category["name"] not in existing_categories:
            session.add(VendorCategory(**category))

    existing_templates = set(session.exec(select(WeddingTemplate.title)).all())
    for template in WEDDING_TEMPLATES:
        if template["title"] not in existing_templates:
            session.add(WeddingTemplate(**template))

    session.commit()
    logger.info("Database seeded")
