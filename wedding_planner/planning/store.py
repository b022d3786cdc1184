from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Any

from sqlmodel import Session, delete, select

from ..db.models import (
    Budget,
    BudgetItem,
    Checklist,
    ChecklistItem,
    Timeline,
    TimelineTask,
    User,
    WeddingDetails,
    WeddingTemplate,
    as_utc,
    utcnow,
)
from .models import BudgetIn, ChecklistsIn, QuestionnaireIn, TimelineIn

UPCOMING_TASKS = 3


# ── Questionnaire ────────────────────────────────────────────────────────

def get_questionnaire(session: Session, user_id: int) -> WeddingDetails | None:
    return session.exec(select(WeddingDetails).where(WeddingDetails.user_id == user_id)).first()


def save_questionnaire(session: Session, user_id: int, data: QuestionnaireIn) -> WeddingDetails:
    """Upsert the user's wedding details; partner names also update the account."""
    if data.partner_one_name or data.partner_two_name:
        user = session.get(User, user_id)
        if user is not None:
            if data.partner_one_name:
                user.partner_one_name = data.partner_one_name
            if data.partner_two_name:
                user.partner_two_name = data.partner_two_name
            if data.partner_one_name and data.partner_two_name:
                user.name = f"{data.partner_one_name} & {data.partner_two_name}"
            session.add(user)

    details = get_questionnaire(session, user_id) or WeddingDetails(user_id=user_id)
    fields = data.model_dump()
    fields["partner_one_name"] = data.partner_one_name or ""
    fields["partner_two_name"] = data.partner_two_name or ""
    fields["currency"] = data.currency or "GBP"
    for name, value in fields.items():
        setattr(details, name, value)
    details.updated_at = utcnow()

    session.add(details)
    session.commit()
    session.refresh(details)
    return details


# ── Budget ───────────────────────────────────────────────────────────────

def _latest(session: Session, model, user_id: int):
    return session.exec(
        select(model).where(model.user_id == user_id).order_by(model.created_at.desc(), model.id.desc())
    ).first()


def _budget_out(session: Session, budget: Budget) -> dict[str, Any]:
    items = session.exec(
        select(BudgetItem)
        .where(BudgetItem.budget_id == budget.id)
        .order_by(BudgetItem.category, BudgetItem.id)
    ).all()
    return {**budget.model_dump(), "items": [item.model_dump() for item in items]}


def get_budget(session: Session, user_id: int) -> dict[str, Any] | None:
    budget = _latest(session, Budget, user_id)
    return _budget_out(session, budget) if budget else None


def save_budget(session: Session, user_id: int, data: BudgetIn) -> dict[str, Any]:
    """Find-or-create the user's budget and replace all of its items."""
    budget = _latest(session, Budget, user_id)
    if budget is None:
        budget = Budget(user_id=user_id)
    budget.total_budget = data.total_budget
    budget.currency = data.currency or "GBP"
    session.add(budget)
    session.flush()

    session.exec(delete(BudgetItem).where(BudgetItem.budget_id == budget.id))
    for item in data.items:
        session.add(BudgetItem(budget_id=budget.id, **item.model_dump()))

    session.commit()
    session.refresh(budget)
    return _budget_out(session, budget)


# ── Timeline ─────────────────────────────────────────────────────────────

def _timeline_out(session: Session, timeline: Timeline) -> dict[str, Any]:
    tasks = session.exec(
        select(TimelineTask)
        .where(TimelineTask.timeline_id == timeline.id)
        .order_by(TimelineTask.due_date, TimelineTask.id)
    ).all()
    return {**timeline.model_dump(), "tasks": [task.model_dump() for task in tasks]}


def get_timeline(session: Session, user_id: int) -> dict[str, Any] | None:
    timeline = _latest(session, Timeline, user_id)
    return _timeline_out(session, timeline) if timeline else None


def save_timeline(session: Session, user_id: int, data: TimelineIn) -> dict[str, Any]:
    timeline = _latest(session, Timeline, user_id)
    if timeline is None:
        timeline = Timeline(user_id=user_id, wedding_date=data.wedding_date)
    timeline.name = data.name or "My Wedding Timeline"
    timeline.wedding_date = data.wedding_date
    session.add(timeline)
    session.flush()

    session.exec(delete(TimelineTask).where(TimelineTask.timeline_id == timeline.id))
    for task in data.tasks:
        session.add(TimelineTask(timeline_id=timeline.id, **task.model_dump()))

    session.commit()
    session.refresh(timeline)
    return _timeline_out(session, timeline)


# ── Checklists ───────────────────────────────────────────────────────────

def get_checklists(session: Session, user_id: int) -> list[dict[str, Any]]:
    checklists = session.exec(
        select(Checklist).where(Checklist.user_id == user_id).order_by(Checklist.category, Checklist.id)
    ).all()
    result = []
    for checklist in checklists:
        items = session.exec(
            select(ChecklistItem)
            .where(ChecklistItem.checklist_id == checklist.id)
            .order_by(ChecklistItem.created_at, ChecklistItem.id)
        ).all()
        result.append({**checklist.model_dump(), "items": [item.model_dump() for item in items]})
    return result


def save_checklists(session: Session, user_id: int, data: ChecklistsIn) -> list[dict[str, Any]]:
    """Drop every checklist the user has and recreate from the payload."""
    existing_ids = session.exec(select(Checklist.id).where(Checklist.user_id == user_id)).all()
    if existing_ids:
        session.exec(delete(ChecklistItem).where(ChecklistItem.checklist_id.in_(existing_ids)))
        session.exec(delete(Checklist).where(Checklist.user_id == user_id))

    for entry in data.checklists:
        checklist = Checklist(user_id=user_id, name=entry.name, category=entry.category)
        session.add(checklist)
        session.flush()
        for item in entry.items:
            session.add(ChecklistItem(checklist_id=checklist.id, **item.model_dump()))

    session.commit()
    return get_checklists(session, user_id)


# ── Templates ────────────────────────────────────────────────────────────

def list_templates(session: Session, template_type: str | None = None) -> list[WeddingTemplate]:
    query = select(WeddingTemplate)
    if template_type:
        query = query.where(WeddingTemplate.type == template_type)
    return list(session.exec(query.order_by(WeddingTemplate.type, WeddingTemplate.id)).all())


# ── Dashboard ────────────────────────────────────────────────────────────

def _percent(done: int, total: int) -> int:
    return round(done / total * 100) if total else 0


def days_until(wedding_date: datetime | None, now: datetime | None = None) -> int | None:
    if wedding_date is None:
        return None
    now = as_utc(now) or utcnow()
    return max(0, math.ceil((as_utc(wedding_date) - now) / timedelta(days=1)))


def dashboard_summary(session: Session, user_id: int, now: datetime | None = None) -> dict[str, Any]:
    """Everything the overview page shows, with progress figures precomputed."""
    details = get_questionnaire(session, user_id)
    if details is None:
        return {"needs_questionnaire": True}

    budget = get_budget(session, user_id)
    timeline = get_timeline(session, user_id)
    checklists = get_checklists(session, user_id)

    items = budget["items"] if budget else []
    tasks = timeline["tasks"] if timeline else []
    checklist_items = [item for checklist in checklists for item in checklist["items"]]

    completed_tasks = sum(1 for task in tasks if task["is_completed"])
    completed_items = sum(1 for item in checklist_items if item["is_completed"])

    return {
        "needs_questionnaire": False,
        "wedding_details": details.model_dump(),
        "budget": budget,
        "timeline": timeline,
        "checklists": checklists,
        "summary": {
            "days_until_wedding": days_until(details.wedding_date, now),
            "budget_total": budget["total_budget"] if budget else 0.0,
            "estimated_spend": sum(item["estimated_cost"] for item in items),
            "actual_spend": sum(item["actual_cost"] or 0 for item in items),
            "paid_spend": sum(item["actual_cost"] or item["estimated_cost"] for item in items if item["is_paid"]),
            "total_tasks": len(tasks),
            "completed_tasks": completed_tasks,
            "planning_progress": _percent(completed_tasks, len(tasks)),
            "total_checklist_items": len(checklist_items),
            "completed_checklist_items": completed_items,
            "checklist_progress": _percent(completed_items, len(checklist_items)),
            "upcoming_tasks": [task for task in tasks if not task["is_completed"]][:UPCOMING_TASKS],
        },
    }
