from __future__ import annotations

import secrets
from datetime import datetime, timedelta
from typing import Any

import bcrypt
from sqlmodel import Session, select

from ..db.models import User, as_utc, utcnow

RESET_TOKEN_TTL = timedelta(hours=1)


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def public_user(user: User) -> dict[str, Any]:
    """The subset of a user that is safe to put in the session or a response."""
    return {"id": user.id, "email": user.email, "name": user.name}


def get_user_by_email(session: Session, email: str) -> User | None:
    return session.exec(select(User).where(User.email == email)).first()


def create_user(
    session: Session,
    email: str,
    password: str,
    partner_one_name: str,
    partner_two_name: str,
) -> User:
    user = User(
        email=email,
        password_hash=hash_password(password),
        partner_one_name=partner_one_name,
        partner_two_name=partner_two_name,
        name=f"{partner_one_name} & {partner_two_name}",
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def authenticate(session: Session, email: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{id, email, name}`` or ``None``."""
    user = get_user_by_email(session, email)
    if user and _verify_password(password, user.password_hash):
        return public_user(user)
    return None


def issue_reset_token(session: Session, user: User, now: datetime | None = None) -> str:
    token = secrets.token_hex(32)
    user.reset_token = token
    user.reset_token_expiry = (as_utc(now) or utcnow()) + RESET_TOKEN_TTL
    session.add(user)
    session.commit()
    return token


def reset_password(
    session: Session,
    token: str,
    new_password: str,
    now: datetime | None = None,
) -> bool:
    """Swap the password for the holder of a live reset token."""
    user = session.exec(select(User).where(User.reset_token == token)).first()
    now = as_utc(now) or utcnow()
    if user is None or user.reset_token_expiry is None or as_utc(user.reset_token_expiry) < now:
        return False
    user.password_hash = hash_password(new_password)
    user.reset_token = None
    user.reset_token_expiry = None
    session.add(user)
    session.commit()
    return True
