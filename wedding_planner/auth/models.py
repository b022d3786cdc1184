from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SignupRequest(BaseModel):
    # Every field is optional so the route can answer with its own messages.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str | None = None
    password: str | None = None
    partner_one_name: str | None = None
    partner_two_name: str | None = None


class LoginRequest(BaseModel):
    email: str
    password: str


class ForgotPasswordRequest(BaseModel):
    email: str | None = None


class ResetPasswordRequest(BaseModel):
    token: str
    password: str | None = None
