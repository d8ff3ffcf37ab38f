from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from datetime import datetime
from typing import Optional


class CamelModel(BaseModel):
    """Snake case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class AddGuardianParams(CamelModel):
    first_name: str
    last_name: str
    email: str
    phone: str
    password: str


class GuardianProfile(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str


class GuardianResult(GuardianProfile):
    """Projection returned when a guardian is created."""

    verification_token: Optional[str] = None


class GuardianAccount(GuardianProfile):
    password: str
    access_token: Optional[str] = None
    verification_token: Optional[str] = None
    verification_token_created_at: Optional[datetime] = None


class AuthenticationParams(CamelModel):
    email: str
    password: str


class AuthenticationResult(CamelModel):
    access_token: str
    name: str


class ResetPasswordParams(CamelModel):
    email: str
    token: str
    password: str


class MessageResponse(CamelModel):
    message: str
