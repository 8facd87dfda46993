"""Pydantic schemas for configuration, intake fields and submission state."""
import re
from typing import Annotated, Literal, Union
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

PHONE_TEL_RE = re.compile(r"^\+1\d{10}$")
DISPLAY_PHONE_RE = re.compile(r"^\(\d{3}\) \d{3}-\d{4}$")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class SiteConfig(BaseModel):
    """Build-time values the page is rendered from."""

    model_config = ConfigDict(frozen=True)

    business_name: str
    phone_tel: str
    display_phone: str
    intake_email: str
    relay_endpoint: str
    skilled_clinical_services: StrictBool = False

    @field_validator("business_name")
    @classmethod
    def validate_business_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("business_name should not be empty")
        return v

    @field_validator("phone_tel")
    @classmethod
    def validate_phone_tel(cls, v: str) -> str:
        """Dialable form: +1 followed by ten digits."""
        if not PHONE_TEL_RE.fullmatch(v):
            raise ValueError("phone_tel should be E.164 and start with +1")
        return v

    @field_validator("display_phone")
    @classmethod
    def validate_display_phone(cls, v: str) -> str:
        if not DISPLAY_PHONE_RE.fullmatch(v):
            raise ValueError("display_phone should be (###) ###-####")
        return v

    @field_validator("intake_email")
    @classmethod
    def validate_intake_email(cls, v: str) -> str:
        if not EMAIL_RE.fullmatch(v):
            raise ValueError("intake_email should look like an email address")
        return v

    @field_validator("relay_endpoint")
    @classmethod
    def validate_relay_endpoint(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme != "https" or not parsed.netloc:
            raise ValueError("relay_endpoint must be a fully-qualified https URL")
        try:
            httpx.URL(v)
        except httpx.InvalidURL as e:
            raise ValueError(f"relay_endpoint is not a valid URL: {e}") from e
        return v

    @property
    def tel_href(self) -> str:
        return f"tel:{self.phone_tel}"

    @property
    def intake_subject(self) -> str:
        return f"New Client Intake Request — {self.business_name}"


class IntakeFields(BaseModel):
    """Current values of the intake form."""

    name: str = ""
    phone: str = ""
    email: str = ""
    message: str = ""


class IdleState(BaseModel):
    """No submission attempted yet."""

    model_config = ConfigDict(frozen=True)

    phase: Literal["idle"] = "idle"


class SendingState(BaseModel):
    """Request in flight."""

    model_config = ConfigDict(frozen=True)

    phase: Literal["sending"] = "sending"


class SuccessState(BaseModel):
    """Relay acknowledged the submission."""

    model_config = ConfigDict(frozen=True)

    phase: Literal["success"] = "success"


class ErrorState(BaseModel):
    """Relay rejected the submission or the network failed."""

    model_config = ConfigDict(frozen=True)

    phase: Literal["error"] = "error"
    message: str


SubmissionState = Annotated[
    Union[IdleState, SendingState, SuccessState, ErrorState],
    Field(discriminator="phase"),
]


class HealthResponse(BaseModel):
    """GET /health response."""

    status: str
    timestamp: str


class VersionResponse(BaseModel):
    """GET /version response."""

    version: str
