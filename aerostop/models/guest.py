"""Pydantic model for the guest making reservations in a session."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from aerostop.validators import validate_contact_number, validate_email, validate_name


class Guest(BaseModel):
    """Guest contact details, collected once per session."""

    name: str
    contact_number: str
    email: str
    special_request: Optional[str] = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return validate_name(v)

    @field_validator("contact_number")
    @classmethod
    def check_contact_number(cls, v: str) -> str:
        """Exactly 11 digits."""
        return validate_contact_number(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return validate_email(v)

    @field_validator("special_request")
    @classmethod
    def blank_request_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v
