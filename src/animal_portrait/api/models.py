"""Pydantic models for request payloads."""

from pydantic import BaseModel, Field

from animal_portrait.services.signup import EMAIL_PATTERN


class SignUpRequest(BaseModel):
    """Wizard sign-up form."""

    full_name: str
    email: str


class AnimalChoice(BaseModel):
    """Animal selected on the choose-animal step."""

    animal: str


class TierChoice(BaseModel):
    """Pricing tier selected on the purchase step."""

    tier: str


class WaitingListRequest(BaseModel):
    """Waiting-list landing page form."""

    name: str = Field(min_length=1)
    email: str = Field(pattern=EMAIL_PATTERN)
    country: str = Field(min_length=1)


class EarlyAccessRequest(BaseModel):
    """Early-access landing page form."""

    full_name: str = Field(min_length=1)
    email: str = Field(pattern=EMAIL_PATTERN)
