"""Request validation: untyped JSON payload -> immutable BusinessProfile."""

from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, StrictStr, field_validator
from pydantic.alias_generators import to_camel

from .errors import ValidationError
from .models import BusinessProfile, DEFAULT_TONE


class ProfileInput(BaseModel):
    """Wire shape of the form submission. Aliases match the camelCase JSON body."""

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    business_name: StrictStr = Field(min_length=1)
    industry: StrictStr = Field(min_length=1)
    target_audience: StrictStr = Field(min_length=1)
    offer: StrictStr = Field(min_length=1)
    tone: StrictStr | None = Field(default=None, validate_default=True)
    website: HttpUrl | None = None

    @field_validator("tone")
    @classmethod
    def _default_tone(cls, value: str | None) -> str:
        if not value:
            return DEFAULT_TONE
        return value.lower()

    @field_validator("website", mode="before")
    @classmethod
    def _blank_website(cls, value: Any) -> Any:
        # Empty string means "no website"
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("website must be text")
        return value.strip() or None


def _bare_domain(url: HttpUrl) -> str:
    """Host without credentials, port or a leading www., lower-cased by the URL parser."""
    return url.host.removeprefix("www.")


def validate_profile(payload: Any) -> BusinessProfile:
    """
    Validate a raw request payload into a BusinessProfile.

    Raises:
        ValidationError: naming every offending field (by its JSON name).
    """
    if not isinstance(payload, dict):
        raise ValidationError(["body"], "Request body must be a JSON object")

    try:
        data = ProfileInput.model_validate(payload)
    except pydantic.ValidationError as e:
        fields: list[str] = []
        for err in e.errors():
            name = str(err["loc"][0]) if err["loc"] else "body"
            if name not in fields:
                fields.append(name)
        raise ValidationError(fields) from None

    return BusinessProfile(
        business_name=data.business_name,
        industry=data.industry,
        target_audience=data.target_audience,
        offer=data.offer,
        tone=data.tone,
        website=str(data.website) if data.website else None,
        website_domain=_bare_domain(data.website) if data.website else None,
    )
