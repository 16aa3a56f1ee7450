"""Content payload — generated copy keyed by the landing template's slots.

Every field is optional at every level and unknown keys are ignored, so a
partial or loosely shaped provider response still validates. A value of
the wrong shape is dropped on its own: a list field that is not a list
reads as empty, and a list item or text field of the wrong type reads as
absent. The rest of the payload is kept.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _text_or_none(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return value
    return None


def _list_or_empty(value: Any) -> Any:
    if value is None:
        return None
    return value if isinstance(value, list) else []


def _object_or_none(value: Any) -> Any:
    return value if isinstance(value, (dict, BaseModel)) else None


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class HeroContent(_Lenient):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    primary_cta: Optional[str] = Field(None, alias="primaryCta")
    secondary_cta: Optional[str] = Field(None, alias="secondaryCta")
    assurance: Optional[str] = None
    highlights: Optional[List[Optional[str]]] = None

    @field_validator("title", "subtitle", "primary_cta", "secondary_cta", "assurance", mode="before")
    @classmethod
    def _drop_non_text(cls, value: Any) -> Any:
        return _text_or_none(value)

    @field_validator("highlights", mode="before")
    @classmethod
    def _lenient_rows(cls, value: Any) -> Any:
        value = _list_or_empty(value)
        return [_text_or_none(item) for item in value] if value else value


class MetricContent(_Lenient):
    value: Optional[str] = None
    label: Optional[str] = None

    @field_validator("value", "label", mode="before")
    @classmethod
    def _drop_non_text(cls, value: Any) -> Any:
        return _text_or_none(value)


class TestimonialContent(_Lenient):
    heading: Optional[str] = None
    subtitle: Optional[str] = None
    quote: Optional[str] = None
    bullets: Optional[List[Optional[str]]] = None
    attribution: Optional[str] = None
    attribution_role: Optional[str] = Field(None, alias="attributionRole")
    callout: Optional[str] = None

    @field_validator(
        "heading", "subtitle", "quote", "attribution", "attribution_role", "callout", mode="before",
    )
    @classmethod
    def _drop_non_text(cls, value: Any) -> Any:
        return _text_or_none(value)

    @field_validator("bullets", mode="before")
    @classmethod
    def _lenient_rows(cls, value: Any) -> Any:
        value = _list_or_empty(value)
        return [_text_or_none(item) for item in value] if value else value


class CTAContent(_Lenient):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    primary_cta: Optional[str] = Field(None, alias="primaryCta")
    secondary_cta: Optional[str] = Field(None, alias="secondaryCta")

    @field_validator("title", "subtitle", "primary_cta", "secondary_cta", mode="before")
    @classmethod
    def _drop_non_text(cls, value: Any) -> Any:
        return _text_or_none(value)


class ContentPayload(_Lenient):
    hero: Optional[HeroContent] = None
    metrics: Optional[List[Optional[MetricContent]]] = None
    testimonial: Optional[TestimonialContent] = None
    cta: Optional[CTAContent] = None

    @field_validator("hero", "testimonial", "cta", mode="before")
    @classmethod
    def _drop_non_object(cls, value: Any) -> Any:
        return _object_or_none(value)

    @field_validator("metrics", mode="before")
    @classmethod
    def _lenient_metrics(cls, value: Any) -> Any:
        value = _list_or_empty(value)
        return [_object_or_none(item) for item in value] if value else value
