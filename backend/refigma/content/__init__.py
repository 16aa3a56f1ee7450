"""Content payload model and anchor-based content application."""

from .engine import ApplyReport, ContentApplicationEngine
from .payload import CTAContent, ContentPayload, HeroContent, MetricContent, TestimonialContent

__all__ = [
    "ApplyReport",
    "CTAContent",
    "ContentApplicationEngine",
    "ContentPayload",
    "HeroContent",
    "MetricContent",
    "TestimonialContent",
]
