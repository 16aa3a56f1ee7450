"""Scene-graph builder: layout primitives, section builders and the landing root."""

from .cta import CTASectionBuilder
from .hero import HeroSectionBuilder
from .landing import LandingPageBuilder, SECTION_BUILDERS, anchor_names
from .primitives import LayoutKit
from .section import SectionBuilder
from .testimonial import TestimonialSectionBuilder

__all__ = [
    "CTASectionBuilder",
    "HeroSectionBuilder",
    "LandingPageBuilder",
    "LayoutKit",
    "SECTION_BUILDERS",
    "SectionBuilder",
    "TestimonialSectionBuilder",
    "anchor_names",
]
