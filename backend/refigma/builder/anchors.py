"""Anchor names — the only contract between the builder and the content engine.

Every name here is assigned to exactly one node per build. The content engine
looks nodes up by these exact strings; it never holds node references.
"""

from __future__ import annotations

from typing import List

# Top-level frames
LANDING_ROOT = "Template/Landing-Refigma"
SECTION_HERO = "Section/Hero"
SECTION_TESTIMONIALS = "Section/Testimonials"
SECTION_CTA = "Section/CTA"

# Hero
HERO_SECTION_LABEL = "Hero:SectionLabel"
HERO_BADGE_TITLE = "Hero:BadgeTitle"
HERO_BADGE_SUBTITLE = "Hero:BadgeSubtitle"
HERO_HEADING = "Hero:Heading"
HERO_SUBHEADING = "Hero:Subheading"
HERO_ASSURANCE = "Hero:Assurance"
HERO_CTA_PRIMARY = "HeroCTA:Primary"
HERO_CTA_PRIMARY_LABEL = "HeroCTA:Primary:Label"
HERO_CTA_SECONDARY = "HeroCTA:Secondary"
HERO_CTA_SECONDARY_LABEL = "HeroCTA:Secondary:Label"

# Testimonial
TESTIMONIAL_BADGE_TITLE = "Testimonial:BadgeTitle"
TESTIMONIAL_HEADING = "Testimonial:Heading"
TESTIMONIAL_SUBTITLE = "Testimonial:Subtitle"
TESTIMONIAL_QUOTE = "Testimonial:Quote"
TESTIMONIAL_ATTRIBUTION = "Testimonial:Attribution"
TESTIMONIAL_ATTRIBUTION_ROLE = "Testimonial:AttributionRole"
TESTIMONIAL_CALLOUT = "Testimonial:Callout"

# CTA
CTA_HEADING = "CTA:Heading"
CTA_BODY = "CTA:Body"
CTA_PRIMARY_BUTTON = "CTA:PrimaryButton"
CTA_PRIMARY_LABEL = "CTA:PrimaryLabel"
CTA_SECONDARY_BUTTON = "CTA:SecondaryButton"
CTA_SECONDARY_LABEL = "CTA:SecondaryLabel"


def hero_highlight(index: int) -> str:
    return f"Hero:Highlight:{index}"


def hero_highlight_text(index: int) -> str:
    return f"Hero:Highlight:{index}:Text"


def hero_metric(index: int) -> str:
    return f"HeroMetric:{index}"


def hero_metric_value(index: int) -> str:
    return f"HeroMetric:{index}:Value"


def hero_metric_label(index: int) -> str:
    return f"HeroMetric:{index}:Label"


def testimonial_bullet(index: int) -> str:
    return f"Testimonial:Bullet:{index}"


def testimonial_bullet_text(index: int) -> str:
    return f"Testimonial:Bullet:{index}:Text"


def expected_anchor_names(rows: int = 3) -> List[str]:
    """All anchor names one landing build must produce, in build order."""
    names = [
        LANDING_ROOT, SECTION_HERO, HERO_SECTION_LABEL, HERO_BADGE_TITLE,
        HERO_BADGE_SUBTITLE, HERO_HEADING, HERO_SUBHEADING,
    ]
    for i in range(rows):
        names += [hero_highlight(i), hero_highlight_text(i)]
    names += [
        HERO_CTA_PRIMARY, HERO_CTA_PRIMARY_LABEL,
        HERO_CTA_SECONDARY, HERO_CTA_SECONDARY_LABEL, HERO_ASSURANCE,
    ]
    for i in range(rows):
        names += [hero_metric(i), hero_metric_value(i), hero_metric_label(i)]
    names += [
        SECTION_TESTIMONIALS, TESTIMONIAL_BADGE_TITLE, TESTIMONIAL_HEADING,
        TESTIMONIAL_SUBTITLE, TESTIMONIAL_QUOTE,
    ]
    for i in range(rows):
        names += [testimonial_bullet(i), testimonial_bullet_text(i)]
    names += [
        TESTIMONIAL_ATTRIBUTION, TESTIMONIAL_ATTRIBUTION_ROLE, TESTIMONIAL_CALLOUT,
        SECTION_CTA, CTA_HEADING, CTA_BODY,
        CTA_PRIMARY_BUTTON, CTA_PRIMARY_LABEL, CTA_SECONDARY_BUTTON, CTA_SECONDARY_LABEL,
    ]
    return names
