"""Landing page builder — root frame plus Hero, Testimonial and CTA sections."""

from __future__ import annotations

import logging
from typing import List, Optional, Set, Type

from refigma import settings
from refigma.canvas import CanvasHost, SceneNode
from refigma.tokens import TokenResolver

from . import anchors
from .cta import CTASectionBuilder
from .hero import HeroSectionBuilder
from .primitives import COLUMN, LayoutKit
from .section import SectionBuilder
from .testimonial import TestimonialSectionBuilder

logger = logging.getLogger(__name__)

# Append order is stacking and reading order; do not reorder
SECTION_BUILDERS: List[Type[SectionBuilder]] = [
    HeroSectionBuilder,
    TestimonialSectionBuilder,
    CTASectionBuilder,
]

COLUMN_COUNT = 12
COLUMN_GUTTER = 24
COLUMN_MARGIN = 160


def desktop_layout_grid() -> dict:
    return {
        "pattern": "COLUMNS",
        "alignment": "STRETCH",
        "gutterSize": COLUMN_GUTTER,
        "count": COLUMN_COUNT,
        "offset": COLUMN_MARGIN,
        "visible": False,
    }


class LandingPageBuilder:
    """Builds a complete landing template and places it on the current page.

    Each build creates a brand-new frame at the same canvas position; earlier
    builds are left in place.
    """

    def __init__(self, host: CanvasHost, tokens: TokenResolver, theme: Optional[str] = None):
        self.host = host
        self.kit = LayoutKit(host, tokens, theme or settings.DEFAULT_THEME)

    async def build(self) -> SceneNode:
        k = self.kit
        landing = k.auto_layout(
            COLUMN, name=anchors.LANDING_ROOT, counter_align="MIN", spacing=112,
            padding=(120, 160), radius="lg", stroke="neutral/200",
            fills=[k.gradient(("neutral/50", 1), ("neutral/100", 1))],
            effects=[k.shadow("soft")],
        )
        self.host.set_style(landing, layout_grids=[desktop_layout_grid()])

        for builder_cls in SECTION_BUILDERS:
            section = await builder_cls(k).build()
            k.append(landing, section)
            logger.info("Built %s (%d nodes)", section.name, sum(1 for _ in section.walk()))

        landing.resize(settings.LANDING_WIDTH, landing.height)
        self.host.set_style(
            landing, counter_axis_sizing_mode="FIXED",
            x=settings.LANDING_X, y=settings.LANDING_Y,
        )

        self.host.append_child(self.host.current_page, landing)
        self.host.set_selection([landing])
        self.host.scroll_into_view([landing])
        logger.info(
            "Landing %s placed at (%.0f, %.0f) with %d anchors",
            landing.id, landing.x, landing.y, len(anchor_names(landing)),
        )
        return landing


def anchor_names(root: SceneNode) -> Set[str]:
    """Names of every named node in the tree (root included)."""
    return {node.name for node in root.walk() if node.name}
