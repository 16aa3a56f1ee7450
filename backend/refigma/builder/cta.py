"""Closing call-to-action section."""

from __future__ import annotations

from refigma.canvas import SceneNode

from . import anchors
from .primitives import COLUMN, ROW, rotation
from .section import SectionBuilder

HEADING = "Ready to keep your design consistent?"
BODY = "Turn on Refigma and let AI document every design decision."
PRIMARY_CTA = "Start for free"
SECONDARY_CTA = "See the changelog"


class CTASectionBuilder(SectionBuilder):
    """Builds `Section/CTA`."""

    section_name = anchors.SECTION_CTA

    async def build(self) -> SceneNode:
        k = self.kit
        section = k.auto_layout(
            COLUMN, name=self.section_name, spacing=k.spacing(2), padding=(72, 160), radius="lg",
            fills=[k.gradient(("primary/500", 1), ("accent/500", 1), transform=rotation(0.92, 0.38))],
            effects=[k.shadow("medium")],
        )
        k.append(
            section,
            await k.text(HEADING, "h2", "neutral/50", 640, name=anchors.CTA_HEADING),
            await k.text(BODY, "body", "neutral/100", 560, name=anchors.CTA_BODY),
        )

        actions = k.auto_layout(ROW, counter_align="CENTER", spacing=k.spacing(2))
        k.host.set_style(actions, layout_align="MIN")
        k.append(
            actions,
            await k.button(PRIMARY_CTA, "primary", name=anchors.CTA_PRIMARY_BUTTON,
                           label_name=anchors.CTA_PRIMARY_LABEL),
            await k.button(SECONDARY_CTA, "ghost", name=anchors.CTA_SECONDARY_BUTTON,
                           label_name=anchors.CTA_SECONDARY_LABEL),
        )
        return k.append(section, actions)
