"""Testimonial section — heading, quote column with bullets, and quote cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from refigma.canvas import SceneNode, ShapeKind

from . import anchors
from .primitives import COLUMN, ROW, rotation
from .section import SectionBuilder

BADGE_TITLE = "Voices of product teams"
HEADING = "How Refigma speeds up collaboration"
SUBTITLE = (
    "Sprints feel lighter because handoff, documentation and token changes "
    "ship together."
)
QUOTE = '"Since Refigma, design-to-dev discussions share a single source of truth."'
BULLETS = (
    "Tokens, references and docs ready for developers to consume.",
    "Stakeholder reviews are fast because previews are always current.",
    "Shorter sprint planning thanks to the automated QA checklist.",
)
ATTRIBUTION = "OrbitPay product team"
ATTRIBUTION_ROLE = "Running 12 digital products"
CALLOUT = "Satisfaction score 4.9/5"


@dataclass(frozen=True)
class QuoteCard:
    quote: str
    author: str
    role: str
    accent: str
    metric: Optional[str] = None


CARDS = (
    QuoteCard(
        '"Refigma made our tokens and components one source of truth. Devs just pull."',
        "Salsa Pradipta", "VP Design, DaringLabs", "primary/500", "55% faster",
    ),
    QuoteCard(
        '"Developer docs assemble themselves. QA no longer copies things by hand."',
        "Kevin Mahardika", "Head of Product, Lokalite", "accent/500", "0 layout bugs",
    ),
    QuoteCard(
        '"Stakeholders review the latest version without asking for extra files."',
        "Chandra Tanu", "Founder, GridStack", "primary/400", "3x review cycles",
    ),
)


class TestimonialSectionBuilder(SectionBuilder):
    """Builds `Section/Testimonials`."""

    section_name = anchors.SECTION_TESTIMONIALS

    async def build(self) -> SceneNode:
        k = self.kit
        section = k.auto_layout(
            COLUMN, name=self.section_name, spacing=48, padding=(88, 160), radius="lg",
            fills=[k.gradient(("primary/500", 0.82), ("accent/500", 0.82), transform=rotation(0.94, 0.33))],
            effects=[k.shadow("medium")], stretch=True,
        )
        k.append(section, await self._heading())

        content = k.auto_layout(
            ROW, counter_align="CENTER", spacing=k.spacing(5), grow=True, stretch=True,
        )
        k.append(content, await self._copy_column(), await self._cards())
        return k.append(section, content)

    async def _heading(self) -> SceneNode:
        k = self.kit
        heading = k.auto_layout(COLUMN, counter_align="MIN", spacing=k.spacing(1))
        badge = k.auto_layout(
            ROW, counter_align="CENTER", spacing=k.spacing(1),
            padding=(k.spacing(1), k.spacing(2)), radius="pill",
            fills=[k.solid("neutral/50")], opacity=0.9,
        )
        k.append(badge, await k.text(BADGE_TITLE, "captionBold", "neutral/600",
                                     name=anchors.TESTIMONIAL_BADGE_TITLE))
        return k.append(
            heading,
            badge,
            await k.text(HEADING, "h2", "neutral/50", name=anchors.TESTIMONIAL_HEADING),
            await k.text(SUBTITLE, "body", "neutral/100", 560, name=anchors.TESTIMONIAL_SUBTITLE),
        )

    async def _copy_column(self) -> SceneNode:
        k = self.kit
        column = k.auto_layout(COLUMN, counter_align="MIN", spacing=k.spacing(2), grow=True, stretch=True)
        k.append(column, await k.text(QUOTE, "h3", "neutral/50", 420, name=anchors.TESTIMONIAL_QUOTE))

        bullets = k.auto_layout(COLUMN, counter_align="MIN", spacing=k.spacing(1), stretch=True)
        for index, item in enumerate(BULLETS):
            row = k.auto_layout(ROW, name=anchors.testimonial_bullet(index),
                                counter_align="CENTER", spacing=k.spacing(1))
            k.append(
                row,
                k.marker("neutral/50"),
                await k.text(item, "caption", "neutral/100", 420,
                             name=anchors.testimonial_bullet_text(index)),
            )
            k.append(bullets, row)
        k.append(column, bullets)

        footer = k.auto_layout(COLUMN, counter_align="MIN", spacing=k.spacing(0))
        k.append(
            footer,
            await k.text(ATTRIBUTION, "captionBold", "neutral/100", name=anchors.TESTIMONIAL_ATTRIBUTION),
            await k.text(ATTRIBUTION_ROLE, "caption", "neutral/200",
                         name=anchors.TESTIMONIAL_ATTRIBUTION_ROLE),
        )
        k.append(column, footer)

        callout = k.auto_layout(
            ROW, counter_align="CENTER", spacing=k.spacing(1),
            padding=(k.spacing(1), k.spacing(2)), radius="pill",
            fills=[k.solid("neutral/50")], opacity=0.9,
        )
        k.append(callout, await k.text(CALLOUT, "captionBold", "primary/600", name=anchors.TESTIMONIAL_CALLOUT))
        return k.append(column, callout)

    async def _cards(self) -> SceneNode:
        k = self.kit
        grid = k.auto_layout(ROW, counter_align="CENTER", spacing=k.spacing(3), grow=True, stretch=True)
        left = k.auto_layout(COLUMN, counter_align="MIN", spacing=k.spacing(3), grow=True, stretch=True)
        right = k.auto_layout(
            COLUMN, counter_align="MIN", spacing=k.spacing(3),
            padding=(k.spacing(4), 0, 0, 0), grow=True, stretch=True,
        )
        k.append(left, await self._card(CARDS[0]), await self._card(CARDS[1]))
        k.append(right, await self._card(CARDS[2]))
        return k.append(grid, left, right)

    async def _card(self, data: QuoteCard) -> SceneNode:
        k = self.kit
        card = k.card(
            padding_step=4, radius="lg", spacing=k.spacing(2),
            fills=[k.gradient(("neutral/50", 0.98), ("neutral/100", 0.9), transform=rotation(0.9, 0.44))],
            effects=[k.shadow("soft")], grow=True, stretch=True,
        )
        k.append(card, await k.text(data.quote, "body", "neutral/900", 320))
        k.append(card, k.shape(
            ShapeKind.RECTANGLE, 48, 2, radius=1, fills=[k.solid("primary/200")], opacity=0.5,
        ))

        avatar = k.shape(
            ShapeKind.ELLIPSE, 32, 32,
            fills=[k.gradient((data.accent, 1), ("accent/400", 1), transform=rotation(0.82, 0.57))],
        )
        info = k.auto_layout(COLUMN, counter_align="MIN", spacing=k.spacing(0))
        k.append(
            info,
            await k.text(data.author, "bodyBold", "neutral/800"),
            await k.text(data.role, "caption", "neutral/500"),
        )
        footer = k.auto_layout(ROW, counter_align="CENTER", spacing=k.spacing(2))
        k.append(card, k.append(footer, avatar, info))

        if data.metric:
            badge = k.auto_layout(
                ROW, counter_align="CENTER", spacing=k.spacing(1),
                padding=(k.spacing(1), k.spacing(2)), radius="pill",
                fills=[k.solid(data.accent)], opacity=0.85,
            )
            k.append(card, k.append(badge, await k.text(data.metric, "captionBold", "neutral/50")))
        return card
