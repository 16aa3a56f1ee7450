"""Hero section — headline copy, highlights, CTAs, product visual and metrics."""

from __future__ import annotations

from typing import List

from refigma.canvas import SceneNode, ShapeKind

from . import anchors
from .primitives import COLUMN, ROW, LayoutKit, rotation, stack
from .section import SectionBuilder

HEADING = "Build a handoff-ready landing hero"
SUBHEADING = (
    "Combine auto layout, tokens and Refigma documentation so developers ship "
    "features without another round of revisions."
)
BADGE_TITLE = "AI Copilot"
BADGE_SUBTITLE = "Layout & documentation automation"
HIGHLIGHTS = (
    "Tokens and styles synced automatically across every platform",
    "Hero, feature and testimonial templates ready for production",
    "QA checklist and developer docs always up to date",
)
PRIMARY_CTA = "Get started"
SECONDARY_CTA = "Read the guide"
ASSURANCE = "Trusted by 120+ product teams across Southeast Asia"

METRICS = (
    ("72%", "Tokens synced in a single click", "primary/500"),
    ("2x", "Faster handoff preparation", "accent/500"),
    ("5 min", "Automatic developer doc updates", "primary/600"),
)

VISUAL_STATS = (
    ("Realtime", "Active sync", "No debt"),
    ("18", "Layouts published", "+4 this week"),
    ("12/12", "QA checklist", "Complete"),
)
SYNC_LOG = (
    ("09:42", "Color tokens updated"),
    ("09:10", "Hero component duplicated"),
)
CHIPS = ("Auto spec links", "Developer access", "Checklist passed")


class HeroSectionBuilder(SectionBuilder):
    """Builds `Section/Hero`."""

    section_name = anchors.SECTION_HERO

    async def build(self) -> SceneNode:
        k = self.kit
        hero = k.auto_layout(
            COLUMN, name=self.section_name, counter_align="MIN", spacing=56,
            padding=(96, 160), radius="lg", stroke="neutral/200",
            fills=[k.gradient(("neutral/50", 1), ("primary/50", 0.92), transform=rotation(0.92, 0.4))],
            effects=[k.shadow("soft")], stretch=True,
        )

        k.append(hero, await k.text("Section/Hero", "captionBold", "accent/500",
                                    name=anchors.HERO_SECTION_LABEL))
        k.append(hero, await self._badge())

        layout = k.auto_layout(
            ROW, counter_align="CENTER", primary_align="SPACE_BETWEEN",
            spacing=64, grow=True, stretch=True,
        )
        k.append(layout, await self._copy_column(), await build_hero_visual(k))
        k.append(hero, layout)

        k.append(hero, await self._metrics_row())
        return hero

    async def _badge(self) -> SceneNode:
        k = self.kit
        badge = k.auto_layout(
            ROW, counter_align="CENTER", spacing=k.spacing(1),
            padding=(k.spacing(1), k.spacing(2)), radius="pill",
            fills=[k.solid("primary/50")], stroke="primary/200",
        )
        return k.append(
            badge,
            await k.text(BADGE_TITLE, "captionBold", "primary/600", name=anchors.HERO_BADGE_TITLE),
            await k.text(BADGE_SUBTITLE, "caption", "primary/600", name=anchors.HERO_BADGE_SUBTITLE),
        )

    async def _copy_column(self) -> SceneNode:
        k = self.kit
        copy = k.auto_layout(COLUMN, counter_align="MIN", spacing=k.spacing(3), grow=True)
        k.append(
            copy,
            await k.text(HEADING, "h1", "neutral/900", 560, name=anchors.HERO_HEADING),
            await k.text(SUBHEADING, "body", "neutral/700", 520, name=anchors.HERO_SUBHEADING),
        )

        highlights = k.auto_layout(COLUMN, spacing=k.spacing(1))
        for index, item in enumerate(HIGHLIGHTS):
            row = k.auto_layout(ROW, name=anchors.hero_highlight(index),
                                counter_align="CENTER", spacing=k.spacing(1))
            k.append(
                row,
                k.marker("primary/500"),
                await k.text(item, "caption", "neutral/600", 480,
                             name=anchors.hero_highlight_text(index)),
            )
            k.append(highlights, row)
        k.append(copy, highlights)

        ctas = k.auto_layout(ROW, counter_align="CENTER", spacing=k.spacing(2))
        k.append(
            ctas,
            await k.button(PRIMARY_CTA, "primary", name=anchors.HERO_CTA_PRIMARY,
                           label_name=anchors.HERO_CTA_PRIMARY_LABEL),
            await k.button(SECONDARY_CTA, "ghost", name=anchors.HERO_CTA_SECONDARY,
                           label_name=anchors.HERO_CTA_SECONDARY_LABEL),
        )
        k.append(copy, ctas)

        assurance = k.auto_layout(ROW, counter_align="CENTER", spacing=k.spacing(1))
        k.append(
            assurance,
            k.dot("accent/500", 10),
            await k.text(ASSURANCE, "caption", "neutral/600", name=anchors.HERO_ASSURANCE),
        )
        return k.append(copy, assurance)

    async def _metrics_row(self) -> SceneNode:
        k = self.kit
        row = k.auto_layout(
            ROW, counter_align="CENTER", primary_align="SPACE_BETWEEN",
            spacing=24, grow=True, stretch=True,
        )
        for index, (value, label, accent) in enumerate(METRICS):
            k.append(row, await self._metric_card(index, value, label, accent))
        return row

    async def _metric_card(self, index: int, value: str, label: str, accent: str) -> SceneNode:
        k = self.kit
        card = k.auto_layout(
            COLUMN, name=anchors.hero_metric(index), counter_align="MIN",
            spacing=k.spacing(0), padding=k.spacing(3), radius="md",
            fills=[k.gradient((accent, 0.16), ("neutral/50", 1), transform=rotation(0.88, 0.47))],
            effects=[k.shadow("soft")], grow=True,
        )
        return k.append(
            card,
            await k.text(value, "h3", accent, name=anchors.hero_metric_value(index)),
            await k.text(label, "caption", "neutral/600", 200, name=anchors.hero_metric_label(index)),
        )


# ----------------------------------------------------------------------
# Decorative product visual (no anchors)
# ----------------------------------------------------------------------


async def build_hero_visual(k: LayoutKit) -> SceneNode:
    visual = k.auto_layout(
        COLUMN, counter_align="MIN", spacing=k.spacing(3), padding=k.spacing(4),
        radius="lg",
        fills=[k.gradient(("primary/500", 0.92), ("accent/500", 0.88), transform=rotation(0.94, 0.34))],
        effects=[k.shadow("medium")], grow=True, stretch=True,
    )
    return k.append(
        visual,
        await _visual_header(k),
        await _visual_board(k),
        await _visual_stats(k),
    )


async def _visual_header(k: LayoutKit) -> SceneNode:
    badge = k.auto_layout(
        ROW, counter_align="CENTER", spacing=k.spacing(1),
        padding=(k.spacing(1), k.spacing(2)), radius="pill",
        fills=[k.solid("neutral/50")], opacity=0.9,
    )
    return k.append(
        badge,
        await k.text("Realtime preview on", "captionBold", "neutral/600"),
        await k.text("Live token sync", "caption", "primary/500"),
    )


async def _visual_board(k: LayoutKit) -> SceneNode:
    board = k.card(
        padding_step=3, radius="lg", spacing=k.spacing(2),
        fills=[k.gradient(("neutral/50", 1), ("primary/50", 0.85), transform=rotation(0.92, 0.38))],
        effects=[k.shadow("soft")], grow=True, stretch=True,
    )
    body = k.auto_layout(COLUMN, counter_align="MIN", spacing=k.spacing(2), grow=True, stretch=True)
    columns = stack(
        k, ROW, [await _board_main_card(k), await _board_sidebar(k)],
        counter_align="CENTER", spacing=k.spacing(2), grow=True, stretch=True,
    )
    k.append(body, columns, await _board_review_row(k))
    return k.append(board, await _board_toolbar(k), body)


async def _board_toolbar(k: LayoutKit) -> SceneNode:
    toolbar = k.auto_layout(
        ROW, counter_align="CENTER", primary_align="SPACE_BETWEEN",
        spacing=k.spacing(2), padding=(k.spacing(1), k.spacing(2)), stretch=True,
    )
    dots = stack(
        k, ROW, [k.dot(token, 8) for token in ("primary/400", "accent/400", "neutral/400")],
        counter_align="CENTER", spacing=k.spacing(0),
    )
    left = stack(
        k, ROW, [dots, await k.text("Refigma Nova board", "captionBold", "neutral/600")],
        counter_align="CENTER", spacing=k.spacing(1),
    )
    status = k.auto_layout(
        ROW, counter_align="CENTER", spacing=k.spacing(1),
        padding=(k.spacing(1), k.spacing(2)), radius="pill",
        fills=[k.solid("neutral/50")], stroke="primary/200",
    )
    k.append(status, await k.text("Autosave on", "captionBold", "primary/600"))
    return k.append(toolbar, left, status)


async def _board_main_card(k: LayoutKit) -> SceneNode:
    card = k.card(padding_step=3, spacing=k.spacing(2), grow=True, stretch=True)
    k.append(
        card,
        await k.text("Hero layout ready for handoff", "bodyBold", "neutral/900", 240),
        await k.text(
            "Desktop, tablet and mobile variants aligned automatically with Refigma tokens.",
            "caption", "neutral/600", 240,
        ),
    )

    track = k.host.create_container()
    track.resize(240, 8)
    k.host.set_style(
        track, corner_radius=4, fills=[k.solid("neutral/200")], stroke_weight=0,
        clips_content=True, layout_align="STRETCH",
    )
    progress = k.shape(
        ShapeKind.RECTANGLE, 172, 8, radius=4,
        fills=[k.gradient(("primary/400", 1), ("accent/500", 1))],
    )
    k.append(card, k.append(track, progress))

    k.append(card, stack(
        k, ROW,
        [await k.text("72% tokens synced", "captionBold", "primary/600"),
         await k.text("7 QA checks done", "caption", "neutral/500")],
        counter_align="CENTER", spacing=k.spacing(1),
    ))

    chips = k.auto_layout(ROW, counter_align="CENTER", spacing=k.spacing(1), stretch=True)
    for chip in CHIPS:
        pill = k.auto_layout(
            ROW, counter_align="CENTER", spacing=k.spacing(0),
            padding=(k.spacing(1), k.spacing(2)), radius="pill", fills=[k.solid("neutral/100")],
        )
        k.append(chips, k.append(pill, await k.text(chip, "captionBold", "neutral/600")))
    return k.append(card, chips)


async def _board_sidebar(k: LayoutKit) -> SceneNode:
    sidebar = k.auto_layout(COLUMN, counter_align="MIN", spacing=k.spacing(2), grow=True, stretch=True)

    sync = k.card(padding_step=2, spacing=k.spacing(1), stretch=True)
    k.append(sync, await k.text("Sync log", "captionBold", "neutral/700"))
    for time, entry in SYNC_LOG:
        k.append(sync, stack(
            k, ROW,
            [await k.text(time, "captionBold", "primary/600"),
             await k.text(entry, "caption", "neutral/600", 160)],
            counter_align="CENTER", spacing=k.spacing(1),
        ))

    pulse = k.card(padding_step=2, spacing=k.spacing(1), stretch=True)
    k.append(
        pulse,
        await k.text("Team pulse", "captionBold", "neutral/700"),
        stack(
            k, COLUMN,
            [await k.text("18 members online", "captionBold", "primary/500"),
             await k.text("New comments in the last 5 minutes", "caption", "neutral/500", 160)],
            counter_align="MIN", spacing=k.spacing(0),
        ),
    )
    return k.append(sidebar, sync, pulse)


async def _board_review_row(k: LayoutKit) -> SceneNode:
    avatars = stack(
        k, ROW,
        [k.dot(token, 24) for token in ("primary/500", "accent/500", "primary/300", "accent/400")],
        counter_align="CENTER", spacing=k.spacing(1),
    )
    return stack(
        k, ROW,
        [avatars, await k.text("Review complete for 4 design teams", "caption", "neutral/600")],
        counter_align="CENTER", primary_align="SPACE_BETWEEN", spacing=k.spacing(2), stretch=True,
    )


async def _visual_stats(k: LayoutKit) -> SceneNode:
    cards: List[SceneNode] = []
    for value, label, hint in VISUAL_STATS:
        card = k.card(padding_step=2, spacing=k.spacing(0), opacity=0.95)
        k.append(
            card,
            await k.text(value, "bodyBold", "primary/500"),
            await k.text(label, "captionBold", "neutral/600"),
            await k.text(hint, "caption", "neutral/500"),
        )
        cards.append(card)
    return stack(k, ROW, cards, counter_align="CENTER", spacing=k.spacing(2), stretch=True)
