"""Content application engine — writes a ContentPayload onto a built landing tree.

Nodes are located by exact anchor name and kind with a full-tree scan on every
lookup; nothing is cached between calls. A missing anchor is skipped silently.

Mutation rules:
- single fields: set when the value is not None, otherwise leave the text as is
- highlight / bullet rows: set and show when an item exists, otherwise hide
- metric cards: never hidden, value and label are set only when provided
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from refigma import settings
from refigma.builder import anchors
from refigma.canvas import MIXED, CanvasHost, NodeKind, SceneNode
from refigma.tokens import FontName

from .payload import ContentPayload, CTAContent, HeroContent, MetricContent, TestimonialContent

logger = logging.getLogger(__name__)


@dataclass
class ApplyReport:
    """What a single apply() call touched."""

    applied: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    shown_rows: List[str] = field(default_factory=list)
    hidden_rows: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "applied": self.applied,
            "missing": self.missing,
            "shown_rows": self.shown_rows,
            "hidden_rows": self.hidden_rows,
        }


class ContentApplicationEngine:
    """Applies generated copy to the anchors of a landing tree."""

    def __init__(self, host: CanvasHost, max_rows: int = settings.CONTENT_MAX_ROWS):
        self.host = host
        self.max_rows = max_rows

    async def apply(self, root: SceneNode, payload: ContentPayload) -> ApplyReport:
        report = ApplyReport()
        await self._apply_hero(root, payload.hero or HeroContent(), report)
        await self._apply_metrics(root, payload.metrics or [], report)
        await self._apply_testimonial(root, payload.testimonial or TestimonialContent(), report)
        await self._apply_cta(root, payload.cta or CTAContent(), report)
        logger.info(
            "Applied content to %s: %d fields, %d rows shown, %d rows hidden, %d anchors missing",
            root.name, len(report.applied), len(report.shown_rows),
            len(report.hidden_rows), len(report.missing),
        )
        return report

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    async def _apply_hero(self, root: SceneNode, hero: HeroContent, report: ApplyReport) -> None:
        await self._set_field(root, anchors.HERO_HEADING, hero.title, report)
        await self._set_field(root, anchors.HERO_SUBHEADING, hero.subtitle, report)
        await self._set_field(root, anchors.HERO_CTA_PRIMARY_LABEL, hero.primary_cta, report)
        await self._set_field(root, anchors.HERO_CTA_SECONDARY_LABEL, hero.secondary_cta, report)
        await self._set_field(root, anchors.HERO_ASSURANCE, hero.assurance, report)
        await self._apply_rows(
            root, hero.highlights or [], anchors.hero_highlight, anchors.hero_highlight_text, report,
        )

    async def _apply_metrics(
        self, root: SceneNode, metrics: Sequence[Optional[MetricContent]], report: ApplyReport
    ) -> None:
        for index in range(self.max_rows):
            metric = metrics[index] if index < len(metrics) else None
            await self._set_field(
                root, anchors.hero_metric_value(index), metric.value if metric else None, report,
            )
            await self._set_field(
                root, anchors.hero_metric_label(index), metric.label if metric else None, report,
            )

    async def _apply_testimonial(
        self, root: SceneNode, testimonial: TestimonialContent, report: ApplyReport
    ) -> None:
        await self._set_field(root, anchors.TESTIMONIAL_HEADING, testimonial.heading, report)
        await self._set_field(root, anchors.TESTIMONIAL_SUBTITLE, testimonial.subtitle, report)
        await self._set_field(root, anchors.TESTIMONIAL_QUOTE, testimonial.quote, report)
        await self._set_field(root, anchors.TESTIMONIAL_ATTRIBUTION, testimonial.attribution, report)
        await self._set_field(
            root, anchors.TESTIMONIAL_ATTRIBUTION_ROLE, testimonial.attribution_role, report,
        )
        await self._set_field(root, anchors.TESTIMONIAL_CALLOUT, testimonial.callout, report)
        await self._apply_rows(
            root, testimonial.bullets or [], anchors.testimonial_bullet,
            anchors.testimonial_bullet_text, report,
        )

    async def _apply_cta(self, root: SceneNode, cta: CTAContent, report: ApplyReport) -> None:
        await self._set_field(root, anchors.CTA_HEADING, cta.title, report)
        await self._set_field(root, anchors.CTA_BODY, cta.subtitle, report)
        await self._set_field(root, anchors.CTA_PRIMARY_LABEL, cta.primary_cta, report)
        await self._set_field(root, anchors.CTA_SECONDARY_LABEL, cta.secondary_cta, report)

    async def _apply_rows(
        self,
        root: SceneNode,
        items: Sequence[Optional[str]],
        row_name,
        text_name,
        report: ApplyReport,
    ) -> None:
        """Fill up to max_rows rows; rows without an item are hidden."""
        for index in range(self.max_rows):
            item = items[index] if index < len(items) else None
            text_node = self.find_text(root, text_name(index))
            row = self.find_container(root, row_name(index))
            if item and text_node is not None:
                await self.set_text(text_node, item)
                report.applied.append(text_node.name)
                if row is not None:
                    self.host.set_style(row, visible=True)
                    report.shown_rows.append(row.name)
            elif row is not None:
                self.host.set_style(row, visible=False)
                report.hidden_rows.append(row.name)
            else:
                report.missing.append(row_name(index))

    async def _set_field(
        self, root: SceneNode, name: str, value: Optional[str], report: ApplyReport
    ) -> None:
        if value is None:
            return
        node = self.find_text(root, name)
        if node is None:
            logger.debug("Anchor %s not found; skipping", name)
            report.missing.append(name)
            return
        await self.set_text(node, value)
        report.applied.append(name)

    # ------------------------------------------------------------------
    # Lookup and mutation
    # ------------------------------------------------------------------

    def find_text(self, root: SceneNode, name: str) -> Optional[SceneNode]:
        return self.host.find_descendant(
            root, lambda node: node.kind is NodeKind.TEXT and node.name == name
        )

    def find_container(self, root: SceneNode, name: str) -> Optional[SceneNode]:
        return self.host.find_descendant(
            root, lambda node: node.kind is NodeKind.CONTAINER and node.name == name
        )

    async def set_text(self, node: SceneNode, value: str) -> None:
        """Load every font the node currently uses, then replace its text."""
        for font in self.fonts_in_use(node):
            await self.host.load_font(font)
        self.host.set_style(node, characters=value)

    @staticmethod
    def fonts_in_use(node: SceneNode) -> List[FontName]:
        """Distinct fonts of the node's runs, in reading order."""
        if node.font_name is not MIXED:
            return [node.font_name] if node.font_name else []
        fonts: List[FontName] = []
        for run in node.font_runs():
            if run.font not in fonts:
                fonts.append(run.font)
        return fonts
