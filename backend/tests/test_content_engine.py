"""Tests for refigma.content (payload model and ContentApplicationEngine).

Covers:
- ContentPayload leniency: optional fields, aliases, unknown keys, numbers
- Single fields: set when provided, untouched when omitted
- Repeatable rows: shown with text when present, hidden otherwise
- Metrics: never hidden, partial updates keep earlier text
- Font loading for uniform and mixed-font text nodes
- Anchor misses are silent
- Wrong-shaped provider fields are dropped without blocking the rest
"""

from __future__ import annotations

import pytest

from refigma.builder import anchors
from refigma.canvas import FontNotLoadedError, InMemoryCanvas, NodeKind
from refigma.content import ContentApplicationEngine, ContentPayload
from refigma.tokens import FontName

BOLD = FontName("Inter", "Bold")
REGULAR = FontName("Inter", "Regular")
ITALIC = FontName("Inter", "Italic")


def _named(root, name):
    return root.find_one(lambda n: n.name == name)


def _text(root, name):
    return _named(root, name).characters


@pytest.fixture
def engine(host):
    return ContentApplicationEngine(host)


# ---------------------------------------------------------------------------
# Payload model
# ---------------------------------------------------------------------------


class TestContentPayload:

    def test_empty_object_is_valid(self):
        payload = ContentPayload.model_validate({})
        assert payload.hero is None
        assert payload.metrics is None

    def test_camel_case_aliases(self, sample_payload):
        payload = ContentPayload.model_validate(sample_payload)
        assert payload.hero.primary_cta == "Order now"
        assert payload.testimonial.attribution_role == "Customer since 2010"
        assert payload.cta.secondary_cta == "Call us"

    def test_unknown_keys_ignored(self):
        payload = ContentPayload.model_validate({
            "hero": {"title": "T", "emoji": "🍞"},
            "footer": {"links": []},
        })
        assert payload.hero.title == "T"
        assert not hasattr(payload, "footer")

    def test_numbers_coerced_to_text(self):
        payload = ContentPayload.model_validate({"metrics": [{"value": 72, "label": "Percent"}]})
        assert payload.metrics[0].value == "72"

    def test_null_list_items_allowed(self):
        payload = ContentPayload.model_validate({"hero": {"highlights": ["A", None]}, "metrics": [None]})
        assert payload.hero.highlights == ["A", None]
        assert payload.metrics == [None]

    def test_non_list_rows_read_as_empty(self):
        payload = ContentPayload.model_validate({
            "hero": {"title": "Fresh Bread", "highlights": "just one"},
            "testimonial": {"bullets": {"a": 1}},
            "metrics": "72%",
        })
        assert payload.hero.title == "Fresh Bread"
        assert payload.hero.highlights == []
        assert payload.testimonial.bullets == []
        assert payload.metrics == []

    def test_wrong_typed_items_and_fields_dropped(self):
        payload = ContentPayload.model_validate({
            "hero": {"title": ["x"], "highlights": ["A", {"text": "B"}, 3]},
            "metrics": ["72%", {"value": "9", "label": {"x": 1}}],
            "cta": "Order now",
        })
        assert payload.hero.title is None
        assert payload.hero.highlights == ["A", None, "3"]
        assert payload.metrics[0] is None
        assert payload.metrics[1].value == "9"
        assert payload.metrics[1].label is None
        assert payload.cta is None


# ---------------------------------------------------------------------------
# Single fields
# ---------------------------------------------------------------------------


class TestSingleFields:

    @pytest.mark.asyncio
    async def test_full_payload_sets_every_field(self, engine, landing, sample_payload):
        report = await engine.apply(landing, ContentPayload.model_validate(sample_payload))

        assert _text(landing, anchors.HERO_HEADING) == "Fresh bread every morning"
        assert _text(landing, anchors.HERO_SUBHEADING).startswith("A neighbourhood bakery")
        assert _text(landing, anchors.HERO_CTA_PRIMARY_LABEL) == "Order now"
        assert _text(landing, anchors.HERO_CTA_SECONDARY_LABEL) == "See the menu"
        assert _text(landing, anchors.HERO_ASSURANCE) == "Loved by 2,000 regulars"
        assert _text(landing, anchors.TESTIMONIAL_HEADING) == "What our regulars say"
        assert _text(landing, anchors.TESTIMONIAL_QUOTE) == '"The best croissant in town."'
        assert _text(landing, anchors.TESTIMONIAL_ATTRIBUTION_ROLE) == "Customer since 2010"
        assert _text(landing, anchors.TESTIMONIAL_CALLOUT) == "Rated 4.9/5"
        assert _text(landing, anchors.CTA_HEADING) == "Come by today"
        assert _text(landing, anchors.CTA_BODY) == "Open every day from 6am."
        assert _text(landing, anchors.CTA_PRIMARY_LABEL) == "Get directions"
        assert _text(landing, anchors.CTA_SECONDARY_LABEL) == "Call us"
        assert report.missing == []

    @pytest.mark.asyncio
    async def test_omitted_fields_untouched(self, engine, landing):
        before = _text(landing, anchors.HERO_SUBHEADING)
        await engine.apply(landing, ContentPayload.model_validate({"hero": {"title": "Only title"}}))

        assert _text(landing, anchors.HERO_HEADING) == "Only title"
        assert _text(landing, anchors.HERO_SUBHEADING) == before
        assert _text(landing, anchors.CTA_HEADING) == "Ready to keep your design consistent?"

    @pytest.mark.asyncio
    async def test_empty_string_is_applied(self, engine, landing):
        await engine.apply(landing, ContentPayload.model_validate({"cta": {"subtitle": ""}}))
        assert _text(landing, anchors.CTA_BODY) == ""

    @pytest.mark.asyncio
    async def test_text_keeps_its_font(self, engine, landing):
        await engine.apply(landing, ContentPayload.model_validate({"hero": {"title": "New"}}))
        assert _named(landing, anchors.HERO_HEADING).font_name == BOLD

    @pytest.mark.asyncio
    async def test_missing_anchor_is_silent(self, engine, landing):
        heading = _named(landing, anchors.CTA_HEADING)
        heading.name = "CTA:Renamed"

        report = await engine.apply(landing, ContentPayload.model_validate({"cta": {"title": "X"}}))

        assert heading.characters != "X"
        assert anchors.CTA_HEADING in report.missing

    @pytest.mark.asyncio
    async def test_lookup_matches_kind(self, engine, host, landing):
        # A container carrying a text anchor name is not a match
        decoy = host.create_container()
        decoy.name = anchors.HERO_HEADING
        host.append_child(landing, decoy)
        landing.children.insert(0, landing.children.pop())

        await engine.apply(landing, ContentPayload.model_validate({"hero": {"title": "Real"}}))

        heading = landing.find_one(
            lambda n: n.name == anchors.HERO_HEADING and n.kind is NodeKind.TEXT
        )
        assert heading.characters == "Real"


# ---------------------------------------------------------------------------
# Repeatable rows
# ---------------------------------------------------------------------------


class TestRepeatableRows:

    @pytest.mark.asyncio
    async def test_two_highlights_hide_third_row(self, engine, landing):
        await engine.apply(landing, ContentPayload.model_validate({"hero": {"highlights": ["A", "B"]}}))

        assert _text(landing, anchors.hero_highlight_text(0)) == "A"
        assert _text(landing, anchors.hero_highlight_text(1)) == "B"
        assert _named(landing, anchors.hero_highlight(0)).visible
        assert _named(landing, anchors.hero_highlight(1)).visible
        assert not _named(landing, anchors.hero_highlight(2)).visible

    @pytest.mark.asyncio
    async def test_empty_items_hide_rows(self, engine, landing):
        await engine.apply(
            landing, ContentPayload.model_validate({"testimonial": {"bullets": ["", None, "C"]}}),
        )

        assert not _named(landing, anchors.testimonial_bullet(0)).visible
        assert not _named(landing, anchors.testimonial_bullet(1)).visible
        assert _named(landing, anchors.testimonial_bullet(2)).visible
        assert _text(landing, anchors.testimonial_bullet_text(2)) == "C"

    @pytest.mark.asyncio
    async def test_missing_section_hides_all_rows(self, engine, landing):
        report = await engine.apply(landing, ContentPayload.model_validate({}))

        for i in range(3):
            assert not _named(landing, anchors.hero_highlight(i)).visible
            assert not _named(landing, anchors.testimonial_bullet(i)).visible
        assert len(report.hidden_rows) == 6

    @pytest.mark.asyncio
    async def test_extra_items_ignored(self, engine, landing):
        await engine.apply(
            landing, ContentPayload.model_validate({"hero": {"highlights": ["1", "2", "3", "4"]}}),
        )
        assert [_text(landing, anchors.hero_highlight_text(i)) for i in range(3)] == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_hidden_row_shown_again(self, engine, landing):
        await engine.apply(landing, ContentPayload.model_validate({"hero": {"highlights": []}}))
        assert not _named(landing, anchors.hero_highlight(0)).visible

        await engine.apply(landing, ContentPayload.model_validate({"hero": {"highlights": ["Back"]}}))
        assert _named(landing, anchors.hero_highlight(0)).visible
        assert _text(landing, anchors.hero_highlight_text(0)) == "Back"


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------


class TestMetrics:

    @pytest.mark.asyncio
    async def test_partial_metrics_keep_prior_text(self, engine, landing):
        label0 = _text(landing, anchors.hero_metric_label(0))
        prior = [
            (_text(landing, anchors.hero_metric_value(i)), _text(landing, anchors.hero_metric_label(i)))
            for i in (1, 2)
        ]

        await engine.apply(landing, ContentPayload.model_validate({"metrics": [{"value": "72%"}]}))

        assert _text(landing, anchors.hero_metric_value(0)) == "72%"
        assert _text(landing, anchors.hero_metric_label(0)) == label0
        assert [
            (_text(landing, anchors.hero_metric_value(i)), _text(landing, anchors.hero_metric_label(i)))
            for i in (1, 2)
        ] == prior
        assert all(_named(landing, anchors.hero_metric(i)).visible for i in range(3))

    @pytest.mark.asyncio
    async def test_no_metrics_never_hides(self, engine, landing):
        await engine.apply(landing, ContentPayload.model_validate({"metrics": []}))
        assert all(_named(landing, anchors.hero_metric(i)).visible for i in range(3))


# ---------------------------------------------------------------------------
# Font loading
# ---------------------------------------------------------------------------


class TestFontLoading:

    @pytest.mark.asyncio
    async def test_uniform_font_loaded_once(self, host):
        node = host.create_text()
        node.font_name = BOLD
        node.characters = "Hello"

        engine = ContentApplicationEngine(host)
        await engine.set_text(node, "Bye")

        assert host.font_load_log == [BOLD]
        assert node.characters == "Bye"

    @pytest.mark.asyncio
    async def test_mixed_font_loads_each_distinct_run_font(self, host):
        node = host.create_text()
        node.font_name = REGULAR
        node.characters = "Hello brave world"
        node.set_range_font_name(6, 11, BOLD)
        node.set_range_font_name(12, 17, ITALIC)
        node.set_range_font_name(0, 5, BOLD)

        engine = ContentApplicationEngine(host)
        assert engine.fonts_in_use(node) == [BOLD, REGULAR, ITALIC]

        await engine.set_text(node, "Replaced")

        assert host.font_load_log == [BOLD, REGULAR, ITALIC]
        assert node.characters == "Replaced"

    @pytest.mark.asyncio
    async def test_mixed_anchor_in_landing(self, engine, host, landing):
        quote = _named(landing, anchors.TESTIMONIAL_QUOTE)
        quote.set_range_font_name(0, 1, ITALIC)
        host.font_load_log.clear()

        await engine.apply(landing, ContentPayload.model_validate({"testimonial": {"quote": "New quote"}}))

        assert ITALIC in host.font_load_log
        assert quote.characters == "New quote"

    @pytest.mark.asyncio
    async def test_mutation_without_engine_loading_fails(self):
        # The host refuses text changes whose fonts were never loaded
        host = InMemoryCanvas()
        node = host.create_text()
        node.font_name = BOLD
        node.characters = "x"
        with pytest.raises(FontNotLoadedError):
            host.set_style(node, characters="y")


# ---------------------------------------------------------------------------
# Loosely shaped provider content
# ---------------------------------------------------------------------------


class TestLooselyShapedContent:

    @pytest.mark.asyncio
    async def test_bad_fields_do_not_block_the_rest(self, engine, landing):
        metric_value = _text(landing, anchors.hero_metric_value(0))
        payload = ContentPayload.model_validate({
            "hero": {"title": "Fresh Bread", "highlights": "just one"},
            "metrics": ["72%"],
            "cta": {"title": "Order now"},
        })

        await engine.apply(landing, payload)

        assert _text(landing, anchors.HERO_HEADING) == "Fresh Bread"
        assert _text(landing, anchors.CTA_HEADING) == "Order now"
        assert _text(landing, anchors.hero_metric_value(0)) == metric_value
        assert all(not _named(landing, anchors.hero_highlight(i)).visible for i in range(3))
