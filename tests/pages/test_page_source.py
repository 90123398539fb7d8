"""Tests for request overrides, the page phase source and block rendering."""

from datetime import UTC, datetime

import pytest

from sellaporter.pages.models import Page
from sellaporter.pages.rendering import render_page
from sellaporter.pages.source import PagePhaseSource, extract_namespaced_args, parse_test_instant
from sellaporter.phases.resolver import PhaseResolver
from sellaporter.shortcodes.handlers import PhaseShortcodes


def test_extract_namespaced_args():
    query = [
        ("sellaporter[phase]", "sale"),
        ("sellaporter.now", "1717200000"),
        ("filter[name]", "spring-launch"),
        ("sellaporter", "ignored"),
    ]

    assert extract_namespaced_args(query) == {"phase": "sale", "now": "1717200000"}


def test_extract_namespaced_args_custom_namespace():
    assert extract_namespaced_args({"sp[phase]": "sale", "sellaporter[phase]": "presale"}, namespace="sp") == {"phase": "sale"}


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1717200000", datetime(2024, 6, 1, tzinfo=UTC)),
        ("2024-06-01T00:00:00Z", datetime(2024, 6, 1, tzinfo=UTC)),
        ("2024-06-01T02:00:00+02:00", datetime(2024, 6, 1, tzinfo=UTC)),
        ("2024-06-01T00:00:00", datetime(2024, 6, 1, tzinfo=UTC)),
    ],
)
def test_parse_test_instant(raw: str, expected: datetime):
    assert parse_test_instant(raw) == expected


def test_parse_test_instant_rejects_garbage(log_messages: list[str]):
    assert parse_test_instant("next tuesday") is None
    assert parse_test_instant("") is None
    assert parse_test_instant(None) is None
    assert any("unparseable test instant" in message for message in log_messages)


class TestPagePhaseSource:
    def test_reads_page_configuration(self, launch_page: Page):
        source = PagePhaseSource(launch_page)

        assert source.is_phase_aware_page() is True
        assert source.get_configured_launch_window().start_date == "2024-06-01"
        assert [phase.name for phase in source.get_configured_custom_phases()] == ["earlybird"]
        assert source.get_override_phase_from_request() is None

    def test_page_without_fields(self):
        source = PagePhaseSource(Page(id=9, slug="bare", template="sellaporter"))

        assert source.get_configured_launch_window() is None
        assert source.get_configured_custom_phases() == []
        assert PhaseResolver(source).resolve_phase() == ""

    def test_request_args(self, launch_page: Page, fixed_now: datetime):
        source = PagePhaseSource(launch_page, {"phase": "vip", "now": "2024-06-05T00:00:00Z"}, clock=lambda: fixed_now)

        assert source.get_override_phase_from_request() == "vip"
        assert source.wall_clock_now() == datetime(2024, 6, 5, tzinfo=UTC)

    def test_clock_used_without_test_instant(self, launch_page: Page, fixed_now: datetime):
        source = PagePhaseSource(launch_page, {"now": "garbage"}, clock=lambda: fixed_now)

        assert source.wall_clock_now() == fixed_now

    @pytest.mark.parametrize(
        ("now", "expected"),
        [
            ("2024-05-01T00:00:00Z", "presale"),
            ("2024-05-24T12:00:00Z", "earlybird"),
            ("2024-06-05T00:00:00Z", "sale"),
            ("2024-06-10T00:00:00Z", "postsale"),
        ],
    )
    def test_resolves_page_phase(self, launch_page: Page, now: str, expected: str):
        assert PhaseResolver(PagePhaseSource(launch_page, {"now": now})).resolve_phase() == expected


class TestRenderPage:
    def _render(self, page: Page, phase: str) -> list[str]:
        shortcodes = PhaseShortcodes(current_phase=lambda: phase)
        shortcodes.register()
        return render_page(page, phase, shortcodes)

    def test_earlybird_blocks(self, launch_page: Page):
        assert self._render(launch_page, "earlybird") == [
            "<p>Early access is open.</p>",
            "<p>Coming soon. Join the list.</p>",
        ]

    def test_presale_shows_teaser_block(self, launch_page: Page):
        assert self._render(launch_page, "presale") == ["<p>Coming soon. Join the list.</p>"]

    def test_sale_block_with_embed(self, launch_page: Page):
        assert self._render(launch_page, "sale") == [
            '<p>Sale now on! <a href="/buy" class="sp-button">Buy</a></p><div class="sp-video__container"><iframe></iframe></div>'
        ]

    def test_block_without_phases_never_renders(self, launch_page: Page):
        for phase in ("presale", "earlybird", "sale", "postsale", ""):
            assert all("Hidden forever" not in html for html in self._render(launch_page, phase))

    def test_page_without_fields(self):
        assert self._render(Page(id=3, slug="empty"), "sale") == []
