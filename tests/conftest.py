"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from datetime import UTC, datetime

import pytest
from loguru import logger

from sellaporter.pages.models import Page
from sellaporter.pages.repository import PageRepository
from sellaporter.phases.types import CustomPhaseConfig, LaunchWindowConfig

PAGES_YAML = """
pages:
  - id: 1
    slug: spring-launch
    title: Spring Launch
    template: sellaporter
    custom_fields:
      launch_start_date: 2024-06-01
      launch_start_time: 0:00
      launch_end_date: 2024-06-10
      launch_end_time: 0:00
      launch_phases:
        - phase_name: earlybird
          phase_start_offset: 10
          phase_end_offset: 5
      content_blocks:
        - body: Early access is open.
          visible_phases: [earlybird]
        - body: 'Sale now on! [spButton href="/buy"]Buy[/spButton]'
          visible_phases: [sale]
          embed_html: <iframe></iframe>
        - body: Thanks for a great launch.
          visible_phases: [postsale]
        - body: 'Coming soon. [sp phase="presale, earlybird" inline="true"]Join the list.[/sp]'
          visible_phases: [presale, earlybird]
        - body: Hidden forever
          visible_phases: []
  - id: 2
    slug: about
    title: About
    template: default
"""


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def launch_config() -> LaunchWindowConfig:
    """Launch from 2024-06-01 to 2024-06-10 (UTC) with an earlybird phase 10 -> 5 days before start."""
    return LaunchWindowConfig(
        start_date="2024-06-01",
        start_time="00:00",
        end_date="2024-06-10",
        end_time="00:00",
        phases=[CustomPhaseConfig(name="earlybird", start_offset=10, end_offset=5)],
    )


@pytest.fixture
def page_repository() -> PageRepository:
    return PageRepository.from_yaml(PAGES_YAML)


@pytest.fixture
def launch_page(page_repository: PageRepository) -> Page:
    page = page_repository.get_by_slug("spring-launch")
    assert page is not None
    return page


@pytest.fixture
def fixed_now() -> datetime:
    """Inside the earlybird window."""
    return datetime(2024, 5, 24, 12, 0, tzinfo=UTC)


@pytest.fixture
def client(page_repository: PageRepository, fixed_now: datetime, monkeypatch):
    """TestClient wired to the sample page store and a fixed clock."""
    from fastapi.testclient import TestClient

    from sellaporter.api.dependencies import get_clock, get_page_repository
    from sellaporter.core.settings import settings
    from sellaporter.main import app

    monkeypatch.setattr(settings, "timezone", "UTC")
    monkeypatch.setattr(settings, "query_namespace", "sellaporter")
    app.dependency_overrides[get_page_repository] = lambda: page_repository
    app.dependency_overrides[get_clock] = lambda: (lambda: fixed_now)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def pages_file(tmp_path) -> str:
    """The sample page store written to disk."""
    path = tmp_path / "pages.yaml"
    path.write_text(PAGES_YAML, encoding="utf-8")
    return str(path)
