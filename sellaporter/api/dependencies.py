"""FastAPI dependencies for page requests.

FastAPI caches dependencies per request, so the PhaseResolver built here is
shared by everything that renders the same page in one request and the
phase is computed at most once.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from functools import lru_cache

from fastapi import Depends, HTTPException, Request
from loguru import logger

from sellaporter.core.settings import settings
from sellaporter.pages.models import Page
from sellaporter.pages.repository import PageRepository
from sellaporter.pages.source import PagePhaseSource, extract_namespaced_args
from sellaporter.phases.resolver import PhaseResolver
from sellaporter.shortcodes.handlers import PhaseShortcodes


@lru_cache(maxsize=1)
def get_page_repository() -> PageRepository:
    """Page store loaded once per process from SELLAPORTER_PAGES_FILE."""
    return PageRepository.from_file(settings.pages_file)


def get_clock() -> Callable[[], datetime]:
    return lambda: datetime.now(timezone.utc)


def get_request_args(request: Request) -> dict[str, str]:
    """Namespaced override args (``sellaporter[phase]``, ``sellaporter[now]``)."""
    args = extract_namespaced_args(request.query_params.multi_items(), settings.query_namespace)
    if args:
        logger.debug(f"Request overrides for {request.url.path}: {args}")
    return args


def build_resolver(page: Page, request_args: dict[str, str], clock: Callable[[], datetime]) -> PhaseResolver:
    return PhaseResolver(PagePhaseSource(page, request_args, clock), tz_name=settings.timezone)


def get_page(slug: str, repository: PageRepository = Depends(get_page_repository)) -> Page:
    """Look up a page by slug.

    Raises:
        HTTPException: If no page has this slug
    """
    page = repository.get_by_slug(slug)
    if page is None:
        logger.warning(f"Page not found: {slug}")
        raise HTTPException(status_code=404, detail=f"Page '{slug}' not found")
    return page


def get_phase_resolver(
    page: Page = Depends(get_page),
    request_args: dict[str, str] = Depends(get_request_args),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> PhaseResolver:
    return build_resolver(page, request_args, clock)


def get_phase_shortcodes(resolver: PhaseResolver = Depends(get_phase_resolver)) -> PhaseShortcodes:
    shortcodes = PhaseShortcodes(current_phase=resolver.resolve_phase)
    shortcodes.register()
    return shortcodes
