"""Page endpoints.

Each page resource carries a ``sellaporter_phase`` field. Phases can be
forced for testing with ``?sellaporter[phase]=PHASE`` and the clock with
``?sellaporter[now]=ISO8601``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from fastapi import APIRouter, Depends
from loguru import logger

from sellaporter.api.dependencies import (
    build_resolver,
    get_clock,
    get_page,
    get_page_repository,
    get_phase_resolver,
    get_phase_shortcodes,
    get_request_args,
)
from sellaporter.api.schemas import PageResponse, RenderResponse, VisibilityChoicesResponse
from sellaporter.pages.models import Page
from sellaporter.pages.rendering import render_page
from sellaporter.pages.repository import PageRepository
from sellaporter.phases.resolver import PhaseResolver
from sellaporter.phases.visibility import visibility_choices
from sellaporter.shortcodes.handlers import PhaseShortcodes

router = APIRouter(prefix="/pages", tags=["pages"])


def _page_response(page: Page, phase: str) -> PageResponse:
    return PageResponse(**page.model_dump(), sellaporter_phase=phase)


@router.get("", response_model=list[PageResponse])
def list_pages(
    repository: PageRepository = Depends(get_page_repository),
    request_args: dict[str, str] = Depends(get_request_args),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> list[PageResponse]:
    """List all pages with their current phase."""
    pages = repository.list_pages()
    logger.info(f"Listing {len(pages)} page(s)")
    return [_page_response(page, build_resolver(page, request_args, clock).resolve_phase()) for page in pages]


@router.get("/{slug}", response_model=PageResponse)
def get_page_with_phase(
    page: Page = Depends(get_page),
    resolver: PhaseResolver = Depends(get_phase_resolver),
) -> PageResponse:
    return _page_response(page, resolver.resolve_phase())


@router.get("/{slug}/render", response_model=RenderResponse)
def render(
    page: Page = Depends(get_page),
    resolver: PhaseResolver = Depends(get_phase_resolver),
    shortcodes: PhaseShortcodes = Depends(get_phase_shortcodes),
) -> RenderResponse:
    """Render the content blocks visible in the current phase."""
    phase = resolver.resolve_phase()
    blocks = render_page(page, phase, shortcodes)
    logger.info(f"Rendered {len(blocks)} block(s) for '{page.slug}' in phase '{phase}'")
    return RenderResponse(slug=page.slug, phase=phase, blocks=blocks)


@router.get("/{slug}/visibility-choices", response_model=VisibilityChoicesResponse)
def get_visibility_choices(page: Page = Depends(get_page)) -> VisibilityChoicesResponse:
    """Phases an author can tag this page's blocks with."""
    phases = page.custom_fields.launch_phases if page.custom_fields else []
    return VisibilityChoicesResponse(slug=page.slug, choices=visibility_choices(phases))
