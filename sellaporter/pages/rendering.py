"""Content block rendering for a resolved phase."""

from __future__ import annotations

from loguru import logger

from sellaporter.pages.models import ContentBlock, Page
from sellaporter.phases.visibility import is_block_visible
from sellaporter.shortcodes.handlers import PhaseShortcodes, wrap_responsive_embed


def render_block(block: ContentBlock, shortcodes: PhaseShortcodes, phase_aware: bool = True) -> str:
    """Render one visible block: shortcodes, typography, paragraphs, then embed."""
    renderer = shortcodes.renderer
    html = renderer.autop(renderer.texturize(shortcodes.processor.do_shortcode(block.body)))
    if block.embed_html:
        html += wrap_responsive_embed(block.embed_html, phase_aware)
    return html


def render_page(page: Page, phase: str, shortcodes: PhaseShortcodes) -> list[str]:
    """Render the blocks of a page that are visible in phase.

    Args:
        page: Page to render
        phase: Resolved phase label for the request
        shortcodes: Shortcode handlers bound to the same request

    Returns:
        Rendered HTML of each visible block, in page order
    """
    if page.custom_fields is None:
        return []

    rendered: list[str] = []
    for index, block in enumerate(page.custom_fields.content_blocks):
        if not block.visible_phases:
            logger.debug(f"Block #{index} on '{page.slug}' has no visible phases; never shown")
            continue
        if not is_block_visible(block.visible_phases, phase):
            continue
        rendered.append(render_block(block, shortcodes, page.is_phase_aware))
    return rendered
