"""Sellaporter shortcodes.

- ``[sp phase="sale, postsale" inline="true"]...[/sp]`` shows its content
  only during the listed phases
- ``[spButton href="..." action="popover"]Label[/spButton]`` renders a call
  to action link
- ``[spNotice]...[/spNotice]`` renders small print
"""

from __future__ import annotations

from collections.abc import Callable
from html import escape

from loguru import logger

from sellaporter.phases.visibility import NO_PHASE_WARNING, is_block_visible, parse_phase_list
from sellaporter.shortcodes.processor import ShortcodeProcessor, is_truthy
from sellaporter.shortcodes.renderer import MarkupRenderer, PassThroughRenderer

NO_LINK_HREF = "#no-link-supplied"


class PhaseShortcodes:
    """Shortcode handlers bound to one request's phase.

    Args:
        current_phase: Callable returning the request's phase label
        processor: Processor the handlers are registered on; nested
            shortcodes inside ``[sp]`` are expanded with it
        renderer: Host markup renderer
    """

    def __init__(
        self,
        current_phase: Callable[[], str],
        processor: ShortcodeProcessor | None = None,
        renderer: MarkupRenderer | None = None,
    ) -> None:
        self._current_phase = current_phase
        self.processor = processor or ShortcodeProcessor()
        self.renderer = renderer or PassThroughRenderer()

    def register(self) -> ShortcodeProcessor:
        self.processor.add_shortcode("sp", self.phase_conditional)
        self.processor.add_shortcode("spButton", self.cta_button)
        self.processor.add_shortcode("spNotice", self.notice)
        return self.processor

    def phase_conditional(self, attrs: dict[str, str], content: str) -> str:
        """Render content only when the current phase is listed in ``phase``.

        Without a ``phase`` attribute nothing can match, so the author
        warning is returned in place of the content. The content is
        deliberately dropped rather than followed by the warning, so a
        block with no phase is never visible.
        """
        phases = parse_phase_list(attrs.get("phase"))
        if not phases:
            logger.warning("[sp] shortcode has no phase attribute; its content will never be visible")
            return NO_PHASE_WARNING

        if not is_block_visible(phases, self._current_phase()):
            return ""

        text = self.renderer.texturize(self.processor.do_shortcode(content))
        if is_truthy(attrs.get("inline")):
            return text
        return self.renderer.autop(text)

    def cta_button(self, attrs: dict[str, str], content: str) -> str:
        href = attrs.get("href") or NO_LINK_HREF
        classes = ["sp-button"]
        if attrs.get("action") == "popover":
            classes.append("sp-button--popover")
            href = "#"
        return f'<a href="{escape(href, quote=True)}" class="{" ".join(classes)}">{content}</a>'

    def notice(self, attrs: dict[str, str], content: str) -> str:
        return f'<small class="sp-text--notice">{content}</small>'


def wrap_responsive_embed(html: str, phase_aware: bool) -> str:
    """Wrap embed markup in a responsive container on phase-aware pages."""
    if not phase_aware:
        return html
    return f'<div class="sp-video__container">{html}</div>' if html else ""
