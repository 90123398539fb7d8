"""Shortcode parsing and expansion.

Supports the enclosing form ``[tag key="value"]content[/tag]`` and the
self-closing form ``[tag key="value"]``. Attribute values may be double
quoted, single quoted or bare. Attribute names are lower-cased.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from loguru import logger

ShortcodeHandler = Callable[[dict[str, str], str], str]

_ATTRIBUTE = re.compile(r"""([\w-]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s'"\]]+))""")


def parse_attributes(raw: str) -> dict[str, str]:
    """Parse a shortcode attribute string into a dict.

    Args:
        raw: Text between the tag name and the closing bracket

    Returns:
        Mapping of lower-cased attribute names to values
    """
    attrs: dict[str, str] = {}
    for match in _ATTRIBUTE.finditer(raw):
        name, double, single, bare = match.groups()
        value = next((v for v in (double, single, bare) if v is not None), "")
        attrs[name.lower()] = value
    return attrs


def is_truthy(value: str | None) -> bool:
    """Interpret a shortcode flag attribute ("true", "1", "yes", "on")."""
    if value is None:
        return False
    return value.strip().lower() in {"true", "1", "yes", "on"}


class ShortcodeProcessor:
    """Registry of shortcode handlers and the text expander that calls them."""

    def __init__(self) -> None:
        self._handlers: dict[str, ShortcodeHandler] = {}
        self._pattern: re.Pattern[str] | None = None

    def add_shortcode(self, tag: str, handler: ShortcodeHandler) -> None:
        if not re.fullmatch(r"[\w-]+", tag):
            raise ValueError(f"Invalid shortcode tag: {tag!r}")
        self._handlers[tag] = handler
        self._pattern = None
        logger.debug(f"Registered shortcode [{tag}]")

    def has_shortcode(self, tag: str) -> bool:
        return tag in self._handlers

    @property
    def tags(self) -> list[str]:
        return list(self._handlers)

    def _compiled(self) -> re.Pattern[str]:
        if self._pattern is None:
            # Longest first so [spButton] is not taken for [sp]
            names = "|".join(re.escape(tag) for tag in sorted(self._handlers, key=len, reverse=True))
            self._pattern = re.compile(
                rf"\[(?P<tag>{names})(?![\w-])(?P<attrs>[^\]]*)\](?:(?P<content>.*?)\[/(?P=tag)\])?",
                re.DOTALL,
            )
        return self._pattern

    def _expand(self, match: re.Match[str]) -> str:
        tag = match.group("tag")
        attrs = parse_attributes(match.group("attrs"))
        return self._handlers[tag](attrs, match.group("content") or "")

    def do_shortcode(self, text: str) -> str:
        """Expand every registered shortcode in text."""
        if not self._handlers or "[" not in text:
            return text
        return self._compiled().sub(self._expand, text)
