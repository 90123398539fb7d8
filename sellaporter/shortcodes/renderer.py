"""Markup renderer interface.

Typographic cleanup and paragraph wrapping belong to the host renderer.
The default implementation leaves text untouched and wraps blank-line
separated paragraphs in ``<p>`` tags.
"""

import re
from typing import Protocol

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


class MarkupRenderer(Protocol):
    def texturize(self, text: str) -> str: ...

    def autop(self, text: str) -> str: ...


class PassThroughRenderer:
    """Minimal renderer used when no host renderer is injected."""

    def texturize(self, text: str) -> str:
        return text

    def autop(self, text: str) -> str:
        paragraphs = [chunk.strip() for chunk in _PARAGRAPH_BREAK.split(text.strip())]
        return "\n".join(f"<p>{paragraph}</p>" for paragraph in paragraphs if paragraph)
