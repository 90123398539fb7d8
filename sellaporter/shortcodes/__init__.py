from sellaporter.shortcodes.handlers import PhaseShortcodes, wrap_responsive_embed
from sellaporter.shortcodes.processor import ShortcodeProcessor, parse_attributes
from sellaporter.shortcodes.renderer import MarkupRenderer, PassThroughRenderer

__all__ = [
    "MarkupRenderer",
    "PassThroughRenderer",
    "PhaseShortcodes",
    "ShortcodeProcessor",
    "parse_attributes",
    "wrap_responsive_embed",
]
