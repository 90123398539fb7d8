"""Page store and per-request page context."""

from sellaporter.pages.errors import PageStoreError
from sellaporter.pages.models import TEMPLATES, ContentBlock, Page, PageFields
from sellaporter.pages.rendering import render_block, render_page
from sellaporter.pages.repository import PageRepository
from sellaporter.pages.source import PagePhaseSource, extract_namespaced_args, parse_test_instant

__all__ = [
    "TEMPLATES",
    "ContentBlock",
    "Page",
    "PageFields",
    "PagePhaseSource",
    "PageRepository",
    "PageStoreError",
    "extract_namespaced_args",
    "parse_test_instant",
    "render_block",
    "render_page",
]
