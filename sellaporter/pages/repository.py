"""YAML-backed page store.

The document holds a top-level ``pages`` list. Scalars are loaded as plain
strings (``yaml.BaseLoader``) so dates and times reach the normalizer
exactly as the author typed them; ``9:30`` would otherwise be read as a
base-60 integer.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from sellaporter.pages.errors import PageStoreError
from sellaporter.pages.models import Page


class PageRepository:
    """Read-only page store keyed by slug."""

    def __init__(self, pages: list[Page] | None = None) -> None:
        self._pages: dict[str, Page] = {}
        for page in pages or []:
            if page.slug in self._pages:
                raise PageStoreError(f"Duplicate page slug: {page.slug}")
            self._pages[page.slug] = page

    @classmethod
    def from_yaml(cls, text: str) -> PageRepository:
        """Build a repository from a YAML document.

        Raises:
            PageStoreError: If the YAML is malformed or a page is invalid
        """
        try:
            document = yaml.load(text, Loader=yaml.BaseLoader)  # noqa: S506 - BaseLoader builds no objects
        except yaml.YAMLError as e:
            raise PageStoreError(f"Invalid page store YAML: {e}") from e

        if not document:
            return cls()
        if not isinstance(document, dict) or not isinstance(document.get("pages", []), list):
            raise PageStoreError("Page store must be a mapping with a 'pages' list")

        try:
            pages = [Page.model_validate(raw) for raw in document.get("pages", [])]
        except ValidationError as e:
            raise PageStoreError(f"Invalid page in page store: {e}") from e
        return cls(pages)

    @classmethod
    def from_file(cls, path: str | Path) -> PageRepository:
        """Load a repository from a YAML file; a missing file yields an empty store."""
        file_path = Path(path)
        if not file_path.exists():
            logger.warning(f"Page store {file_path} not found; serving no pages")
            return cls()
        logger.info(f"Loading page store from {file_path}")
        repository = cls.from_yaml(file_path.read_text(encoding="utf-8"))
        logger.info(f"Loaded {len(repository)} page(s)")
        return repository

    def __len__(self) -> int:
        return len(self._pages)

    def list_pages(self) -> list[Page]:
        return list(self._pages.values())

    def get_by_slug(self, slug: str) -> Page | None:
        return self._pages.get(slug)
