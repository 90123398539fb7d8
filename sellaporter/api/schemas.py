from pydantic import BaseModel

from sellaporter.pages.models import Page


class PageResponse(Page):
    """Page resource with its current phase."""

    sellaporter_phase: str


class RenderResponse(BaseModel):
    slug: str
    phase: str
    blocks: list[str]


class VisibilityChoicesResponse(BaseModel):
    slug: str
    choices: list[str]
