"""Page models.

Field names follow the custom-field names authors edit
(``launch_start_date``, ``launch_phases``, ``visible_phases``...).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from sellaporter.phases.types import CustomPhaseConfig, LaunchWindowConfig

# Template key -> label of the templates that make a page phase-aware
TEMPLATES: dict[str, str] = {
    "sellaporter": "Sellaporter Time-Aware Page",
}


def _none_to_list(value: Any) -> Any:
    if value is None or value == "":
        return []
    return value


class ContentBlock(BaseModel):
    """A content block shown only in the phases it declares.

    Attributes:
        body: Block text; shortcodes are expanded when rendered
        visible_phases: Phases during which the block is shown. If no phase
            is selected the block is never visible.
        embed_html: Optional embed markup rendered after the body
    """

    body: str = ""
    visible_phases: list[str] = Field(default_factory=list)
    embed_html: str | None = None

    @field_validator("visible_phases", mode="before")
    @classmethod
    def validate_visible_phases(cls, value: Any) -> Any:
        return _none_to_list(value)


class PageFields(BaseModel):
    launch_start_date: str | None = None
    launch_start_time: str | None = None
    launch_end_date: str | None = None
    launch_end_time: str | None = None
    launch_phases: list[CustomPhaseConfig] = Field(default_factory=list)
    content_blocks: list[ContentBlock] = Field(default_factory=list)

    @field_validator("launch_phases", "content_blocks", mode="before")
    @classmethod
    def validate_lists(cls, value: Any) -> Any:
        return _none_to_list(value)

    def launch_window(self) -> LaunchWindowConfig:
        """Raw launch window without the custom phases."""
        return LaunchWindowConfig(
            start_date=self.launch_start_date,
            start_time=self.launch_start_time,
            end_date=self.launch_end_date,
            end_time=self.launch_end_time,
        )


class Page(BaseModel):
    id: int
    slug: str
    title: str = ""
    template: str | None = None
    custom_fields: PageFields | None = None

    @field_validator("custom_fields", mode="before")
    @classmethod
    def validate_custom_fields(cls, value: Any) -> Any:
        return None if value == "" else value

    @property
    def is_phase_aware(self) -> bool:
        return self.template in TEMPLATES
