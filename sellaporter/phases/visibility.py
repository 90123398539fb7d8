"""Phase-based visibility policy for content blocks and inline text."""

from collections.abc import Iterable

from sellaporter.phases.constants import BUILTIN_PHASES
from sellaporter.phases.resolver import coerce_custom_phases
from sellaporter.phases.types import CustomPhaseConfig

NO_PHASE_WARNING = "<strong>No phase set. Was this on purpose?</strong>"


def parse_phase_list(raw: str | None) -> list[str]:
    """Split a comma-separated phase attribute into trimmed labels.

    Blank entries are dropped, so "" and None both yield an empty list.
    """
    if not raw:
        return []
    return [entry.strip() for entry in raw.split(",") if entry.strip()]


def is_block_visible(declared_phases: Iterable[str] | None, current_phase: str) -> bool:
    """Check whether a block tagged with declared_phases shows in current_phase.

    A block that declares no phases is never visible. Matching is exact and
    case-sensitive.
    """
    if not declared_phases:
        return False
    return current_phase in set(declared_phases)


def visibility_choices(phases: list[CustomPhaseConfig]) -> list[str]:
    """List the phases an author can tag a block with.

    Built-in phases come first, then custom phase names in declaration
    order without duplicates.
    """
    choices = list(BUILTIN_PHASES)
    for custom in coerce_custom_phases(phases):
        if custom.name not in choices:
            choices.append(custom.name)
    return choices
