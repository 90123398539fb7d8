"""Sales phase resolution and visibility.

Deterministic and read-only: given a launch window, custom phases and an
instant, decide the current phase and what content it shows.
"""

from sellaporter.phases.constants import BUILTIN_PHASES, NOT_APPLICABLE, Phase
from sellaporter.phases.datetime_normalizer import to_instant, to_iso8601, utc_offset
from sellaporter.phases.errors import InvalidConfigurationError, SellaporterError
from sellaporter.phases.resolver import PhaseResolver, PhaseSource, resolve_phase
from sellaporter.phases.types import (
    CustomPhase,
    CustomPhaseConfig,
    LaunchWindow,
    LaunchWindowConfig,
    ResolutionContext,
)
from sellaporter.phases.visibility import is_block_visible, parse_phase_list, visibility_choices

__all__ = [
    "BUILTIN_PHASES",
    "NOT_APPLICABLE",
    "CustomPhase",
    "CustomPhaseConfig",
    "InvalidConfigurationError",
    "LaunchWindow",
    "LaunchWindowConfig",
    "Phase",
    "PhaseResolver",
    "PhaseSource",
    "ResolutionContext",
    "SellaporterError",
    "is_block_visible",
    "parse_phase_list",
    "resolve_phase",
    "to_instant",
    "to_iso8601",
    "utc_offset",
    "visibility_choices",
]
