"""Phase constants - single source of truth.

Built-in phase labels and the arithmetic constants used to place custom
phases relative to the launch start.
"""

from enum import StrEnum

SECONDS_PER_DAY = 86400

# Label returned when a page is not phase-aware or has no configuration
NOT_APPLICABLE = ""

DEFAULT_TIME = "000000"


class Phase(StrEnum):
    """Built-in sales phases."""

    PRESALE = "presale"
    SALE = "sale"
    POSTSALE = "postsale"


BUILTIN_PHASES: tuple[str, ...] = tuple(phase.value for phase in Phase)
