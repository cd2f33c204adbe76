"""Generator configuration.

GeneratorConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from enum import Enum


class UpdateAction(Enum):
    """What a reactive binding asks the navigator to do with a new URL."""

    NAVIGATE = "navigate"
    STATE_ONLY = "state-only"


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """URL generator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = GeneratorConfig(error_url="/oops", update_delay=0.25)
    """

    # Fallback address for failed generation (used verbatim, never validated)
    error_url: str = "/error"
    error_message: str = "Error generating URL"

    # Reactive binding defaults
    update_delay: float = 0.0  # seconds
    update_action: UpdateAction = UpdateAction.NAVIGATE

    def __post_init__(self) -> None:
        if self.update_delay < 0:
            msg = f"update_delay must be >= 0, got {self.update_delay}"
            raise ValueError(msg)
