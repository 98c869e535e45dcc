from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from .constants import DEFAULT_CONFIG
from .errors import ConfigurationError


class NewlineMode(str, Enum):
    """How the normalizer treats line breaks."""

    strip = "strip"
    space = "space"


@dataclass(frozen=True)
class PipelineConfig:
    """User-facing configuration for the end-to-end pipeline.

    Keep this frozen+hashable so overrides go through dataclasses.replace().
    Defaults come from constants.DEFAULT_CONFIG.
    """

    limit: int = DEFAULT_CONFIG["limit"]

    # Normalizer behavior
    newlines: Literal["strip", "space"] | NewlineMode = DEFAULT_CONFIG["newlines"]

    # Behavior toggles
    return_trace: bool = DEFAULT_CONFIG["return_trace"]

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ConfigurationError(
                f"limit must be a positive integer, got {self.limit}"
            )
        try:
            mode = NewlineMode(self.newlines)
        except ValueError as exc:
            raise ConfigurationError(
                f"newlines must be 'strip' or 'space', got {self.newlines!r}"
            ) from exc
        # newlines is always stored as the plain string value
        object.__setattr__(self, "newlines", mode.value)
