"""Configuration settings for Smoothstroke."""

import math
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

# "#333333" at full alpha
DEFAULT_COLOR: tuple[float, float, float, float] = (0.2, 0.2, 0.2, 1.0)


class TimingSource(str, Enum):
    """Where the processor reads elapsed time between accepted points."""

    WALL_CLOCK = "wall_clock"
    TIMESTAMPS = "timestamps"


class BrushConfig(BaseModel):
    """Configuration for brush stamps and curve sampling.

    The defaults reproduce the reference look of the brush; changing them
    changes the rendered stroke.
    """

    brush_size: float = Field(
        default=8.0,
        gt=0.0,
        description="Brush diameter in pixels",
    )
    step_size: float = Field(
        default=0.12,
        gt=0.0,
        le=10.0,
        description="Stamp spacing as a fraction of the brush size",
    )
    sharpness: float = Field(
        default=0.73,
        ge=0.0,
        le=1.0,
        description="Edge hardness of each stamp",
    )
    opacity: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Per-stamp opacity multiplied into every color channel",
    )

    @property
    def min_spacing(self) -> float:
        """Minimum distance between two consecutive emitted stamps."""
        return self.step_size * self.brush_size


class ColorConfig(BaseModel):
    """Stroke color.

    Anything that is not a sequence of exactly 4 numbers falls back to the
    default color instead of failing.
    """

    color: tuple[float, float, float, float] = Field(
        default=DEFAULT_COLOR,
        description="RGBA color, channels in [0, 1]",
    )

    @field_validator("color", mode="before")
    @classmethod
    def _sanitize_color(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_COLOR
        if not isinstance(value, (list, tuple)) or len(value) != 4:
            return DEFAULT_COLOR
        if not all(
            isinstance(c, (int, float)) and not isinstance(c, bool) and math.isfinite(c)
            for c in value
        ):
            return DEFAULT_COLOR
        return tuple(float(c) for c in value)


class ReplayConfig(BaseModel):
    """Configuration for replaying recorded strokes."""

    timing: TimingSource = Field(
        default=TimingSource.WALL_CLOCK,
        description="Elapsed-time source for the adaptive movement threshold",
    )
    realtime: bool = Field(
        default=False,
        description="Pace replay by the recorded timestamps",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SmoothStrokeSettings(BaseModel):
    """Main application settings."""

    brush: BrushConfig = Field(default_factory=BrushConfig)
    color: ColorConfig = Field(default_factory=ColorConfig)
    replay: ReplayConfig = Field(default_factory=ReplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SmoothStrokeSettings:
    """Get default application settings."""
    return SmoothStrokeSettings()
