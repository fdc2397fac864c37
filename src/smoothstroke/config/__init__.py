"""Configuration management for smoothstroke.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BrushConfig: Brush stamp and sampling settings
- ColorConfig: Stroke color with sanitizing fallback
- ReplayConfig: Stroke replay settings
- LoggingConfig: Logging settings
- SmoothStrokeSettings: Main application settings
"""

from smoothstroke.config.settings import (
    DEFAULT_COLOR,
    BrushConfig,
    ColorConfig,
    LoggingConfig,
    ReplayConfig,
    SmoothStrokeSettings,
    TimingSource,
    get_default_settings,
)

__all__ = [
    "DEFAULT_COLOR",
    "BrushConfig",
    "ColorConfig",
    "LoggingConfig",
    "ReplayConfig",
    "SmoothStrokeSettings",
    "TimingSource",
    "get_default_settings",
]
