"""Semantic names bound to fixed palette entries."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from .palette import ColorName, EscapeTemplate, Intensity, template_for

__all__ = ["ALIASES", "SemanticLevel", "lookup"]


class SemanticLevel(str, Enum):
    """Named message categories with a fixed style each."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
    RESPONSE = "response"
    WARN = "warn"
    DEBUG = "debug"


ALIASES = MappingProxyType(
    {
        SemanticLevel.INFO: template_for(ColorName.WHITE, Intensity.NORMAL),
        SemanticLevel.SUCCESS: template_for(ColorName.GREEN, Intensity.INTENSE),
        SemanticLevel.ERROR: template_for(ColorName.RED, Intensity.INTENSE),
        SemanticLevel.RESPONSE: template_for(ColorName.BLUE, Intensity.NORMAL),
        SemanticLevel.WARN: template_for(ColorName.YELLOW, Intensity.NORMAL),
        SemanticLevel.DEBUG: template_for(ColorName.BLACK, Intensity.DIM),
    }
)


def lookup(level: SemanticLevel | str) -> EscapeTemplate | None:
    """Return the template bound to ``level`` or ``None`` for unknown names."""

    if isinstance(level, SemanticLevel):
        return ALIASES[level]
    if not isinstance(level, str):
        return None
    try:
        return ALIASES[SemanticLevel(level)]
    except ValueError:
        return None
