"""Styled terminal output.

``emit("success", "Build completed!")`` or ``emit("blue.dim", "...")`` writes
one line wrapped in the matching ANSI escape sequence.
"""

from __future__ import annotations

from .aliases import ALIASES, SemanticLevel
from .emitter import DEFAULT_TEMPLATE, MISSING_TEXT_MESSAGE, Emitter, EmitterSettings, emit, resolve
from .palette import PALETTE, ColorName, EscapeTemplate, Intensity, template_for

__all__ = [
    "ALIASES",
    "DEFAULT_TEMPLATE",
    "MISSING_TEXT_MESSAGE",
    "PALETTE",
    "ColorName",
    "Emitter",
    "EmitterSettings",
    "EscapeTemplate",
    "Intensity",
    "SemanticLevel",
    "emit",
    "resolve",
    "template_for",
]
