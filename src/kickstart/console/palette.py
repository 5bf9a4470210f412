"""Palette of ANSI escape templates keyed by colour and intensity."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "PALETTE",
    "ColorName",
    "EscapeTemplate",
    "Intensity",
    "lookup",
    "template_for",
]

RESET = "\x1b[0m"


class ColorName(str, Enum):
    """The eight standard terminal colours."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


class Intensity(str, Enum):
    """Brightness variants available for every colour."""

    DIM = "dim"
    NORMAL = "normal"
    INTENSE = "intense"


class EscapeTemplate(BaseModel):
    """SGR formatting bound to a single colour and intensity."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    color: ColorName = Field(..., description="Colour this template renders.")
    intensity: Intensity = Field(..., description="Brightness variant of the colour.")
    sgr: str = Field(..., min_length=1, description="SGR parameters placed between ESC[ and m.")

    @property
    def prefix(self) -> str:
        return f"\x1b[{self.sgr}m"

    def apply(self, text: str) -> str:
        """Return ``text`` wrapped in this template's escape sequence and a reset."""

        return f"{self.prefix}{text}{RESET}"


# Colour -> (dim, normal, intense) SGR parameters.
_SGR_CODES: dict[ColorName, tuple[str, str, str]] = {
    ColorName.BLACK: ("90", "30", "30;1"),
    ColorName.RED: ("31", "31;22", "31;1"),
    ColorName.GREEN: ("32", "32;22", "32;1"),
    ColorName.YELLOW: ("33", "33;22", "33;1"),
    ColorName.BLUE: ("34", "34;22", "34;1"),
    ColorName.MAGENTA: ("35", "35;22", "35;1"),
    ColorName.CYAN: ("36", "36;22", "36;1"),
    ColorName.WHITE: ("37", "37;22", "37;1"),
}


def _build_palette() -> Mapping[tuple[ColorName, Intensity], EscapeTemplate]:
    table: dict[tuple[ColorName, Intensity], EscapeTemplate] = {}
    for color in ColorName:
        for intensity, sgr in zip(Intensity, _SGR_CODES[color]):
            table[(color, intensity)] = EscapeTemplate(color=color, intensity=intensity, sgr=sgr)
    return MappingProxyType(table)


PALETTE = _build_palette()


def template_for(color: ColorName, intensity: Intensity) -> EscapeTemplate:
    """Return the template for a typed colour/intensity pair."""

    return PALETTE[(color, intensity)]


def _coerce(enum_type: type[Enum], value: Any) -> Any:
    if isinstance(value, enum_type):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_type(value)
    except ValueError:
        return None


def lookup(color: ColorName | str, intensity: Intensity | str) -> EscapeTemplate | None:
    """Return the template for ``color``/``intensity`` or ``None`` when either is unknown."""

    color_name = _coerce(ColorName, color)
    level = _coerce(Intensity, intensity)
    if color_name is None or level is None:
        return None
    return PALETTE[(color_name, level)]
