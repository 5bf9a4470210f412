"""Resolve style tokens and write styled lines to a text stream."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from pydantic import BaseModel, ConfigDict, Field

from . import aliases, palette
from .palette import ColorName, EscapeTemplate, Intensity, template_for

__all__ = [
    "DEFAULT_TEMPLATE",
    "MISSING_TEXT_MESSAGE",
    "Emitter",
    "EmitterSettings",
    "emit",
    "resolve",
]

LOGGER = logging.getLogger(__name__)

SEPARATOR = "."
MISSING_TEXT_MESSAGE = "Text or style is missing."
DEFAULT_TEMPLATE = template_for(ColorName.WHITE, Intensity.NORMAL)
MISSING_TEXT_TEMPLATE = template_for(ColorName.RED, Intensity.INTENSE)


class EmitterSettings(BaseModel):
    """Behaviour switches for :class:`Emitter`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    warn_on_fallback: bool = Field(
        default=False,
        description="Log a warning when a style token falls back to the default template.",
    )


def _lookup(token: Any) -> EscapeTemplate | None:
    if not isinstance(token, str):
        return None

    parts = token.split(SEPARATOR)
    if len(parts) == 2 and all(parts):
        template = palette.lookup(*parts)
        if template is not None:
            return template

    return aliases.lookup(token)


def resolve(token: str) -> EscapeTemplate:
    """Resolve ``token`` to a template.

    ``"color.intensity"`` tokens are looked up in the palette first, then the
    whole token is tried as a semantic level name. Anything that matches
    neither resolves to white/normal.
    """

    return _lookup(token) or DEFAULT_TEMPLATE


class Emitter:
    """Write one styled line per call to ``stream``.

    When ``stream`` is omitted the current :data:`sys.stdout` is used at write
    time, so redirections made after construction are honoured.
    """

    def __init__(self, stream: TextIO | None = None, settings: EmitterSettings | None = None) -> None:
        self._stream = stream
        self.settings = settings or EmitterSettings()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def resolve(self, token: str) -> EscapeTemplate:
        template = _lookup(token)
        if template is None:
            if self.settings.warn_on_fallback:
                LOGGER.warning(
                    "unknown style token %r, using %s.%s",
                    token,
                    DEFAULT_TEMPLATE.color.value,
                    DEFAULT_TEMPLATE.intensity.value,
                )
            return DEFAULT_TEMPLATE
        return template

    def format(self, token: str, text: str | None) -> str:
        """Return the line :meth:`emit` would write, without the line terminator."""

        if not text:
            return MISSING_TEXT_TEMPLATE.apply(MISSING_TEXT_MESSAGE)
        return self.resolve(token).apply(str(text))

    def emit(self, token: str, text: str | None) -> None:
        stream = self.stream
        line = self.format(token, text) + "\n"
        try:
            stream.write(line)
        except UnicodeEncodeError:
            # Characters the stream cannot encode are written as escapes.
            encoding = getattr(stream, "encoding", None) or "utf-8"
            stream.write(line.encode(encoding, "backslashreplace").decode(encoding))
        stream.flush()


_DEFAULT_EMITTER = Emitter()


def emit(token: str, text: str | None) -> None:
    """Write ``text`` styled by ``token`` to standard output.

    Empty or missing ``text`` writes a fixed red diagnostic instead and
    ignores ``token``. Unknown tokens silently use the default style.
    """

    _DEFAULT_EMITTER.emit(token, text)
