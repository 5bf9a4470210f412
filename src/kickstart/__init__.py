"""Scaffold backend projects from the command line.

The package ships a small project scaffolder and the styled console output it
reports through. ``kickstart.console.emit`` can be reused on its own by any
command that wants coloured status lines.
"""

from __future__ import annotations

from .config import ProjectConfig
from .console import emit
from .errors import ScaffoldError
from .scaffold import BackendScaffolder, ScaffoldResult

__all__ = [
    "BackendScaffolder",
    "ProjectConfig",
    "ScaffoldError",
    "ScaffoldResult",
    "emit",
]

__version__ = "0.1.0"
