"""Project scaffolding helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import ProjectConfig
from .errors import ScaffoldError

__all__ = ["BackendScaffolder", "ScaffoldResult"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScaffoldResult:
    """Outcome of :meth:`BackendScaffolder.create`."""

    project_dir: Path
    placeholder: Path
    created: bool


class BackendScaffolder:
    """Create a project directory holding a single placeholder server file."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def create(self, config: ProjectConfig) -> ScaffoldResult:
        """Create ``config.project_dir`` if needed and (re)write the placeholder.

        An existing project directory is reused and its placeholder overwritten.
        """

        project_dir = config.project_dir
        if project_dir.exists() and not project_dir.is_dir():
            raise ScaffoldError(f"{project_dir} exists and is not a directory", project_dir)

        created = not project_dir.exists()
        try:
            if created:
                project_dir.mkdir(parents=True)
                LOGGER.debug("created project directory %s", project_dir)
            config.placeholder_path.write_text(config.placeholder_content, encoding=self.encoding)
        except OSError as exc:
            raise ScaffoldError(
                f"could not write project at {project_dir}: {exc}", project_dir
            ) from exc

        LOGGER.debug("wrote placeholder %s", config.placeholder_path)
        return ScaffoldResult(
            project_dir=project_dir,
            placeholder=config.placeholder_path,
            created=created,
        )
