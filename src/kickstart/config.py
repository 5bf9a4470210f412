"""Configuration shared by the project scaffolder and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_PROJECT_NAME = "My-app"
PLACEHOLDER_FILENAME = "server.js"
PLACEHOLDER_CONTENT = "//servercode"


@dataclass(slots=True)
class ProjectConfig:
    """Where a new backend project goes and what placeholder it receives.

    Attributes
    ----------
    name:
        Directory name of the project, used verbatim.
    parent:
        Directory the project directory is created in.
    placeholder:
        File name written inside the project directory.
    placeholder_content:
        Text written to :attr:`placeholder`.
    """

    name: str
    parent: Path
    placeholder: str = PLACEHOLDER_FILENAME
    placeholder_content: str = PLACEHOLDER_CONTENT

    @classmethod
    def from_name(
        cls,
        name: str | None = None,
        *,
        parent: str | Path | None = None,
    ) -> "ProjectConfig":
        """Build a :class:`ProjectConfig`, defaulting to ``My-app`` in the working directory."""

        project_name = DEFAULT_PROJECT_NAME if name is None else name.strip()
        if not project_name:
            raise ValueError("project name must not be empty")
        if project_name in {".", ".."} or any(sep in project_name for sep in ("/", "\\")):
            raise ValueError(f"invalid project name '{project_name}'")

        base = Path.cwd() if parent is None else Path(parent).expanduser()
        return cls(name=project_name, parent=base)

    @property
    def project_dir(self) -> Path:
        return self.parent / self.name

    @property
    def placeholder_path(self) -> Path:
        return self.project_dir / self.placeholder
