"""Command line interface for kickstart."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import DEFAULT_PROJECT_NAME, ProjectConfig
from .console import ALIASES, PALETTE, Emitter, EmitterSettings
from .errors import ScaffoldError
from .scaffold import BackendScaffolder

CREATE_BACKEND = "create:backend"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kickstart", description="Scaffold backend projects")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details, including unknown style tokens",
    )
    subparsers = parser.add_subparsers(dest="command")

    create_parser = subparsers.add_parser(CREATE_BACKEND, help="create a new backend project")
    create_parser.add_argument(
        "name",
        nargs="?",
        default=DEFAULT_PROJECT_NAME,
        help=f"Name of the project directory (default: {DEFAULT_PROJECT_NAME})",
    )
    create_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory the project is created in (default: current directory)",
    )

    subparsers.add_parser("styles", help="preview every semantic level and palette colour")

    return parser


def _handle_create(args: argparse.Namespace, emitter: Emitter) -> int:
    name = getattr(args, "name", DEFAULT_PROJECT_NAME)
    directory = getattr(args, "directory", None)
    try:
        config = ProjectConfig.from_name(name, parent=directory)
        if args.command == CREATE_BACKEND:
            emitter.emit("info", f"Creating backend project: {config.name}")
        result = BackendScaffolder().create(config)
    except (ScaffoldError, ValueError) as exc:
        emitter.emit("error", str(exc))
        return 1

    if result.created:
        emitter.emit("success", "Project created successfully!")
    else:
        emitter.emit("warn", "Directory already exists!")
    emitter.emit("debug", f"Wrote {result.placeholder}")
    return 0


def _handle_styles(emitter: Emitter) -> int:
    for level in ALIASES:
        emitter.emit(level.value, level.value)
    for color, intensity in PALETTE:
        token = f"{color.value}.{intensity.value}"
        emitter.emit(token, token)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    emitter = Emitter(settings=EmitterSettings(warn_on_fallback=args.verbose))

    if args.command == "styles":
        return _handle_styles(emitter)
    return _handle_create(args, emitter)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
