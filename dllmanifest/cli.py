"""CLI entrypoint for dllmanifest."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import ConfigError, apply_overrides, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator

_SWITCH_OPTIONS: tuple[tuple[str, str], ...] = (
    ("--allow-non-dll-files", "Examine every file, not only those with a .dll extension."),
    ("--use-basename", "Fall back to the file name when the version resource has no name."),
    ("--allow-empty-versions", "Emit packages without a product version instead of skipping them."),
    ("--numeric-version", "Keep only the leading digits of each version component."),
    ("--ignore-build", "Always drop the fourth (build) version component."),
    ("--ignore-empty-build", "Drop the build component when it is empty or zero."),
    ("--remove-duplicates", "Emit each id/version pair once across all targets."),
    ("--recurse", "Descend into sub-directories of each target."),
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dllmanifest",
        description="Generate a packages.config manifest from DLL version metadata.",
    )
    parser.add_argument(
        "targets",
        nargs="*",
        metavar="TARGET",
        help="Directories or files to scan, in order.",
    )
    parser.add_argument(
        "-t",
        "--target-path",
        dest="target_paths",
        action="append",
        default=[],
        metavar="TARGET",
        help="Additional target path; may be repeated.",
    )
    parser.add_argument(
        "-o",
        "--output-path",
        default=None,
        help="Manifest file or directory (defaults to ./packages.config).",
    )
    parser.add_argument(
        "--target-framework",
        default=None,
        help="Value written to the targetFramework attribute of every package.",
    )
    for flag, help_text in _SWITCH_OPTIONS:
        parser.add_argument(flag, action="store_true", default=None, help=help_text)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .dllmanifest.yml file (defaults to the current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write a full DEBUG trace of the run to this file.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for dllmanifest."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    switches = {_dest(flag): getattr(args, _dest(flag)) for flag, _ in _SWITCH_OPTIONS}
    switches["target_framework"] = args.target_framework

    try:
        config = apply_overrides(
            load_config(args.config),
            targets=[*args.targets, *args.target_paths],
            output_path=args.output_path,
            log_file=args.log_file,
            switches=switches,
        )
        configure_logging(
            verbose=bool(args.verbose),
            log_file=Path(config.log_file) if config.log_file else None,
        )
        outcome = Orchestrator().run(config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"dllmanifest failed: {exc}\nRun with --verbose for more details.\n")

    print(f"Manifest written to {_relativize(outcome.path)} ({len(outcome.packages)} packages)")


def _dest(flag: str) -> str:
    return flag[2:].replace("-", "_")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
