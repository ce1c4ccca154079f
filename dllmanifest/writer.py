"""packages.config serialization with atomic replacement of the destination."""

from __future__ import annotations

import logging
import os
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable

from .logging import get_logger
from .models import ManifestEntry, PackageIdentity, TargetMarker

DEFAULT_FILENAME = "packages.config"
INDENT = "  "


def resolve_output_path(output: str | None) -> Path:
    """Return the manifest file path for an output file or directory."""
    if not output:
        return Path.cwd() / DEFAULT_FILENAME
    path = Path(output).expanduser()
    if path.is_dir() or output.endswith((os.sep, "/")):
        return path / DEFAULT_FILENAME
    return path


def build_document(entries: Iterable[ManifestEntry]) -> ET.ElementTree:
    root = ET.Element("packages")
    for entry in entries:
        if isinstance(entry, TargetMarker):
            root.append(ET.Comment(_comment_text(entry.target)))
        elif isinstance(entry, PackageIdentity):
            ET.SubElement(
                root,
                "package",
                {
                    "id": entry.name,
                    "version": entry.version,
                    "targetFramework": entry.target_framework,
                },
            )
        else:  # pragma: no cover - ManifestEntry is a closed union
            raise TypeError(f"Unsupported manifest entry: {entry!r}")
    tree = ET.ElementTree(root)
    ET.indent(tree, space=INDENT)
    return tree


def render(entries: Iterable[ManifestEntry]) -> str:
    """Return the manifest document as text."""
    tree = build_document(entries)
    body = ET.tostring(tree.getroot(), encoding="unicode")
    return f'<?xml version="1.0" encoding="utf-8"?>\n{body}\n'


class ManifestWriter:
    """Writes manifests so readers never observe a partially written file."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("writer")

    def write(self, entries: Iterable[ManifestEntry], output: str | None = None) -> Path:
        destination = resolve_output_path(output)
        destination.parent.mkdir(parents=True, exist_ok=True)
        payload = render(entries).encode("utf-8")

        fd, temp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(temp_name, destination)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

        self.logger.debug("Wrote %d bytes to %s", len(payload), destination)
        return destination


def _comment_text(target: str) -> str:
    # "--" is not allowed inside XML comments.
    text = target
    while "--" in text:
        text = text.replace("--", "- -")
    return f" {text} "


__all__ = [
    "DEFAULT_FILENAME",
    "ManifestWriter",
    "build_document",
    "render",
    "resolve_output_path",
]
