"""Target path enumeration."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List

from .logging import get_logger
from .models import FileCandidate


def build_candidate(path: Path) -> FileCandidate:
    """Describe ``path`` the way the filter and resolver expect."""
    return FileCandidate(
        name=path.name,
        extension=path.suffix,
        base_name=path.stem,
        path=str(path),
    )


def _sort_key(entry: os.DirEntry) -> tuple[str, str]:
    return (entry.name.lower(), entry.name)


class DirectoryLister:
    """Yields file candidates under a target path in a stable order."""

    def __init__(self, *, recurse: bool = False, logger: logging.Logger | None = None) -> None:
        self.recurse = recurse
        self.logger = logger or get_logger("scanner")

    def list(self, target: str) -> Iterator[FileCandidate]:
        root = Path(target).expanduser()
        if not root.exists():
            raise FileNotFoundError(f"Target path not found: {target}")
        if root.is_file():
            yield build_candidate(root)
            return
        yield from self._walk(root)

    def _walk(self, directory: Path) -> Iterator[FileCandidate]:
        with os.scandir(directory) as iterator:
            entries: List[os.DirEntry] = sorted(iterator, key=_sort_key)
        for entry in entries:
            if entry.is_file():
                yield build_candidate(Path(entry.path))
            elif self.recurse and entry.is_dir(follow_symlinks=False):
                yield from self._walk_nested(Path(entry.path))

    def _walk_nested(self, directory: Path) -> Iterator[FileCandidate]:
        try:
            yield from self._walk(directory)
        except OSError as exc:
            self.logger.debug("Skipping unreadable directory %s: %s", directory, exc)


__all__ = ["DirectoryLister", "build_candidate"]
