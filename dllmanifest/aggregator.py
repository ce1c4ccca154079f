"""Aggregation of resolved identities across target paths."""

from __future__ import annotations

import logging
from typing import Iterable, List, Set

from .config import ManifestConfig
from .filters import accept_candidate
from .logging import get_logger
from .metadata import MetadataReader
from .models import ManifestEntry, PackageIdentity, TargetMarker
from .resolver import resolve_identity
from .scanner import DirectoryLister


class DedupIndex:
    """Tracks package keys seen during a run.

    Recording and suppressing are separate: every key is recorded, but a
    repeat is only reported as suppressible when ``suppress`` is enabled.
    """

    def __init__(self, *, suppress: bool) -> None:
        self.suppress = suppress
        self._seen: Set[str] = set()

    def record(self, identity: PackageIdentity) -> bool:
        """Record ``identity`` and return True when it should be emitted."""
        key = identity.key
        if key in self._seen:
            return not self.suppress
        self._seen.add(key)
        return True

    def __contains__(self, key: object) -> bool:
        return key in self._seen

    def __len__(self) -> int:
        return len(self._seen)


class Aggregator:
    """Runs filter and resolver over each target and collects manifest entries."""

    def __init__(
        self,
        reader: MetadataReader,
        lister: DirectoryLister | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.reader = reader
        self.lister = lister
        self.logger = logger or get_logger("aggregator")

    def run(self, targets: Iterable[str], config: ManifestConfig) -> List[ManifestEntry]:
        lister = self.lister or DirectoryLister(recurse=config.recurse)
        index = DedupIndex(suppress=config.remove_duplicates)
        entries: List[ManifestEntry] = []

        for target in targets:
            if not config.remove_duplicates:
                entries.append(TargetMarker(target=target))
            emitted = 0
            for candidate in lister.list(target):
                if not accept_candidate(candidate, config):
                    continue
                metadata = self.reader.read(candidate.path)
                identity = resolve_identity(candidate, metadata, config, self.logger)
                if identity is None:
                    continue
                if not index.record(identity):
                    self.logger.debug("Suppressing duplicate %s from %s", identity.key, candidate.path)
                    continue
                entries.append(identity)
                emitted += 1
            self.logger.info("Resolved %d packages from %s", emitted, target)

        return entries


__all__ = ["Aggregator", "DedupIndex"]
