"""End-to-end manifest generation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .aggregator import Aggregator
from .config import RunConfig
from .logging import get_logger
from .metadata import MetadataReader, PeVersionReader
from .models import ManifestEntry, PackageIdentity
from .scanner import DirectoryLister
from .writer import ManifestWriter


@dataclass
class RunOutcome:
    """Result of a manifest run."""

    path: Path
    entries: List[ManifestEntry]

    @property
    def packages(self) -> List[PackageIdentity]:
        return [entry for entry in self.entries if isinstance(entry, PackageIdentity)]


class Orchestrator:
    """Validates configuration, scans every target and writes the manifest."""

    def __init__(
        self,
        reader: MetadataReader | None = None,
        lister: DirectoryLister | None = None,
        writer: ManifestWriter | None = None,
    ) -> None:
        self.logger = get_logger("orchestrator")
        self.reader = reader or PeVersionReader()
        self.lister = lister
        self.writer = writer or ManifestWriter()

    def run(self, config: RunConfig) -> RunOutcome:
        config.validate()
        self.logger.debug("Scanning %d target(s) with %s", len(config.targets), config.policy)

        aggregator = Aggregator(self.reader, lister=self.lister)
        entries = aggregator.run(config.targets, config.policy)

        path = self.writer.write(entries, config.output_path)
        outcome = RunOutcome(path=path, entries=entries)
        self.logger.info("Wrote %d packages to %s", len(outcome.packages), path)
        return outcome


__all__ = ["Orchestrator", "RunOutcome"]
