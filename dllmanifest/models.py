"""Core data models shared across dllmanifest components."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class FileCandidate:
    """A filesystem entry considered for inclusion in the manifest."""

    name: str
    extension: str
    base_name: str
    path: str


@dataclass(frozen=True)
class RawMetadata:
    """Version resource strings read from a candidate; any field may be missing."""

    internal_name: Optional[str] = None
    original_filename: Optional[str] = None
    product_version: Optional[str] = None


@dataclass(frozen=True)
class PackageIdentity:
    """A resolved manifest entry."""

    name: str
    version: str
    target_framework: str = ""

    @property
    def key(self) -> str:
        return f"{self.name}/{self.version}"


@dataclass(frozen=True)
class TargetMarker:
    """Provenance annotation placed ahead of the entries found under a target."""

    target: str


ManifestEntry = Union[PackageIdentity, TargetMarker]
