"""Candidate selection rules."""

from __future__ import annotations

from .config import ManifestConfig
from .models import FileCandidate

DLL_EXTENSION = ".dll"


def accept_candidate(candidate: FileCandidate, config: ManifestConfig) -> bool:
    """Return True when the file should be examined for version metadata."""
    if config.allow_non_dll_files:
        return True
    return (candidate.extension or "").lower() == DLL_EXTENSION


__all__ = ["DLL_EXTENSION", "accept_candidate"]
