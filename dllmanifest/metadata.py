"""Version resource readers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable

import pefile

from .logging import get_logger
from .models import RawMetadata

_WANTED_KEYS = {
    "InternalName": "internal_name",
    "OriginalFilename": "original_filename",
    "ProductVersion": "product_version",
}


class MetadataReader(ABC):
    """Contract for components that read version strings from a file."""

    @abstractmethod
    def read(self, path: str) -> RawMetadata:
        """Return the version strings of ``path``; unreadable files give empty metadata."""


class PeVersionReader(MetadataReader):
    """Reads StringFileInfo entries from the version resource of a PE image."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("metadata")

    def read(self, path: str) -> RawMetadata:
        try:
            pe = pefile.PE(path, fast_load=True)
        except (OSError, pefile.PEFormatError) as exc:
            self.logger.debug("No version metadata for %s: %s", path, exc)
            return RawMetadata()

        try:
            pe.parse_data_directories(
                directories=[pefile.DIRECTORY_ENTRY["IMAGE_DIRECTORY_ENTRY_RESOURCE"]]
            )
            values = _collect_strings(getattr(pe, "FileInfo", None) or [])
        except pefile.PEFormatError as exc:
            self.logger.debug("Malformed resources in %s: %s", path, exc)
            return RawMetadata()
        finally:
            pe.close()

        return RawMetadata(**values)


def _collect_strings(file_info: Iterable[object]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for group in file_info:
        # pefile groups FileInfo structures per language block.
        structures = group if isinstance(group, list) else [group]
        for structure in structures:
            if _decode(getattr(structure, "Key", b"")) != "StringFileInfo":
                continue
            for table in getattr(structure, "StringTable", []):
                for raw_key, raw_value in table.entries.items():
                    field_name = _WANTED_KEYS.get(_decode(raw_key))
                    value = _decode(raw_value)
                    if field_name and value and field_name not in values:
                        values[field_name] = value
    return values


def _decode(value: object) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace").rstrip("\x00")
    if isinstance(value, str):
        return value.rstrip("\x00")
    return ""


__all__ = ["MetadataReader", "PeVersionReader"]
