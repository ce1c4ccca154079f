"""Package identity resolution from raw version metadata."""

from __future__ import annotations

import logging
import re
from typing import Optional

from .config import ManifestConfig
from .logging import get_logger
from .models import FileCandidate, PackageIdentity, RawMetadata
from .versioning import normalize_version

_DLL_SUFFIX = re.compile(r"\.dll$")

_LOGGER = get_logger("resolver")


def resolve_identity(
    candidate: FileCandidate,
    metadata: RawMetadata,
    config: ManifestConfig,
    logger: logging.Logger | None = None,
) -> Optional[PackageIdentity]:
    """Derive a package identity for ``candidate`` or return None to skip it.

    The name comes from the first non-empty of InternalName, OriginalFilename
    (both with a trailing ``.dll`` removed) and, when enabled, the file's base
    name. Files without a product version are skipped unless empty versions
    are allowed.
    """
    log = logger or _LOGGER

    name = _package_name(candidate, metadata, config)
    if not name:
        log.debug("Skipping %s: no package name in version metadata", candidate.path)
        return None

    product_version = metadata.product_version
    if not product_version or not product_version.strip():
        if not config.allow_empty_versions:
            log.debug("Skipping %s (%s): no product version", candidate.path, name)
            return None
        version = ""
    else:
        version = normalize_version(product_version, config)

    return PackageIdentity(name=name, version=version, target_framework=config.target_framework)


def _package_name(
    candidate: FileCandidate, metadata: RawMetadata, config: ManifestConfig
) -> str:
    for value in (metadata.internal_name, metadata.original_filename):
        if value:
            stripped = _DLL_SUFFIX.sub("", value)
            if stripped:
                return stripped
    if config.use_basename:
        return candidate.base_name
    return ""


__all__ = ["resolve_identity"]
