"""Product version normalization.

Versions are handled as dot-separated components. ``numeric_version`` keeps
only the leading digits of every component, and the build section (the
fourth component) can be dropped either unconditionally (``ignore_build``)
or only when it carries no value (``ignore_empty_build``).

A version with fewer than four components has no build section at all.
That absence counts as empty, so ``ignore_empty_build`` joins only the
first three components in that case as well. Existing manifests depend on
this, so it is kept as-is.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from .config import ManifestConfig

BUILD_INDEX = 3

_LEADING_DIGITS = re.compile(r"\d*")
_EMPTY_BUILD = re.compile(r"0*")


def normalize_version(raw_version: str, config: ManifestConfig) -> str:
    """Return ``raw_version`` rewritten according to the version policy switches."""
    components: List[str] = raw_version.strip().split(".")

    if config.numeric_version:
        components = [_leading_digits(component) for component in components]

    if config.ignore_build or (
        config.ignore_empty_build and _is_empty_build(component_at(components, BUILD_INDEX))
    ):
        return ".".join(components[:BUILD_INDEX])
    return ".".join(components)


def component_at(components: Sequence[str], index: int) -> Optional[str]:
    """Bounds-checked access into a split version."""
    if 0 <= index < len(components):
        return components[index]
    return None


def _leading_digits(component: str) -> str:
    match = _LEADING_DIGITS.match(component)
    return match.group(0) if match else ""


def _is_empty_build(component: Optional[str]) -> bool:
    # "0+0" and "0-beta" are empty builds; "beta" and "-1" are real ones.
    if not component:
        return True
    digits = _leading_digits(component)
    return bool(digits) and _EMPTY_BUILD.fullmatch(digits) is not None


__all__ = ["BUILD_INDEX", "component_at", "normalize_version"]
