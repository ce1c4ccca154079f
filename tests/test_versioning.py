"""Tests for dllmanifest.versioning."""

from __future__ import annotations

import pytest

from dllmanifest.config import ManifestConfig
from dllmanifest.versioning import component_at, normalize_version


def test_normalize_keeps_version_verbatim_by_default() -> None:
    assert normalize_version(" 1.2.3.4 ", ManifestConfig()) == "1.2.3.4"
    assert normalize_version("1.2.3.4.5", ManifestConfig()) == "1.2.3.4.5"
    assert normalize_version("2.0-beta", ManifestConfig()) == "2.0-beta"


def test_numeric_version_keeps_leading_digits_per_component() -> None:
    config = ManifestConfig(numeric_version=True)
    assert normalize_version("1.2.3.4+abcdef", config) == "1.2.3.4"
    assert normalize_version("4.7.3062.0 built by: NET472REL1", config) == "4.7.3062.0"
    assert normalize_version("1.rc1.x", config) == "1.."


@pytest.mark.parametrize("numeric", [False, True])
@pytest.mark.parametrize("raw", ["1.2.3.4", "10.0.19041.1", "1.2.3.4.5", "6.0.0.0+a1b2"])
def test_ignore_build_keeps_first_three_components(raw: str, numeric: bool) -> None:
    config = ManifestConfig(ignore_build=True, numeric_version=numeric)
    expected = ".".join(raw.split(".")[:3])
    assert normalize_version(raw, config) == expected


def test_ignore_empty_build_drops_zero_build() -> None:
    config = ManifestConfig(ignore_empty_build=True)
    assert normalize_version("1.0.0.0", config) == "1.0.0"
    assert normalize_version("1.0.0.000", config) == "1.0.0"
    assert normalize_version("1.0.0.", config) == "1.0.0"
    assert normalize_version("1.0.0.0+0", config) == "1.0.0"


def test_ignore_empty_build_keeps_real_build() -> None:
    config = ManifestConfig(ignore_empty_build=True)
    assert normalize_version("1.0.0.7", config) == "1.0.0.7"
    assert normalize_version("1.0.0.10.2", config) == "1.0.0.10.2"


@pytest.mark.parametrize("raw", ["1.2.3.beta", "1.2.3.-1", "1.2.3.rc0"])
def test_ignore_empty_build_keeps_non_numeric_build(raw: str) -> None:
    assert normalize_version(raw, ManifestConfig(ignore_empty_build=True)) == raw


def test_numeric_version_empties_non_numeric_build_before_check() -> None:
    config = ManifestConfig(ignore_empty_build=True, numeric_version=True)
    assert normalize_version("1.2.3.beta", config) == "1.2.3"


def test_ignore_empty_build_truncates_short_versions() -> None:
    # A missing build counts as empty, so the output is the first three
    # components (or fewer when fewer exist).
    config = ManifestConfig(ignore_empty_build=True)
    assert normalize_version("1.2.3", config) == "1.2.3"
    assert normalize_version("1.2", config) == "1.2"
    assert normalize_version("7", config) == "7"


def test_empty_version_normalizes_to_empty_string() -> None:
    assert normalize_version("", ManifestConfig()) == ""
    assert normalize_version("   ", ManifestConfig(numeric_version=True)) == ""
    assert normalize_version("", ManifestConfig(ignore_empty_build=True)) == ""


@pytest.mark.parametrize(
    "raw",
    ["1.2.3.4", "1.2.3.4-pre", "v1.2", "3.0.0.0+sha.1", "", "12a.3b.0.0"],
)
@pytest.mark.parametrize(
    "config",
    [
        ManifestConfig(numeric_version=True),
        ManifestConfig(numeric_version=True, ignore_build=True),
        ManifestConfig(numeric_version=True, ignore_empty_build=True),
    ],
)
def test_numeric_normalization_is_idempotent(raw: str, config: ManifestConfig) -> None:
    once = normalize_version(raw, config)
    assert normalize_version(once, config) == once


def test_component_at_is_bounds_checked() -> None:
    parts = ["1", "2", "3"]
    assert component_at(parts, 0) == "1"
    assert component_at(parts, 3) is None
    assert component_at(parts, -1) is None
