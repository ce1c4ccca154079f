"""Tests for dllmanifest.resolver."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from dllmanifest.config import ManifestConfig
from dllmanifest.models import PackageIdentity, RawMetadata
from dllmanifest.resolver import resolve_identity
from dllmanifest.scanner import build_candidate

QUX = build_candidate(Path("lib") / "Qux.dll")


@pytest.mark.parametrize("use_basename", [False, True])
def test_internal_name_has_priority(use_basename: bool) -> None:
    metadata = RawMetadata(
        internal_name="Bar.dll", original_filename="Baz.dll", product_version="1.0"
    )
    identity = resolve_identity(QUX, metadata, ManifestConfig(use_basename=use_basename))
    assert identity is not None
    assert identity.name == "Bar"


def test_original_filename_used_when_internal_name_missing() -> None:
    metadata = RawMetadata(internal_name="", original_filename="Baz.dll", product_version="1.0")
    identity = resolve_identity(QUX, metadata, ManifestConfig())
    assert identity == PackageIdentity(name="Baz", version="1.0", target_framework="")


def test_dll_suffix_strip_is_case_sensitive_and_anchored() -> None:
    config = ManifestConfig()
    upper = resolve_identity(QUX, RawMetadata(internal_name="Bar.DLL", product_version="1"), config)
    middle = resolve_identity(QUX, RawMetadata(internal_name="Bar.dll.x", product_version="1"), config)
    assert upper is not None and upper.name == "Bar.DLL"
    assert middle is not None and middle.name == "Bar.dll.x"


def test_bare_dll_suffix_falls_through_to_next_source() -> None:
    metadata = RawMetadata(internal_name=".dll", original_filename="Baz.dll", product_version="1")
    identity = resolve_identity(QUX, metadata, ManifestConfig())
    assert identity is not None
    assert identity.name == "Baz"


def test_basename_fallback_requires_flag() -> None:
    metadata = RawMetadata(product_version="2.0.0.0")
    assert resolve_identity(QUX, metadata, ManifestConfig()) is None

    identity = resolve_identity(QUX, metadata, ManifestConfig(use_basename=True))
    assert identity is not None
    assert identity.name == "Qux"
    assert identity.version == "2.0.0.0"


def test_missing_version_skips_unless_empty_versions_allowed() -> None:
    metadata = RawMetadata(internal_name="Bar")
    assert resolve_identity(QUX, metadata, ManifestConfig()) is None

    identity = resolve_identity(QUX, metadata, ManifestConfig(allow_empty_versions=True))
    assert identity == PackageIdentity(name="Bar", version="")


def test_blank_version_counts_as_missing() -> None:
    metadata = RawMetadata(internal_name="Bar", product_version="   ")
    assert resolve_identity(QUX, metadata, ManifestConfig()) is None


def test_version_is_normalized_and_framework_copied() -> None:
    metadata = RawMetadata(internal_name="Bar.dll", product_version="3.1.0.0+abc")
    config = ManifestConfig(
        numeric_version=True, ignore_empty_build=True, target_framework="net48"
    )
    identity = resolve_identity(QUX, metadata, config)
    assert identity == PackageIdentity(name="Bar", version="3.1.0", target_framework="net48")


def test_skip_is_traced_on_supplied_logger(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.resolver")
    with caplog.at_level(logging.DEBUG, logger="tests.resolver"):
        assert resolve_identity(QUX, RawMetadata(), ManifestConfig(), logger) is None
    assert any("no package name" in record.getMessage() for record in caplog.records)
