from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.target_builder import TargetBuilder


@pytest.fixture
def targets(tmp_path: Path) -> TargetBuilder:
    """Provide a target builder rooted at the pytest tmp_path."""
    return TargetBuilder(tmp_path)
