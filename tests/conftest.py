from __future__ import annotations

from pathlib import Path

import pytest

from accessorgen.stores import ResolutionCache
from tests._fixtures.package_builder import GoPackageBuilder


@pytest.fixture
def go_package(tmp_path: Path) -> GoPackageBuilder:
    """Provide a reusable Go package builder rooted at the pytest tmp_path."""
    return GoPackageBuilder(tmp_path)


@pytest.fixture
def cache() -> ResolutionCache:
    """A fresh resolution cache per test."""
    return ResolutionCache()
