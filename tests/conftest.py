"""Shared fixtures."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from vercmp import Version


@pytest.fixture
def versions() -> list[Version]:
    """Versions in ascending order."""
    return [
        Version(0, 0, 1),
        Version(1, 0),
        Version(1, 0, 0),
        Version(1, 0, 1),
        Version(1, 0, 1, 1),
        Version(1, 1),
        Version(1, 2),
        Version(1, 2, 1),
        Version(2, 9, 99),
        Version(2, 10, 3),
    ]


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Empty project directory set as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
