"""Shared fixtures for importer tests."""

from __future__ import annotations

import sys
from datetime import timezone
from pathlib import Path

import pytest

# Make the project root importable when running from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from importer.settings import ImportConfiguration
from importer.vault import FolderVault

from helpers import make_entry


@pytest.fixture
def config() -> ImportConfiguration:
    return ImportConfiguration()


@pytest.fixture
def vault(tmp_path: Path) -> FolderVault:
    root = tmp_path / "vault"
    root.mkdir()
    return FolderVault(root)


@pytest.fixture
def utc():
    return timezone.utc


@pytest.fixture
def sample_entry() -> dict:
    return make_entry(text="Hello", tags=["a", "b"])
