"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from cinit.adapters.mock import MockAdapter
from cinit.adapters.registry import AdapterRegistry
from cinit.adapters.shell.filesystem import FilesystemAdapter
from cinit.core.data import AssetRegistry


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from inside an empty temporary directory.

    The scaffold changes the working directory itself; monkeypatch
    restores the original one afterwards.
    """
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def assets() -> AssetRegistry:
    return AssetRegistry()


@pytest.fixture
def git_mock() -> MockAdapter:
    return MockAdapter(adapter_name="git")


@pytest.fixture
def registry(git_mock: MockAdapter) -> AdapterRegistry:
    """Real filesystem, mocked git."""
    reg = AdapterRegistry()
    reg.register(FilesystemAdapter())
    reg.register(git_mock)
    return reg
