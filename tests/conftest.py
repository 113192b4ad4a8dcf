# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from hipchat_resource.config import BuildContext


@pytest.fixture
def logger() -> MagicMock:
    """Logger double; assert on .error/.warning/.debug calls."""
    return MagicMock(name="logger")


@pytest.fixture
def get_logger(logger: MagicMock) -> Callable[[str], Any]:
    """Logger factory returning the shared logger double."""
    return lambda _name: logger


@pytest.fixture
def build_context() -> BuildContext:
    """Deterministic build context (no environment lookups)."""
    return BuildContext(
        build_id="1234",
        build_name="42",
        build_team_id="1",
        build_team_name="main",
        build_job_id="77",
        build_job_name="unit-tests",
        build_pipeline_id="9",
        build_pipeline_name="backend",
        atc_external_url="https://ci.example.com",
    )


@pytest.fixture
def write_files(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Create files under tmp_path from {relative_path: contents}; returns the root."""

    def _write(files: dict[str, str]) -> Path:
        for relative, contents in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(contents, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def git_root(write_files: Callable[[dict[str, str]], Path]) -> Path:
    """Root dir with complete git metadata under src/.git."""
    return write_files(
        {
            "src/.git/committer": "john.doe@nowhere.io",
            "src/.git/short_ref": "abc123",
            "src/.git/commit_message": "I hope this doesn't break anything!",
        }
    )
