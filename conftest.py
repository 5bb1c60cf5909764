"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

import dualpath.environment


@pytest.fixture(autouse=True)
def reset_working_directory_state() -> t.Generator[None, None, None]:
    """Ensure no working-directory override leaks between tests."""
    dualpath.environment.reset_working_directory()
    yield
    dualpath.environment.reset_working_directory()
