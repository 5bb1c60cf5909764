"""pytest-bdd steps configuring the working directory used for resolution."""

from __future__ import annotations

import contextlib
import threading
import typing as t

import pytest
from pytest_bdd import given, parsers, then, when

from dualpath.environment import (
    PROCESS_WORKING_DIRECTORY,
    WorkingDirectory,
    active_working_directory,
    use_working_directory,
)

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    import types


@pytest.fixture
def fixed_cwd() -> WorkingDirectory | None:
    """Scenarios without a configured directory pass no collaborator."""
    return None


@pytest.fixture
def override_stack() -> t.Iterator[contextlib.ExitStack]:
    """Hold working-directory overrides until the scenario finishes."""
    with contextlib.ExitStack() as stack:
        yield stack


@given(
    parsers.cfparse('the working directory is "{cwd}"'), target_fixture="fixed_cwd"
)
def set_fixed_cwd(cwd: str) -> WorkingDirectory:
    """Resolve against *cwd* instead of the process directory."""
    return WorkingDirectory.fixed(cwd)


@given(
    parsers.cfparse('drive "{device}" has the working directory "{drive_cwd}"'),
    target_fixture="fixed_cwd",
)
def set_drive_cwd(
    fixed_cwd: WorkingDirectory | None, device: str, drive_cwd: str
) -> WorkingDirectory:
    """Record a per-drive directory alongside the configured one."""
    assert fixed_cwd is not None, "configure the working directory first"
    return WorkingDirectory.fixed(fixed_cwd.current(), {device: drive_cwd})


@given(parsers.cfparse('the working directory override is "{cwd}"'))
def set_override(override_stack: contextlib.ExitStack, cwd: str) -> None:
    """Activate an override for the rest of the scenario."""
    override_stack.enter_context(use_working_directory(cwd))


@when(parsers.cfparse('I resolve "{path}"'), target_fixture="result")
def resolve_path(
    grammar: types.ModuleType, fixed_cwd: WorkingDirectory | None, path: str
) -> str:
    """Resolve *path* against the configured collaborator."""
    return grammar.resolve(path, working_directory=fixed_cwd)


@when(
    parsers.cfparse('I resolve "{path}" without a collaborator'),
    target_fixture="result",
)
def resolve_path_implicitly(grammar: types.ModuleType, path: str) -> str:
    """Resolve *path* relying on the active override."""
    return grammar.resolve(path)


@when("another thread reads the active working directory", target_fixture="seen")
def read_from_thread() -> WorkingDirectory:
    """Report the collaborator a fresh thread observes."""
    seen: list[WorkingDirectory] = []
    thread = threading.Thread(target=lambda: seen.append(active_working_directory()))
    thread.start()
    thread.join(timeout=5)
    assert seen, "worker thread did not report"
    return seen[0]


@then("it sees the process working directory")
def check_process_default(seen: WorkingDirectory) -> None:
    """Other threads keep the process-wide collaborator."""
    assert seen is PROCESS_WORKING_DIRECTORY
