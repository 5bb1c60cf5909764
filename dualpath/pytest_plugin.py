"""Pytest plugin providing the ``working_directory`` fixture."""

from __future__ import annotations

import logging
import typing as t

import pytest

from .environment import WorkingDirectory, use_working_directory

logger = logging.getLogger(__name__)

DEFAULT_FIXED_CWD: t.Final[str] = "/dualpath"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options for the plugin."""
    parser.addini(
        "dualpath_cwd",
        (
            "Working directory reported to dualpath by the working_directory "
            "fixture when neither a marker nor a fixture param sets one."
        ),
        default=DEFAULT_FIXED_CWD,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        (
            "dualpath_cwd(cwd: str, drives: dict[str, str] | None = None): "
            "working directory reported by the working_directory fixture."
        ),
    )


def _get_marker_settings(request: pytest.FixtureRequest) -> dict[str, t.Any] | None:
    """Return marker settings for the fixed working directory if present."""
    marker = request.node.get_closest_marker("dualpath_cwd")
    if marker is None:
        return None
    settings = dict(marker.kwargs)
    if marker.args:
        settings.setdefault("cwd", marker.args[0])
    return settings


def _get_param_settings(request: pytest.FixtureRequest) -> dict[str, t.Any] | None:
    """Return indirect fixture parameter settings if present."""
    param = getattr(request, "param", None)
    if param is None:
        return None
    if isinstance(param, str):
        return {"cwd": param}
    if isinstance(param, dict):
        if "cwd" in param:
            return dict(param)
        keys = list(param.keys())
        msg = f"working_directory fixture param dict must contain 'cwd', got {keys}"
        raise TypeError(msg)
    msg = (
        "working_directory fixture param must be a str or dict with a 'cwd' key, "
        f"got {type(param).__name__}"
    )
    raise TypeError(msg)


def _working_directory_settings(request: pytest.FixtureRequest) -> dict[str, t.Any]:
    """Return the settings for the fixture."""
    # Priority order: marker > fixture param > INI setting
    settings = _get_marker_settings(request)
    if settings is None:
        settings = _get_param_settings(request)
    if settings is None:
        settings = {}
    settings.setdefault("cwd", str(request.config.getini("dualpath_cwd")))
    return settings


@pytest.fixture
def working_directory(
    request: pytest.FixtureRequest,
) -> t.Generator[WorkingDirectory, None, None]:
    """Resolve relative paths against a fixed directory for the test."""
    settings = _working_directory_settings(request)
    fixed = WorkingDirectory.fixed(settings["cwd"], settings.get("drives"))
    logger.debug("Using fixed working directory %s", settings["cwd"])
    with use_working_directory(fixed):
        yield fixed
