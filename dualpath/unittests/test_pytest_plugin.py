"""Unit tests for the pytest plugin."""

from __future__ import annotations

import dataclasses as dc
import textwrap

import pytest

from dualpath import posix
from dualpath.environment import WorkingDirectory, active_working_directory

pytest_plugins = ("dualpath.pytest_plugin", "pytester")


@dc.dataclass(slots=True, frozen=True)
class ConfigurationTestCase:
    """Test case data for working-directory configuration scenarios."""

    ini_setting: str | None
    test_decorator: str
    expected_cwd: str


def test_fixture_activates_override(working_directory: WorkingDirectory) -> None:
    """The fixture's collaborator is active for the whole test."""
    assert active_working_directory() is working_directory
    assert posix.resolve("a") == working_directory.current() + "/a"


@pytest.mark.dualpath_cwd("/marked", drives={"D:": "D:\\data"})
def test_marker_in_process(working_directory: WorkingDirectory) -> None:
    """Marker arguments configure the current and drive directories."""
    assert working_directory.current() == "/marked"
    assert working_directory.drive("d:") == "D:\\data"


@pytest.mark.parametrize(
    "working_directory",
    ["/from-param", {"cwd": "/from-dict", "drives": {"E:": "E:\\x"}}],
    indirect=True,
)
def test_indirect_param_in_process(working_directory: WorkingDirectory) -> None:
    """Indirect parameters may be a string or a settings dict."""
    assert working_directory.current() in {"/from-param", "/from-dict"}


@pytest.mark.parametrize(
    "test_case",
    [
        pytest.param(
            ConfigurationTestCase(
                ini_setting=None,
                test_decorator="",
                expected_cwd="/dualpath",
            ),
            id="default",
        ),
        pytest.param(
            ConfigurationTestCase(
                ini_setting="dualpath_cwd = /srv/app",
                test_decorator="",
                expected_cwd="/srv/app",
            ),
            id="ini-setting",
        ),
        pytest.param(
            ConfigurationTestCase(
                ini_setting="dualpath_cwd = /srv/app",
                test_decorator='@pytest.mark.dualpath_cwd("/from-marker")',
                expected_cwd="/from-marker",
            ),
            id="marker-beats-ini",
        ),
        pytest.param(
            ConfigurationTestCase(
                ini_setting="dualpath_cwd = /srv/app",
                test_decorator=(
                    '@pytest.mark.parametrize("working_directory", '
                    '["/from-param"], indirect=True)'
                ),
                expected_cwd="/from-param",
            ),
            id="param-beats-ini",
        ),
        pytest.param(
            ConfigurationTestCase(
                ini_setting=None,
                test_decorator=(
                    '@pytest.mark.dualpath_cwd(cwd="/from-marker")\n'
                    '@pytest.mark.parametrize("working_directory", '
                    '["/from-param"], indirect=True)'
                ),
                expected_cwd="/from-marker",
            ),
            id="marker-beats-param",
        ),
    ],
)
def test_configuration_priority(
    pytester: pytest.Pytester, test_case: ConfigurationTestCase
) -> None:
    """Marker settings beat fixture params, which beat the ini option."""
    if test_case.ini_setting is not None:
        pytester.makeini(f"[pytest]\n{test_case.ini_setting}\n")
    expected_resolved = f"{test_case.expected_cwd}/x"

    test_module = textwrap.dedent(
        f"""
        import pytest

        from dualpath import posix

        pytest_plugins = ("dualpath.pytest_plugin",)

        {{decorator}}
        def test_cwd(working_directory):
            assert working_directory.current() == {test_case.expected_cwd!r}
            assert posix.resolve("x") == {expected_resolved!r}
        """
    ).replace("{decorator}", test_case.test_decorator)
    pytester.makepyfile(test_module)
    result = pytester.runpytest()
    result.assert_outcomes(passed=1)


def test_override_removed_after_test(pytester: pytest.Pytester) -> None:
    """The fixture's collaborator does not leak into later tests."""
    pytester.makepyfile(
        """
        from dualpath.environment import (
            PROCESS_WORKING_DIRECTORY,
            active_working_directory,
        )

        pytest_plugins = ("dualpath.pytest_plugin",)

        def test_first(working_directory):
            assert active_working_directory() is working_directory

        def test_second():
            assert active_working_directory() is PROCESS_WORKING_DIRECTORY
        """
    )
    result = pytester.runpytest()
    result.assert_outcomes(passed=2)


@pytest.mark.parametrize(
    ("param", "message"),
    [
        ("42", "*TypeError: *param must be a str or dict with a 'cwd' key, got int*"),
        ('{"drives": {}}', "*TypeError: *param dict must contain 'cwd'*"),
    ],
    ids=["wrong-type", "missing-cwd"],
)
def test_invalid_param_errors(
    pytester: pytest.Pytester, param: str, message: str
) -> None:
    """Unsupported indirect parameters raise ``TypeError`` during setup."""
    pytester.makepyfile(
        f"""
        import pytest

        pytest_plugins = ("dualpath.pytest_plugin",)

        @pytest.mark.parametrize("working_directory", [{param}], indirect=True)
        def test_bad(working_directory):
            pass
        """
    )
    result = pytester.runpytest()
    result.assert_outcomes(errors=1)
    result.stdout.fnmatch_lines([message])


def test_marker_is_registered(pytester: pytest.Pytester) -> None:
    """The marker is documented by ``pytest --markers``."""
    pytester.makeconftest('pytest_plugins = ("dualpath.pytest_plugin",)')
    result = pytester.runpytest("--markers")
    result.stdout.fnmatch_lines(["@pytest.mark.dualpath_cwd(cwd: str*"])
