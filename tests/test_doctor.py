"""Tests for the ``rotkit doctor`` command (cli/doctor.py).

Dependency detection is mocked, so no test depends on what is actually
installed.

Coverage:
* Individual check functions return correct tuples.
* Doctor returns SUCCESS when only warnings are present.
* Doctor returns GENERAL_ERROR when the Python check fails.
* Plain output path when Rich is unavailable.
* CLI routing dispatches to ``run_doctor``.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from rotkit.cli import exit_codes
from rotkit.infra.dependency_probe import DependencyStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _dep(name: str, *, found: bool = True) -> DependencyStatus:
    return DependencyStatus(
        name=name,
        found=found,
        version="1.2.3" if found else None,
        install_command=f"pip install {name}",
    )


def _all_found() -> tuple[DependencyStatus, ...]:
    return (_dep("rich"), _dep("questionary"))


def _questionary_missing() -> tuple[DependencyStatus, ...]:
    return (_dep("rich"), _dep("questionary", found=False))


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from rotkit.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status

    @patch("rotkit.cli.doctor.MIN_PYTHON", (99, 0))
    def test_fails_below_minimum(self) -> None:
        from rotkit.cli.doctor import _python_version_check

        _label, _value, status = _python_version_check()
        assert "FAIL" in status
        assert "99.0" in status


class TestDependencyCheck:
    def test_found(self) -> None:
        from rotkit.cli.doctor import _dependency_check

        label, value, status = _dependency_check(_dep("rich"))
        assert label == "rich"
        assert value == "1.2.3"
        assert "OK" in status

    def test_missing_is_warning(self) -> None:
        from rotkit.cli.doctor import _dependency_check

        label, value, status = _dependency_check(_dep("questionary", found=False))
        assert label == "questionary"
        assert value == "not installed"
        assert "WARN" in status


class TestOsCheck:
    def test_returns_tuple(self) -> None:
        from rotkit.cli.doctor import _os_check

        label, value, status = _os_check()
        assert label == "OS"
        assert isinstance(value, str)
        assert "OK" in status

    @patch("rotkit.cli.doctor.platform.machine", return_value="arm64")
    @patch("rotkit.cli.doctor.platform.release", return_value="23.4.0")
    @patch("rotkit.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from rotkit.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert "macOS" in value
        assert "Darwin" not in value


class TestRotkitVersionCheck:
    def test_returns_current_version(self) -> None:
        from rotkit.cli.doctor import _rotkit_version_check
        from rotkit.version import __version__

        label, value, status = _rotkit_version_check()
        assert label == "rotkit"
        assert value == __version__
        assert "OK" in status


class TestStatusPlain:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("[green]OK[/green]", "OK"),
            ("[yellow]WARN[/yellow]", "WARN"),
            ("[red]FAIL (>=3.10 required)[/red]", "FAIL"),
            ("???", "???"),
        ],
    )
    def test_strips_markup(self, status: str, expected: str) -> None:
        from rotkit.cli.doctor import _status_plain

        assert _status_plain(status) == expected


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("rotkit.cli.doctor.detect_optional_dependencies")
    def test_all_pass_returns_success(self, mock_detect: MagicMock) -> None:
        from rotkit.cli.doctor import run_doctor

        mock_detect.return_value = _all_found()
        assert run_doctor() == exit_codes.SUCCESS

    @patch("rotkit.cli.doctor.detect_optional_dependencies")
    def test_missing_package_still_succeeds(self, mock_detect: MagicMock) -> None:
        """A missing UI package is a WARN, not a FAIL."""
        from rotkit.cli.doctor import run_doctor

        mock_detect.return_value = _questionary_missing()
        assert run_doctor() == exit_codes.SUCCESS

    @patch("rotkit.cli.doctor.MIN_PYTHON", (99, 0))
    @patch("rotkit.cli.doctor.detect_optional_dependencies")
    def test_python_failure_returns_general_error(self, mock_detect: MagicMock) -> None:
        from rotkit.cli.doctor import run_doctor

        mock_detect.return_value = _all_found()
        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch("rotkit.cli.doctor.detect_optional_dependencies")
    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_lists_install_guidance(
        self,
        mock_detect: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from rotkit.cli.doctor import run_doctor

        mock_detect.return_value = _questionary_missing()
        code = run_doctor()

        captured = capsys.readouterr()
        assert code == exit_codes.SUCCESS
        assert "rotkit doctor" in captured.err
        assert "pip install questionary" in captured.err
        assert "All checks passed." in captured.err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("rotkit.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches(self, mock_run: MagicMock) -> None:
        from rotkit.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.SUCCESS
        mock_run.assert_called_once()

    @patch("rotkit.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, mock_run: MagicMock) -> None:
        from rotkit.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.GENERAL_ERROR
