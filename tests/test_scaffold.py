"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* The public API is re-exported from the package root.
"""

from __future__ import annotations

import pytest

import print_ip
from print_ip import __version__
from print_ip.cli import exit_codes
from print_ip.cli.app import main
from print_ip.exceptions import (
    EnvironmentError,
    HeterogeneousSequenceError,
    HeterogeneousTupleError,
    IntegerRangeError,
    InvalidArgumentError,
    PrintIpError,
    UnsupportedTypeError,
    describe_type,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TestPublicApi:
    @pytest.mark.parametrize("name", print_ip.__all__)
    def test_exported_names_exist(self, name: str) -> None:
        assert hasattr(print_ip, name)

    def test_render_is_reexported(self) -> None:
        from print_ip.core.renderer import render

        assert print_ip.render is render


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UnsupportedTypeError,
            HeterogeneousTupleError,
            HeterogeneousSequenceError,
            IntegerRangeError,
            InvalidArgumentError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[PrintIpError]
    ) -> None:
        assert issubclass(exc_class, PrintIpError)

    @pytest.mark.parametrize(
        "exc_class",
        [UnsupportedTypeError, HeterogeneousTupleError, HeterogeneousSequenceError],
    )
    def test_type_errors_are_type_errors(self, exc_class: type[PrintIpError]) -> None:
        assert issubclass(exc_class, TypeError)

    def test_range_error_is_value_error(self) -> None:
        assert issubclass(IntegerRangeError, ValueError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(PrintIpError, Exception)

    def test_hint_is_stored(self) -> None:
        err = PrintIpError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = UnsupportedTypeError("boom")
        assert err.hint is None


class TestDescribeType:
    def test_builtin_is_bare_name(self) -> None:
        assert describe_type(1.5) == "float"

    def test_package_type_is_qualified(self) -> None:
        from print_ip.core.models import UInt8

        assert describe_type(UInt8(1)) == "print_ip.core.models.UInt8"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage: print-ip" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_doctor_routes_to_run_doctor(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from print_ip.cli import doctor

        monkeypatch.setattr(doctor, "run_doctor", lambda: exit_codes.SUCCESS)
        assert main(["doctor"]) == exit_codes.SUCCESS

    def test_demo_routes_to_run_demo(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from print_ip.cli import demo

        monkeypatch.setattr(demo, "run_demo", lambda: exit_codes.GENERAL_ERROR)
        assert main(["demo"]) == exit_codes.GENERAL_ERROR

    def test_unknown_command_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["bogus"])
        assert exc_info.value.code == 2
