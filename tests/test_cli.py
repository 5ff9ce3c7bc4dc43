"""End-to-end tests for the command dispatcher (cli/app.py).

Every command runs through :func:`cli` (the error boundary) against a
fake CPU root passed with ``--root``; exit codes come from the
``SystemExit`` raised by ``cli``.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from conftest import UNWRITABLE, MakeCpuRoot
from cpugov.cli import exit_codes
from cpugov.cli.app import cli, main
from cpugov.infra.sysfs import governor_path

EXPECTED_LIST = (
    "conservative\n"
    "ondemand\n"
    "userspace\n"
    "powersave\n"
    "performance\n"
    "schedutil\n"
)


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        cli(argv)
    code = exc_info.value.code
    assert isinstance(code, int)
    return code


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------

class TestList:
    @pytest.mark.parametrize("command", ["list", "l"])
    def test_prints_six_governors(
        self, command: str, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run([command])
        out = capsys.readouterr().out

        assert code == exit_codes.SUCCESS
        assert out == EXPECTED_LIST

    def test_independent_of_system_state(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run(["--root", str(tmp_path / "missing"), "list"])

        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == EXPECTED_LIST


# ---------------------------------------------------------------------------
# get-current
# ---------------------------------------------------------------------------

class TestGetCurrent:
    @pytest.mark.parametrize("command", ["get-current", "g"])
    def test_prints_raw_contents_per_core(
        self,
        command: str,
        make_cpu_root: MakeCpuRoot,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        root = make_cpu_root(
            {"cpu10": "powersave\n", "cpu2": "ondemand\n", "cpu0": "performance\n"},
            extra_dirs=["cpufreq", "cpuidle"],
        )
        code = _run(["--root", str(root), command])

        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == (
            "cpu0: performance\ncpu2: ondemand\ncpu10: powersave\n"
        )

    @pytest.mark.parametrize(
        "raw",
        [b"a\tb\x08c\n", b"ondemand\r\n", b"[bold]x[/bold] :smile:\n"],
    )
    def test_contents_printed_verbatim(
        self,
        raw: bytes,
        make_cpu_root: MakeCpuRoot,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        root = make_cpu_root({"cpu0": ""})
        governor_path(root, "cpu0").write_bytes(raw)
        code = _run(["--root", str(root), "g"])

        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "cpu0: " + raw.decode("utf-8")

    def test_first_read_failure_aborts(
        self, make_cpu_root: MakeCpuRoot, capsys: pytest.CaptureFixture[str],
    ) -> None:
        root = make_cpu_root(
            {"cpu0": "ondemand\n", "cpu1": None, "cpu2": "ondemand\n"},
        )
        code = _run(["--root", str(root), "get-current"])
        captured = capsys.readouterr()

        assert code == exit_codes.GENERAL_ERROR
        assert captured.out == "cpu0: ondemand\n"
        assert "cpu2" not in captured.out
        assert "cpu1" in captured.err

    def test_enumeration_failure_exits_non_zero(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run(["--root", str(tmp_path / "missing"), "get-current"])
        captured = capsys.readouterr()

        assert code == exit_codes.GENERAL_ERROR
        assert captured.out == ""
        assert "Cannot list CPUs" in captured.err


# ---------------------------------------------------------------------------
# set
# ---------------------------------------------------------------------------

class TestSet:
    @pytest.mark.parametrize("command", ["set", "s"])
    def test_writes_every_core(
        self,
        command: str,
        make_cpu_root: MakeCpuRoot,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        root = make_cpu_root({"cpu0": "ondemand\n", "cpu1": "ondemand\n"})
        code = _run(["--root", str(root), command, "performance"])
        out = capsys.readouterr().out

        assert code == exit_codes.SUCCESS
        assert governor_path(root, "cpu0").read_text() == "performance"
        assert governor_path(root, "cpu1").read_text() == "performance"
        assert "cpu0" in out and "cpu1" in out

    def test_invalid_value_writes_nothing(
        self, make_cpu_root: MakeCpuRoot, capsys: pytest.CaptureFixture[str],
    ) -> None:
        root = make_cpu_root({"cpu0": "ondemand\n", "cpu1": "ondemand\n"})
        code = _run(["--root", str(root), "set", "badvalue"])
        captured = capsys.readouterr()

        assert code == exit_codes.GENERAL_ERROR
        assert "Invalid governor: badvalue" in captured.err
        assert captured.out == ""
        assert governor_path(root, "cpu0").read_text() == "ondemand\n"
        assert governor_path(root, "cpu1").read_text() == "ondemand\n"

    def test_invalid_value_checked_before_enumeration(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run(["--root", str(tmp_path / "missing"), "set", "badvalue"])

        assert code == exit_codes.GENERAL_ERROR
        assert "Invalid governor" in capsys.readouterr().err

    def test_partial_failure_still_succeeds(
        self, make_cpu_root: MakeCpuRoot, capsys: pytest.CaptureFixture[str],
    ) -> None:
        root = make_cpu_root({"cpu0": "ondemand\n", "cpu1": UNWRITABLE})
        code = _run(["--root", str(root), "set", "performance"])
        captured = capsys.readouterr()

        assert code == exit_codes.SUCCESS
        assert governor_path(root, "cpu0").read_text() == "performance"
        assert "cpu0" in captured.out
        assert "cpu1" not in captured.out
        assert "cpu1" in captured.err

    def test_failure_does_not_stop_later_cores(
        self, make_cpu_root: MakeCpuRoot, capsys: pytest.CaptureFixture[str],
    ) -> None:
        root = make_cpu_root(
            {"cpu0": UNWRITABLE, "cpu1": "ondemand\n"},
        )
        code = _run(["--root", str(root), "set", "schedutil"])

        assert code == exit_codes.SUCCESS
        assert governor_path(root, "cpu1").read_text() == "schedutil"

    def test_enumeration_failure_exits_non_zero(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run(["--root", str(tmp_path / "missing"), "set", "performance"])

        assert code == exit_codes.GENERAL_ERROR
        assert "Cannot list CPUs" in capsys.readouterr().err

    def test_round_trip_through_get_current(
        self, make_cpu_root: MakeCpuRoot, capsys: pytest.CaptureFixture[str],
    ) -> None:
        root = make_cpu_root({"cpu0": "ondemand\n"})
        _run(["--root", str(root), "set", "userspace"])
        capsys.readouterr()

        _run(["--root", str(root), "get-current"])
        assert capsys.readouterr().out == "cpu0: userspace"

    @patch("cpugov.cli.governor_prompt.prompt_governor_selection", return_value="powersave")
    def test_missing_value_prompts(
        self, mock_prompt: object, make_cpu_root: MakeCpuRoot,
    ) -> None:
        root = make_cpu_root({"cpu0": "ondemand\n"})
        code = main(["--root", str(root), "set"])

        assert code == exit_codes.SUCCESS
        assert governor_path(root, "cpu0").read_text() == "powersave"
        mock_prompt.assert_called_once()  # type: ignore[attr-defined]
        _args, kwargs = mock_prompt.call_args  # type: ignore[attr-defined]
        assert kwargs["current"] == "ondemand"

    @patch("cpugov.cli.governor_prompt.prompt_governor_selection", return_value="powersave")
    def test_prompt_current_is_none_when_unreadable(
        self, mock_prompt: object, make_cpu_root: MakeCpuRoot,
    ) -> None:
        root = make_cpu_root({"cpu0": None})
        main(["--root", str(root), "set"])

        _args, kwargs = mock_prompt.call_args  # type: ignore[attr-defined]
        assert kwargs["current"] is None


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_keyboard_interrupt(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("cpugov.cli.app.main", side_effect=KeyboardInterrupt):
            code = _run(["list"])
        assert code == exit_codes.KEYBOARD_INTERRUPT
        assert "Aborted" in capsys.readouterr().err

    def test_unexpected_exception(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("cpugov.cli.app.main", side_effect=RuntimeError("boom [x]")):
            code = _run(["list"])
        err = capsys.readouterr().err
        assert code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError" in err
        assert "boom [x]" in err

    def test_unknown_command_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["frobnicate"])
        assert exc_info.value.code == 2
