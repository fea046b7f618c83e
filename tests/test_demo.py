"""End-to-end tests for the demo driver."""

import logging
import os
import runpy
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

from design_patterns.cli import demo
from design_patterns.cli.demo import main, run_all
from design_patterns.core.exceptions import StrategyNotConfiguredError

PROJECT_ROOT = Path(__file__).resolve().parent.parent

TRANSCRIPT = (
    "sape\n"
    "sape\n"
    "Pepe\n"
    "This is the 'Request from the client'\n"
    "30% OFF on Tesla cars, new price is: $700\n"
    "State 1 action.\n"
    "State 2 action.\n"
    "State 1 action.\n"
    "1, 2, 3, 4, 5, \n"
    "5, 4, 3, 2, 1, \n"
)


class TestDemo:
    """Test cases for the demo driver."""

    def test_transcript(self, capsys):
        """main() prints the exact transcript and returns 0."""
        assert main() == 0

        assert capsys.readouterr().out == TRANSCRIPT

    def test_run_all_with_custom_sink(self, lines):
        run_all(lines.append)

        assert "\n".join(lines) + "\n" == TRANSCRIPT

    def test_module_entry_point(self, capsys):
        """python -m design_patterns exits with 0."""
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("design_patterns", run_name="__main__")

        assert exc_info.value.code == 0
        assert capsys.readouterr().out == TRANSCRIPT

    def test_stage_errors_are_logged_and_raised(self, monkeypatch, caplog, lines):
        """A failing stage is logged with its name and propagates."""

        def broken(emit):
            demo.StrategyContext(emit=emit).do_some_business_logic()

        monkeypatch.setattr(demo, "STAGES", (("strategy", broken),))

        with caplog.at_level(logging.ERROR, logger="design_patterns"):
            with pytest.raises(StrategyNotConfiguredError):
                run_all(lines.append)

        assert "Stage 'strategy' failed" in caplog.text
        assert lines == []


def _run(command, log_level="WARNING"):
    env = dict(os.environ)
    env.pop("DESIGN_PATTERNS_LOG_DIR", None)
    env["DESIGN_PATTERNS_LOG_LEVEL"] = log_level
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")])
    )
    return subprocess.run(
        command,
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


class TestEntryPoints:
    """Runs the demo in a separate interpreter."""

    def test_debug_logging_keeps_stdout_clean(self):
        """DEBUG logs go to stderr and leave the transcript untouched."""
        result = _run([sys.executable, "-m", "design_patterns"], log_level="DEBUG")

        assert result.returncode == 0
        assert result.stdout == TRANSCRIPT
        assert "State transition" in result.stderr
        assert "Strategy changed" in result.stderr

    def test_default_logging_is_quiet(self):
        result = _run([sys.executable, "-m", "design_patterns"])

        assert result.returncode == 0
        assert result.stdout == TRANSCRIPT
        assert "State transition" not in result.stderr

    def test_run_demo_script(self):
        result = _run([sys.executable, str(PROJECT_ROOT / "scripts" / "run_demo.py")])

        assert result.returncode == 0
        assert result.stdout == TRANSCRIPT

    def test_console_script(self):
        executable = shutil.which("design-patterns-demo")
        if executable is None:
            pytest.skip("package not installed")

        result = _run([executable])

        assert result.returncode == 0
        assert result.stdout == TRANSCRIPT
