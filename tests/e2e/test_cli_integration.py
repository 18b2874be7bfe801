"""End-to-end tests of the command line entry point."""
import json
import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from pattern_catalogue.cli.catalogue import DEMOS
from pattern_catalogue.cli.main import main


@pytest.mark.usefixtures("clean_env")
class TestCLIIntegration:
    """Test complete CLI scenarios through main()."""

    def setup_method(self):
        """Set up test fixtures."""
        self.project_root = Path(__file__).parent.parent.parent

    def test_no_command(self, capsys):
        """Test running without a command fails with a hint."""
        assert main([]) == 1
        assert "No command specified" in capsys.readouterr().out

    def test_list_table(self, capsys):
        """Test listing every demo as a table."""
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert "NAME" in out
        assert "chain_of_responsibility" in out
        assert "flyweight" in out

    def test_list_family_json(self, capsys):
        """Test listing one family as JSON."""
        assert main(["list", "--family", "creational", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert {demo["family"] for demo in data["demos"]} == {"creational"}
        assert len(data["demos"]) == 5

    def test_run_single_demo(self, capsys):
        """Test running one demo prints only its transcript."""
        assert main(["run", "decorator"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("--- Coffee Shop with Decorator Pattern ---")
        assert "#####" not in out

    def test_run_several_demos_in_order(self, capsys):
        """Test several demos run in order with headers."""
        assert main(["run", "observer", "decorator"]) == 0
        out = capsys.readouterr().out
        assert out.index("##### behavioral/observer #####") < out.index("##### structural/decorator #####")

    def test_run_without_names(self, capsys):
        """Test run needs names or --all."""
        assert main(["run"]) == 1
        assert "No demos specified" in capsys.readouterr().out

    def test_run_unknown_demo(self, capsys):
        """Test an unknown demo is reported on stderr."""
        assert main(["run", "monostate"]) == 1
        assert "Error: Unknown demo: monostate" in capsys.readouterr().err

    def test_run_all(self, capsys, monkeypatch, tmp_path):
        """Test every demo runs in catalogue order."""
        monkeypatch.chdir(tmp_path)
        assert main(["run", "--all"]) == 0
        out = capsys.readouterr().out
        assert out.count("#####") == 2 * len(DEMOS)
        assert out.index("creational/factory") < out.index("behavioral/visitor") < out.index("architectural/repository")

    def test_config_file_drives_demo(self, capsys, tmp_path):
        """Test a configuration file changes demo capacities."""
        config_path = tmp_path / "config.yml"
        config_path.write_text("demos:\n  list_size: 2\n")
        assert main(["--config", str(config_path), "run", "iterator"]) == 0
        assert "MyList() : mSize(2)" in capsys.readouterr().out

    def test_invalid_config(self, capsys, tmp_path):
        """Test an invalid configuration stops before any demo runs."""
        config_path = tmp_path / "config.yml"
        config_path.write_text("demos:\n  remote_slots: 0\n")
        assert main(["--config", str(config_path), "run", "command"]) == 1
        captured = capsys.readouterr()
        assert "Invalid configuration" in captured.err
        assert "Smart Home" not in captured.out

    def test_debug_logs_go_to_stderr(self, capsys):
        """Test --log-level DEBUG writes logs to stderr and leaves stdout a transcript."""
        assert main(["--log-level", "DEBUG", "run", "state"]) == 0
        captured = capsys.readouterr()
        assert "Transition" in captured.err
        assert "Transition" not in captured.out

    def test_unexpected_error(self, capsys):
        """Test an unexpected exception inside a demo is reported."""
        with patch("pattern_catalogue.cli.main.run_demo", side_effect=RuntimeError("boom")):
            assert main(["run", "facade"]) == 1
        assert "Unexpected error: boom" in capsys.readouterr().err

    def test_keyboard_interrupt(self, capsys):
        """Test interruption exits with 130."""
        with patch("pattern_catalogue.cli.main.run_demo", side_effect=KeyboardInterrupt):
            assert main(["run", "facade"]) == 130

    def test_module_entry_point(self):
        """Test the package runs with python -m."""
        env = dict(os.environ)
        env["PYTHONPATH"] = str(self.project_root / "src")
        result = subprocess.run(
            [sys.executable, "-m", "pattern_catalogue", "run", "flyweight"],
            capture_output=True,
            text=True,
            env=env,
            cwd=self.project_root,
            timeout=60,
        )
        assert result.returncode == 0
        assert "Total particle instances: 6" in result.stdout

    def test_demo_module_runs_directly(self):
        """Test a demo module is runnable on its own."""
        env = dict(os.environ)
        env["PYTHONPATH"] = str(self.project_root / "src")
        result = subprocess.run(
            [sys.executable, "-m", "pattern_catalogue.patterns.structural.decorator.demo"],
            capture_output=True,
            text=True,
            env=env,
            timeout=60,
        )
        assert result.returncode == 0
        assert "Simple Coffee, Milk, Sugar, Whip: $3.40" in result.stdout
