"""End-to-end tests for the tallyfile command line."""

import pytest
from typer.testing import CliRunner

from tallyfile.cli.app import app
from tallyfile.core.counter import INT64_MAX
from tallyfile.io import store as store_module

runner = CliRunner()


@pytest.fixture
def press(monkeypatch, keys):
    """Script the keys the CLI will read: ``press("+", "q")``."""

    def _press(*pressed):
        monkeypatch.setattr("readchar.readkey", keys(*pressed))

    return _press


class TestCLIHelp:
    """Tests for help, version and default config output."""

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "PATH" in result.stdout
        assert "START_VALUE" in result.stdout
        assert "--no-sync" in result.stdout

    def test_help_usage_shows_argument_names(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        usage = next(line for line in result.stdout.splitlines() if "Usage:" in line)
        assert "PATH" in usage
        assert "START_VALUE" in usage
        assert "{path}" not in result.stdout
        assert "[start_value]" not in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "tallyfile" in result.stdout

    def test_default_config(self):
        result = runner.invoke(app, ["--default-config"])
        assert result.exit_code == 0
        assert "[storage]" in result.stdout
        assert "[keys]" in result.stdout


class TestCounting:
    """Tests for the interactive loop through the CLI."""

    def test_count_up_and_quit(self, counter_path, press):
        press("+", "+", " ", "q")
        result = runner.invoke(app, [str(counter_path)])
        assert result.exit_code == 0
        assert counter_path.read_text() == "3"
        assert "Count: 3" in result.stdout

    def test_resumes_from_file(self, counter_path, press):
        counter_path.write_text("42\n")
        press("-", "q")
        result = runner.invoke(app, [str(counter_path)])
        assert result.exit_code == 0
        assert counter_path.read_text() == "41"

    def test_start_value_overrides_file(self, counter_path, press):
        counter_path.write_text("42")
        press("q")
        result = runner.invoke(app, [str(counter_path), "7"])
        assert result.exit_code == 0
        assert counter_path.read_text() == "7"

    def test_negative_start_value(self, counter_path, press):
        press("-", "q")
        result = runner.invoke(app, [str(counter_path), "--", "-5"])
        assert result.exit_code == 0
        assert counter_path.read_text() == "-6"

    def test_decrement_from_zero(self, counter_path, press):
        press("_", "Q")
        result = runner.invoke(app, [str(counter_path)])
        assert result.exit_code == 0
        assert counter_path.read_text() == "-1"

    def test_ctrl_c_quits_cleanly(self, counter_path, press):
        press("+", KeyboardInterrupt)
        result = runner.invoke(app, [str(counter_path)])
        assert result.exit_code == 0
        assert counter_path.read_text() == "1"

    def test_overflow_notice(self, counter_path, press):
        press("+", "q")
        result = runner.invoke(app, [str(counter_path), str(INT64_MAX)])
        assert result.exit_code == 0
        assert "overflow!" in result.stdout
        assert counter_path.read_text() == str(INT64_MAX)

    def test_no_sync_skips_data_sync(self, counter_path, press, monkeypatch):
        calls = []
        monkeypatch.setattr(store_module, "_sync_data", calls.append)
        press("+", "q")
        result = runner.invoke(app, [str(counter_path), "--no-sync"])
        assert result.exit_code == 0
        assert calls == []

    def test_sync_by_default(self, counter_path, press, monkeypatch):
        calls = []
        monkeypatch.setattr(store_module, "_sync_data", calls.append)
        press("+", "q")
        result = runner.invoke(app, [str(counter_path)])
        assert result.exit_code == 0
        # initial write plus one increment
        assert len(calls) == 2

    def test_newline_option(self, counter_path, press):
        press("q")
        result = runner.invoke(app, [str(counter_path), "3", "--newline"])
        assert result.exit_code == 0
        assert counter_path.read_text() == "3\n"

    def test_start_value_out_of_range(self, counter_path):
        result = runner.invoke(app, [str(counter_path), str(INT64_MAX + 1)])
        assert result.exit_code == 2
        assert not counter_path.exists()


class TestRecovery:
    """Tests for files holding non-counter data."""

    def test_refuse_overwrite(self, counter_path, press):
        counter_path.write_text("not-a-number")
        press("n")
        result = runner.invoke(app, [str(counter_path)])
        assert result.exit_code == 1
        assert "non-counter data" in result.output
        assert counter_path.read_text() == "not-a-number"

    def test_quit_at_prompt(self, counter_path, press):
        counter_path.write_text("not-a-number")
        press("q")
        result = runner.invoke(app, [str(counter_path)])
        assert result.exit_code == 1
        assert counter_path.read_text() == "not-a-number"

    def test_accept_overwrite(self, counter_path, press):
        counter_path.write_text("shopping list\neggs\n")
        press("x", "y", "+", "q")
        result = runner.invoke(app, [str(counter_path)])
        assert result.exit_code == 0
        assert counter_path.read_text() == "1"


class TestErrors:
    """Tests for failures surfaced at the top level."""

    def test_directory_path(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path)])
        assert result.exit_code == 1
        assert "Cannot open counter file" in result.output

    def test_missing_config(self, counter_path, tmp_path):
        result = runner.invoke(app, [str(counter_path), "--config", str(tmp_path / "nope.toml")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_clashing_keys_in_config(self, counter_path, tmp_path):
        config_file = tmp_path / "tally.toml"
        config_file.write_text('[keys]\nincrement = ["x"]\nquit = ["x"]\n')
        result = runner.invoke(app, [str(counter_path), "--config", str(config_file)])
        assert result.exit_code == 1
        assert "bound to both" in result.output


class TestConfigAndLogging:
    """Tests for configuration files and session logs."""

    def test_config_keys_and_storage(self, counter_path, tmp_path, press):
        config_file = tmp_path / "tally.toml"
        config_file.write_text(
            '[storage]\ntrailing_newline = true\n\n[keys]\nincrement = ["k"]\ndecrement = ["j"]\nquit = ["x"]\n'
        )
        press("+", "k", "k", "j", "x")
        result = runner.invoke(app, [str(counter_path), "--config", str(config_file)])
        assert result.exit_code == 0
        assert counter_path.read_text() == "1\n"
        assert "[k/j/x]" in result.stdout

    def test_log_file(self, counter_path, tmp_path, press):
        log_file = tmp_path / "tally.log"
        press("+", "q")
        result = runner.invoke(app, [str(counter_path), "--log-file", str(log_file)])
        assert result.exit_code == 0
        content = log_file.read_text()
        assert "Session Started" in content
        assert "Final count: 1" in content
