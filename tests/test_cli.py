# ==============================================
# Tests for CLI
# ==============================================

import logging

import pytest

from mimeselect import app as app_module
from mimeselect import cli
from mimeselect.discovery import locator

from conftest import ScriptedSelector


@pytest.fixture
def run_env(tmp_path, monkeypatch, write_desktop, entry):
    """A fake system dir, no user dir, a tty-looking stderr and a scripted menu."""
    write_desktop("system/a.desktop", entry("text/plain;"))
    write_desktop("system/b.desktop", entry("text/plain;image/png;"))

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MIMESELECT_SYSTEM_DIR", str(tmp_path / "system"))
    monkeypatch.setattr(locator, "_home_dir", lambda: None)
    monkeypatch.setattr(cli, "configure_logging", lambda config: None)
    monkeypatch.setattr(cli, "stderr_is_terminal", lambda: True)

    selector = ScriptedSelector()
    monkeypatch.setattr(app_module, "TerminalSelector", lambda: selector)
    return monkeypatch, selector


def test_refuses_non_terminal_stderr(monkeypatch, caplog):
    monkeypatch.setattr(cli, "configure_logging", lambda config: None)
    monkeypatch.setattr(cli, "stderr_is_terminal", lambda: False)

    with caplog.at_level(logging.ERROR):
        assert cli.main([]) == 1
    assert "requires that stderr is a terminal" in caplog.text


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert "mimeselect" in capsys.readouterr().out


def test_dry_run_completes(run_env, caplog):
    monkeypatch, selector = run_env
    selector.answers = [0]

    with caplog.at_level(logging.INFO):
        assert cli.main(["--dry-run"]) == 0

    assert "Found 3 total options for 2 total MIME types." in caplog.text
    running = [r.getMessage() for r in caplog.records if "Running xdg-mime default" in r.getMessage()]
    assert len(running) == 2
    assert all(message.startswith("[dry run] ") for message in running)
    assert len(selector.prompts) == 1


def test_non_zero_exit_is_not_fatal(run_env, caplog):
    monkeypatch, selector = run_env
    selector.answers = [None]
    monkeypatch.setenv("MIMESELECT_REGISTRY_COMMAND", "sh -c 'exit 3' sh")

    with caplog.at_level(logging.INFO):
        assert cli.main([]) == 0

    assert "Skipping type text/plain" in caplog.text
    assert "sh exited with non-zero code 3!" in caplog.text


def test_signal_is_fatal(run_env, caplog):
    monkeypatch, selector = run_env
    selector.answers = [0]
    monkeypatch.setenv("MIMESELECT_REGISTRY_COMMAND", "sh -c 'kill -9 $$' sh")

    with caplog.at_level(logging.ERROR):
        assert cli.main([]) == 1

    assert "sh was terminated by signal, aborting." in caplog.text


def test_log_level_flag_overrides_env(run_env):
    monkeypatch, selector = run_env
    selector.answers = [None]
    seen = []
    monkeypatch.setattr(cli, "configure_logging", lambda config: seen.append(config.level))

    cli.main(["--log-level", "debug", "--dry-run"])

    assert seen == ["debug"]
