# ==============================================
# Tests for the Default-Handler Registry
# ==============================================
#
# `sh -c` stands in for xdg-mime so that real exit codes and real
# signals are observed.
# ==============================================

import logging
import subprocess

import pytest

from mimeselect.errors import DispatchAborted
from mimeselect.resolution import registry as registry_module
from mimeselect.resolution.registry import DispatchResult, DryRunRegistry, XdgMimeRegistry


class TestDispatchResult:

    def test_zero(self):
        result = DispatchResult.from_returncode(0)
        assert result.ok and not result.killed

    def test_non_zero(self):
        result = DispatchResult.from_returncode(3)
        assert not result.ok
        assert not result.killed
        assert result.returncode == 3

    def test_negative_means_signal(self):
        result = DispatchResult.from_returncode(-9)
        assert result.killed
        assert result.signal == 9
        assert result.returncode is None


class TestXdgMimeRegistry:

    def test_command_arguments(self, monkeypatch):
        seen = []

        def fake_run(cmd, check):
            seen.append(cmd)
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.setattr(registry_module.subprocess, "run", fake_run)

        result = XdgMimeRegistry().set_default("/usr/share/applications/b.desktop", "text/plain")

        assert result.ok
        assert seen == [["xdg-mime", "default", "/usr/share/applications/b.desktop", "text/plain"]]

    def test_real_exit_code(self):
        registry = XdgMimeRegistry(("sh", "-c", "exit 3", "sh"))

        assert registry.set_default("a.desktop", "text/plain") == DispatchResult(returncode=3)

    def test_real_signal(self):
        registry = XdgMimeRegistry(("sh", "-c", "kill -9 $$", "sh"))

        result = registry.set_default("a.desktop", "text/plain")

        assert result.killed
        assert result.signal == 9

    def test_missing_program_is_fatal(self):
        registry = XdgMimeRegistry(("mimeselect-no-such-program", "default"))

        with pytest.raises(DispatchAborted):
            registry.set_default("a.desktop", "text/plain")

    def test_name_and_program(self):
        registry = XdgMimeRegistry()
        assert registry.name == "xdg-mime default"
        assert registry.program == "xdg-mime"


class TestDryRunRegistry:

    def test_never_runs_and_stays_quiet(self, monkeypatch, caplog):
        def boom(*args, **kwargs):
            raise AssertionError("subprocess must not run")

        monkeypatch.setattr(registry_module.subprocess, "run", boom)

        with caplog.at_level(logging.INFO):
            result = DryRunRegistry().set_default("a.desktop", "text/plain")

        assert result.ok
        assert caplog.text == ""

    def test_flag(self):
        assert DryRunRegistry.dry_run is True
        assert XdgMimeRegistry.dry_run is False
