# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests:
#   - write_desktop   → factory writing *.desktop files under tmp_path
#   - selector        → scripted stand-in for the terminal menu
#   - registry        → records set_default calls, scripted results
#   - config          → fresh AppConfig, singleton reset around each test
# ==============================================

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pytest

from mimeselect.config import AppConfig, reset_config
from mimeselect.resolution.registry import DispatchResult, XdgMimeRegistry


class ScriptedSelector:
    """Answers prompts from a fixed list of responses."""

    def __init__(self, answers: Sequence[object] = ()):
        self.answers = list(answers)
        self.prompts: List[Tuple[List[str], str]] = []

    def select(self, items: Sequence[str], prompt: str) -> Optional[int]:
        self.prompts.append((list(items), prompt))
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer


class RecordingRegistry(XdgMimeRegistry):
    """Records every call instead of running xdg-mime."""

    def __init__(self, results: Sequence[DispatchResult] = ()):
        super().__init__()
        self.results = list(results)
        self.calls: List[Tuple[str, str]] = []

    def set_default(self, handler: str, mimetype: str) -> DispatchResult:
        self.calls.append((handler, mimetype))
        if self.results:
            return self.results.pop(0)
        return DispatchResult()


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure no test sees another test's cached config."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def selector() -> ScriptedSelector:
    return ScriptedSelector()


@pytest.fixture
def registry() -> RecordingRegistry:
    return RecordingRegistry()


@pytest.fixture
def write_desktop(tmp_path):
    """Return a function that writes a desktop file and returns its path."""

    def _write(relpath: str, content: str) -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


def desktop_entry(mime: Optional[str] = None, name: str = "App") -> str:
    """Minimal [Desktop Entry] body, with MimeType if given."""
    lines = ["[Desktop Entry]", "Type=Application", f"Name={name}", "Exec=app %U"]
    if mime is not None:
        lines.append(f"MimeType={mime}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def entry():
    return desktop_entry
