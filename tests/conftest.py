"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path
from typing import Generator, Iterable

import pytest

from termprompt.errors import InputFailure, InputIOError
from termprompt.line_editor import LineSource
from termprompt.render import Renderer


# Same wording as the prompt_toolkit line editor
FAILURE_MESSAGES = {
    InputFailure.EOF: "Input ended before an answer was given",
    InputFailure.INTERRUPT: "Prompt interrupted",
    InputFailure.TRANSPORT: "Cannot read input",
}


class ScriptedLineSource(LineSource):
    """Line source that replays a fixed list of lines.

    Once the lines run out it fails with ``failure`` (end of input by default).
    """

    def __init__(self, lines: Iterable[str], failure: InputFailure = InputFailure.EOF):
        self.lines = list(lines)
        self.failure = failure
        self.prompts: list[str] = []
        self.reads = 0

    def set_prompt(self, text: str):
        self.prompts.append(text)

    def readline(self) -> str:
        if not self.lines:
            raise InputIOError(FAILURE_MESSAGES[self.failure], self.failure)
        self.reads += 1
        return self.lines.pop(0)


class RecordingTerminal:
    """Terminal stand-in that records every call in order."""

    def __init__(self):
        self.calls: list[tuple] = []

    def write(self, text: str):
        self.calls.append(("write", text))

    def write_line(self, text: str):
        self.calls.append(("write_line", text))

    def move_cursor_up(self, lines: int = 1):
        self.calls.append(("move_cursor_up", lines))

    def erase_line(self):
        self.calls.append(("erase_line",))

    @property
    def lines_written(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "write_line"]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def plain_renderer() -> Renderer:
    """Renderer with styling disabled, for byte-exact assertions."""
    return Renderer(color_system=None)


@pytest.fixture
def terminal() -> RecordingTerminal:
    """Terminal that records calls instead of writing."""
    return RecordingTerminal()


@pytest.fixture
def scripted():
    """Factory for scripted line sources."""
    return ScriptedLineSource


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Isolate tests from actual environment variables."""
    config_keys = [
        "TERMPROMPT_COLOR",
        "TERMPROMPT_HISTORY",
        "TERMPROMPT_HISTORY_FILE",
        "TERMPROMPT_LOG_LEVEL",
        "NO_COLOR",
        "FORCE_COLOR",
    ]
    for key in config_keys:
        monkeypatch.delenv(key, raising=False)
