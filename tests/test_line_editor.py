"""Tests for the prompt_toolkit line editor."""

from unittest.mock import MagicMock, patch

import pytest
from prompt_toolkit.history import DummyHistory, FileHistory, InMemoryHistory

from termprompt.config import Settings
from termprompt.errors import InputFailure, InputIOError
from termprompt.line_editor import PromptToolkitLineEditor


@pytest.mark.unit
class TestReadline:
    """Test reading lines through the session."""

    def test_returns_entered_line(self):
        """Test that the session's answer is returned unchanged."""
        session = MagicMock()
        session.prompt.return_value = " yes"
        editor = PromptToolkitLineEditor(session=session)

        assert editor.readline() == " yes"

    def test_prompt_text_is_passed_as_ansi(self):
        """Test that the prompt string keeps its escape sequences."""
        session = MagicMock()
        session.prompt.return_value = "y"
        editor = PromptToolkitLineEditor(session=session)

        editor.set_prompt("\x1b[1m? Continue?\x1b[0m ")
        editor.readline()

        (message,), _ = session.prompt.call_args
        assert message.value == "\x1b[1m? Continue?\x1b[0m "
        assert editor.prompt_text == "\x1b[1m? Continue?\x1b[0m "

    @pytest.mark.parametrize(
        "raised,reason",
        [
            (EOFError(), InputFailure.EOF),
            (KeyboardInterrupt(), InputFailure.INTERRUPT),
            (OSError("bad file descriptor"), InputFailure.TRANSPORT),
        ],
    )
    def test_failures_become_input_errors(self, raised, reason):
        """Test that read failures are translated and chained."""
        session = MagicMock()
        session.prompt.side_effect = raised
        editor = PromptToolkitLineEditor(session=session)

        with pytest.raises(InputIOError) as exc_info:
            editor.readline()

        assert exc_info.value.reason is reason
        assert exc_info.value.__cause__ is raised
        assert exc_info.value.default is None

    def test_interrupt_flag(self):
        """Test the interrupted convenience property."""
        session = MagicMock()
        session.prompt.side_effect = KeyboardInterrupt()
        editor = PromptToolkitLineEditor(session=session)

        with pytest.raises(InputIOError) as exc_info:
            editor.readline()

        assert exc_info.value.interrupted is True


@pytest.mark.unit
class TestSessionCreation:
    """Test lazy session creation."""

    @patch("termprompt.line_editor.PromptSession")
    def test_session_created_on_first_read(self, mock_session_cls):
        """Test that constructing an editor does not touch the terminal."""
        mock_session_cls.return_value.prompt.return_value = "n"
        editor = PromptToolkitLineEditor()

        mock_session_cls.assert_not_called()

        assert editor.readline() == "n"
        assert editor.readline() == "n"
        mock_session_cls.assert_called_once()

    @patch("termprompt.line_editor.PromptSession")
    def test_default_history_is_in_memory(self, mock_session_cls):
        """Test the default history."""
        PromptToolkitLineEditor().session

        _, kwargs = mock_session_cls.call_args
        assert isinstance(kwargs["history"], InMemoryHistory)

    @patch("termprompt.line_editor.PromptSession")
    def test_key_bindings_are_passed(self, mock_session_cls):
        """Test that custom key bindings reach the session."""
        bindings = MagicMock()

        PromptToolkitLineEditor(key_bindings=bindings).session

        _, kwargs = mock_session_cls.call_args
        assert kwargs["key_bindings"] is bindings


@pytest.mark.unit
class TestFromSettings:
    """Test building an editor from settings."""

    @patch("termprompt.line_editor.PromptSession")
    def test_history_enabled(self, mock_session_cls, temp_dir):
        """Test in-memory history by default."""
        PromptToolkitLineEditor.from_settings(Settings(project_dir=temp_dir)).session

        _, kwargs = mock_session_cls.call_args
        assert isinstance(kwargs["history"], InMemoryHistory)

    @patch("termprompt.line_editor.PromptSession")
    def test_history_disabled(self, mock_session_cls, temp_dir, monkeypatch):
        """Test that history can be turned off."""
        monkeypatch.setenv("TERMPROMPT_HISTORY", "false")

        PromptToolkitLineEditor.from_settings(Settings(project_dir=temp_dir)).session

        _, kwargs = mock_session_cls.call_args
        assert isinstance(kwargs["history"], DummyHistory)

    @patch("termprompt.line_editor.PromptSession")
    def test_history_file(self, mock_session_cls, temp_dir, monkeypatch):
        """Test that a history file replaces in-memory history."""
        history_path = temp_dir / "history"
        monkeypatch.setenv("TERMPROMPT_HISTORY_FILE", str(history_path))

        PromptToolkitLineEditor.from_settings(Settings(project_dir=temp_dir)).session

        _, kwargs = mock_session_cls.call_args
        assert isinstance(kwargs["history"], FileHistory)
        assert kwargs["history"].filename == str(history_path)

    @patch("termprompt.line_editor.PromptSession")
    def test_disabled_history_ignores_file(self, mock_session_cls, temp_dir, monkeypatch):
        """Test that turning history off wins over a configured history file."""
        history_path = temp_dir / "history"
        monkeypatch.setenv("TERMPROMPT_HISTORY", "false")
        monkeypatch.setenv("TERMPROMPT_HISTORY_FILE", str(history_path))

        PromptToolkitLineEditor.from_settings(Settings(project_dir=temp_dir)).session

        _, kwargs = mock_session_cls.call_args
        assert isinstance(kwargs["history"], DummyHistory)
        assert not history_path.exists()
