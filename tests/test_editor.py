"""
Tests for favcmd/editor.py
"""
import subprocess
from unittest.mock import patch

import pytest

from favcmd.constants import DEFAULT_EDITOR
from favcmd.editor import open_in_editor, resolve_editor
from favcmd.exceptions import FavCmdError


class TestResolveEditor:
    """Test editor selection priority."""

    def test_default(self):
        """Without configuration the fallback editor is used."""
        assert resolve_editor() == [DEFAULT_EDITOR]

    def test_editor_env(self, monkeypatch):
        """EDITOR is honored."""
        monkeypatch.setenv("EDITOR", "nano")
        assert resolve_editor() == ["nano"]

    def test_visual_beats_editor(self, monkeypatch):
        """VISUAL wins over EDITOR."""
        monkeypatch.setenv("EDITOR", "nano")
        monkeypatch.setenv("VISUAL", "vim")
        assert resolve_editor() == ["vim"]

    def test_configured_beats_env(self, monkeypatch):
        """The configured editor wins over the environment."""
        monkeypatch.setenv("EDITOR", "nano")
        assert resolve_editor("emacs -nw") == ["emacs", "-nw"]

    def test_editor_with_arguments(self, monkeypatch):
        """Editor commands are split like a shell would."""
        monkeypatch.setenv("EDITOR", "code --wait")
        assert resolve_editor() == ["code", "--wait"]

    def test_blank_env_ignored(self, monkeypatch):
        """Blank variables are ignored."""
        monkeypatch.setenv("EDITOR", "  ")
        assert resolve_editor() == [DEFAULT_EDITOR]


class TestOpenInEditor:
    """Test launching the editor."""

    def test_passes_path(self, tmp_path, monkeypatch):
        """The store path is passed to the editor."""
        monkeypatch.setenv("EDITOR", "nano")
        path = tmp_path / "commands.txt"
        with patch("favcmd.editor.subprocess.run",
                   return_value=subprocess.CompletedProcess([], 0)) as run:
            assert open_in_editor(path) == 0
        run.assert_called_once_with(["nano", str(path)])

    def test_nonzero_exit_is_returned(self, tmp_path, caplog):
        """A failing editor status is returned and logged."""
        with patch("favcmd.editor.subprocess.run",
                   return_value=subprocess.CompletedProcess([], 3)):
            assert open_in_editor(tmp_path / "f", "vim") == 3
        assert "status 3" in caplog.text

    def test_missing_editor(self, tmp_path):
        """An editor that cannot be found raises FavCmdError."""
        with patch("favcmd.editor.subprocess.run", side_effect=FileNotFoundError()):
            with pytest.raises(FavCmdError, match="not found"):
                open_in_editor(tmp_path / "f", "no-such-editor")
