import os

import pytest

from favcmd import config as config_module
from favcmd.models import Command
from favcmd.selector import Selector
from favcmd.store import CommandStore


class StubSelector(Selector):
    """Selector that picks a line without a terminal."""

    def __init__(self, choose=None):
        self.choose = choose
        self.calls = []

    def present(self, lines):
        self.calls.append(list(lines))
        if callable(self.choose):
            return self.choose(lines)
        return self.choose


@pytest.fixture(autouse=True)
def config_root(tmp_path, monkeypatch):
    """Point the config root at a temp dir and clear user overrides."""
    root = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(root))
    for key in list(os.environ):
        if key.startswith("FAVCMD_"):
            monkeypatch.delenv(key)
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    return root


@pytest.fixture
def store_path(config_root):
    return config_root / "fav-cmd" / "commands.txt"


@pytest.fixture
def store(store_path):
    store = CommandStore(store_path)
    store.ensure_exists()
    return store


@pytest.fixture
def sample_commands():
    """Sample command records for testing."""
    return [
        Command("a", "d1", "c1"),
        Command("b", "d2", "c2"),
        Command("git-status", "Show working tree status", "git status"),
    ]


@pytest.fixture
def populated_store(store, sample_commands):
    store.replace_all(sample_commands)
    return store


@pytest.fixture
def pick_name():
    """Chooser factory: picks the first display line whose name column matches."""
    def by_name(name):
        def choose(lines):
            for line in lines:
                if line.split(" | ", 1)[0].rstrip() == name:
                    return line
            return None
        return choose
    return by_name


@pytest.fixture
def make_selector():
    """Factory for stub selectors: a fixed line, None, or a chooser callable."""
    return StubSelector
