"""
Shared pytest fixtures.
"""
from io import StringIO

import pytest
from rich.console import Console

from fedpost import system_info
from fedpost.ui.theme import FEDPOST_THEME


@pytest.fixture(autouse=True)
def clear_lru_caches():
    """Prevent lru_cache state from leaking between tests."""
    yield
    system_info.get_system_info.cache_clear()


@pytest.fixture
def console_buf() -> tuple[Console, StringIO]:
    """A themed Console that captures output in a StringIO buffer."""
    buf = StringIO()
    con = Console(file=buf, theme=FEDPOST_THEME, highlight=False, no_color=True, width=200)
    return con, buf


@pytest.fixture(autouse=True)
def no_debug_env(monkeypatch):
    """[DEBUG] lines are opt-in; keep a developer's DEBUG=1 out of test output."""
    monkeypatch.delenv("DEBUG", raising=False)
