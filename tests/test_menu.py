"""
Tests for ui/menu.py and ui/header.py — menu rendering.
"""

from unittest.mock import patch

from fedpost.launcher.entries import MENU_ENTRIES, MenuEntry
from fedpost.ui.header import build_header
from fedpost.ui.menu import render_entry, render_menu
from fedpost.ui.theme import MENU_CURSOR, NAV_HINT


_INFO = {
    "pretty_name": "Fedora Linux 41 (Workstation Edition)",
    "machine": "x86_64",
}


class TestRenderEntry:
    def test_selected_entry_has_cursor(self):
        text = render_entry(0, MENU_ENTRIES[0], selected=True)
        assert text.plain.startswith(f"  {MENU_CURSOR} System Configuration")

    def test_unselected_entry_is_numbered(self):
        text = render_entry(3, MENU_ENTRIES[3], selected=False)
        assert text.plain.startswith("  3) Virtualization Stack")

    def test_description_on_second_line(self):
        text = render_entry(1, MENU_ENTRIES[1], selected=False)
        first, second = text.plain.split("\n")
        assert "Packages Installation" in first
        assert second.strip() == MENU_ENTRIES[1].description

    def test_entry_without_description_is_one_line(self):
        text = render_entry(6, MenuEntry("Exit", ""), selected=False)
        assert "\n" not in text.plain

    def test_selected_entry_uses_reverse_video(self):
        text = render_entry(0, MENU_ENTRIES[0], selected=True)
        assert any("reverse" in str(span.style) for span in text.spans)


class TestRenderMenu:
    def test_exactly_one_cursor(self, console_buf):
        con, buf = console_buf
        with patch("fedpost.ui.header.get_system_info", return_value=_INFO):
            render_menu(con, MENU_ENTRIES, selected=2)
        output = buf.getvalue()
        assert output.count(MENU_CURSOR) == 1
        assert f"{MENU_CURSOR} Development Environment Installation" in output

    def test_lists_every_entry(self, console_buf):
        con, buf = console_buf
        with patch("fedpost.ui.header.get_system_info", return_value=_INFO):
            render_menu(con, MENU_ENTRIES, selected=0)
        output = buf.getvalue()
        for entry in MENU_ENTRIES:
            assert entry.label in output

    def test_footer_hint_printed_last(self, console_buf):
        con, buf = console_buf
        with patch("fedpost.ui.header.get_system_info", return_value=_INFO):
            render_menu(con, MENU_ENTRIES, selected=0)
        assert buf.getvalue().rstrip().endswith(NAV_HINT)


class TestHeader:
    def test_title_and_identity(self, console_buf):
        con, buf = console_buf
        with patch("fedpost.ui.header.get_system_info", return_value=_INFO):
            con.print(build_header())
        output = buf.getvalue()
        assert "FEDORA POST-INSTALL TOOL" in output
        assert "Fedora Linux 41 (Workstation Edition)" in output
        assert "x86_64" in output

    def test_missing_identity_still_renders(self, console_buf):
        con, buf = console_buf
        with patch("fedpost.ui.header.get_system_info", return_value={}):
            con.print(build_header())
        assert "FEDORA POST-INSTALL TOOL" in buf.getvalue()
