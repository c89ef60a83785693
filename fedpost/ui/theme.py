"""
fedpost visual design system.

All colors, styles, and icons as named constants.
Import from here — never hardcode markup strings in other modules.

The palette uses the 16 standard ANSI colors so the menu follows
whatever scheme the terminal (GNOME Terminal, Ptyxis, Konsole, a bare
VT) is configured with.
"""

from rich.theme import Theme


# ── Brand ─────────────────────────────────────────────────────────────────────

APP_TITLE = "FEDORA POST-INSTALL TOOL"


# ── Color palette ─────────────────────────────────────────────────────────────

COLOR_BANNER  = "bright_magenta"
COLOR_PRIMARY = "bright_blue"
COLOR_SUCCESS = "bright_green"
COLOR_WARNING = "bright_yellow"
COLOR_DANGER  = "bright_red"
COLOR_INFO    = "cyan"
COLOR_DEBUG   = "blue"
COLOR_DIM     = "bright_black"


# ── Glyphs ────────────────────────────────────────────────────────────────────

ICON_RUN     = "▶"
ICON_LAUNCH  = "🚀"
ICON_EXEC    = "📊"
ICON_OK      = "✅"
ICON_WARN    = "⚠"
ICON_FAIL    = "✘"
MENU_CURSOR  = "►"
RULE_CHAR    = "─"
RULE_WIDTH   = 58

NAV_HINT = "Use ↑↓ arrows to navigate, Enter to select"


# ── Rich Theme ────────────────────────────────────────────────────────────────

FEDPOST_THEME = Theme(
    {
        "banner":    f"{COLOR_BANNER} bold",
        "primary":   f"{COLOR_PRIMARY} bold",
        "success":   f"{COLOR_SUCCESS} bold",
        "warning":   f"{COLOR_WARNING} bold",
        "danger":    f"{COLOR_DANGER} bold",
        "info":      COLOR_INFO,
        "debug":     f"{COLOR_DEBUG} bold",
        "dim":       COLOR_DIM,
        "highlight": "reverse",
    }
)
