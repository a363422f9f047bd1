"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the list view, status line, and modal screens.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    path: str
    cursor: str
    filter_query: str
    filter_hint: str
    error: str
    scroll_hint: str
    footer: str
    emphasis: str
    dim: str
    help_title: str
    delete_title: str
    create_title: str
    archive_title: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    path="\033[1;34m",
    cursor="\033[1;34m",
    filter_query="\033[33m",
    filter_hint="\033[90m",
    error="\033[31m",
    scroll_hint="\033[90m",
    footer="\033[48;5;236m\033[97m",
    emphasis="\033[1m",
    dim="\033[90m",
    help_title="\033[1;34m",
    delete_title="\033[1;31m",
    create_title="\033[1;32m",
    archive_title="\033[1;33m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    path="\033[1;38;5;45m",
    cursor="\033[1;38;5;39m",
    filter_query="\033[1;38;5;81m",
    filter_hint="\033[2;38;5;110m",
    error="\033[38;5;203m",
    scroll_hint="\033[2;38;5;110m",
    footer="\033[48;5;24m\033[97m",
    emphasis="\033[1;38;5;153m",
    dim="\033[2;38;5;110m",
    help_title="\033[1;38;5;39m",
    delete_title="\033[1;38;5;203m",
    create_title="\033[1;38;5;84m",
    archive_title="\033[1;38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    path="",
    cursor="",
    filter_query="",
    filter_hint="",
    error="",
    scroll_hint="",
    footer="",
    emphasis="",
    dim="",
    help_title="",
    delete_title="",
    create_title="",
    archive_title="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return theme names in display order."""
    return tuple(_THEMES)


def resolve_theme(name: str | None, no_color: bool = False) -> UITheme:
    """Return the named theme; unknown names use the default palette."""
    if no_color:
        return PLAIN_THEME
    if name is None:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
