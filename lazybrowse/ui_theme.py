"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the listing chrome, the entry rows, and the
rename box. ``--no-color`` always resolves to the plain theme.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    header: str
    directory: str
    file: str
    status: str
    status_error: str
    placeholder: str
    editor_border: str
    editor_title: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    header="\033[1;40;37m",
    directory="\033[34m",
    file="",
    status="\033[2;38;5;250m",
    status_error="\033[1;38;5;203m",
    placeholder="\033[2m",
    editor_border="\033[38;5;45m",
    editor_title="\033[1;38;5;45m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    header="\033[1;48;5;24;38;5;231m",
    directory="\033[1;38;5;45m",
    file="\033[38;5;252m",
    status="\033[2;38;5;110m",
    status_error="\033[1;38;5;215m",
    placeholder="\033[2;38;5;110m",
    editor_border="\033[38;5;39m",
    editor_title="\033[1;38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    header="",
    directory="",
    file="",
    status="",
    status_error="",
    placeholder="",
    editor_border="",
    editor_title="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
