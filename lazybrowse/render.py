"""Frame builders for the listing screen and the rename box.

Each builder returns one string of ANSI output; the runtime writes it with a
single ``os.write`` so a repaint never interleaves with other output.
Screen rows: the directory header on row 1, entries below it, and the status
line on the last row.
"""

from __future__ import annotations

from .browser import Browser
from .line_editor import LineEditor
from .text import clip_text, display_width, sanitize_name
from .ui_theme import DEFAULT_THEME, UITheme

HEADER_ROWS = 1
STATUS_ROWS = 1
CHROME_ROWS = HEADER_ROWS + STATUS_ROWS
EMPTY_PLACEHOLDER = "(empty)"


def move_to(col: int, row: int) -> str:
    return f"\033[{max(1, row)};{max(1, col)}H"


def viewport_rows_for(terminal_rows: int) -> int:
    """Rows available for entries once header and status are reserved."""
    return max(1, terminal_rows - CHROME_ROWS)


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def _padded(text: str, width: int) -> str:
    return text + " " * max(0, width - display_width(text))


def build_status_text(browser: Browser) -> str:
    """Transient message when one is pending, otherwise the entry position."""
    if browser.status_message:
        return browser.status_message
    total = len(browser.entries)
    index = browser.selected_index()
    if index is None or total == 0:
        return "0/0"
    return f"{index + 1}/{total}"


def build_browser_frame(browser: Browser, columns: int, rows: int, theme: UITheme = DEFAULT_THEME) -> str:
    """Repaint the whole listing screen and park the cursor on the selection.

    Applies the measured viewport height first, so ``visible_count`` always
    reflects what this frame draws.
    """
    width = max(1, columns)
    browser.set_viewport_rows(viewport_rows_for(rows))
    view = browser.view
    out: list[str] = ["\033[H\033[2J"]

    header = clip_text(sanitize_name(str(browser.current_directory or "")), width)
    out.append(move_to(1, 1))
    out.append(_styled(_padded(header, width), theme.header, theme))

    entries = browser.entries
    if not entries:
        out.append(move_to(1, HEADER_ROWS + 1))
        out.append(_styled(EMPTY_PLACEHOLDER, theme.placeholder, theme))
    for row, index in enumerate(view.visible_range(), start=1):
        entry = entries[index]
        name = clip_text(sanitize_name(entry.name), width)
        style = theme.directory if entry.is_dir else theme.file
        if row == view.cursor_row:
            style = f"{style}{theme.reverse}"
            name = _padded(name, width)
        out.append(move_to(1, HEADER_ROWS + row))
        out.append(_styled(name, style, theme))

    status = clip_text(sanitize_name(build_status_text(browser)), width)
    status_style = theme.status_error if browser.status_is_error else theme.status
    out.append(move_to(1, max(HEADER_ROWS + 1, rows)))
    out.append(_styled(status, status_style, theme))

    out.append(move_to(1, HEADER_ROWS + view.cursor_row))
    return "".join(out)


def editor_view_start(editor: LineEditor) -> int:
    """First content offset shown so the cursor stays inside the box."""
    return max(0, editor.offset - (editor.geometry.width - 1))


def build_editor_frame(editor: LineEditor, theme: UITheme = DEFAULT_THEME) -> str:
    """Draw the rename box over the listing and place the cursor in it."""
    geometry = editor.geometry
    inner = geometry.width
    left = geometry.origin_x
    top = geometry.origin_y

    title = clip_text(f" {sanitize_name(editor.title)} ", max(0, inner - 2))
    top_border = "╭─" + _styled(title, theme.editor_title, theme) + theme.editor_border
    top_border += "─" * max(0, inner - 1 - display_width(title)) + "╮"
    bottom_border = "╰" + "─" * inner + "╯"

    start = editor_view_start(editor)
    visible = clip_text(sanitize_name(editor.content[start:]), inner)

    side = _styled("│", theme.editor_border, theme)
    out: list[str] = [move_to(left, top), _styled(top_border, theme.editor_border, theme)]
    for row in range(top + 1, geometry.bottom_row):
        interior = visible if row == geometry.text_row else ""
        out.append(move_to(left, row))
        out.append(side + _padded(interior, inner) + side)
    out.append(move_to(left, geometry.bottom_row))
    out.append(_styled(bottom_border, theme.editor_border, theme))
    out.append(move_to(editor.edit_cursor - start, geometry.text_row))
    return "".join(out)


__all__ = [
    "CHROME_ROWS",
    "EMPTY_PLACEHOLDER",
    "HEADER_ROWS",
    "STATUS_ROWS",
    "build_browser_frame",
    "build_editor_frame",
    "build_status_text",
    "editor_view_start",
    "move_to",
    "viewport_rows_for",
]
