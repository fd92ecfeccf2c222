"""Command-line front door for lazybrowse.

Parses CLI options, merges them with the config file, and resolves the
starting directory. Fatal startup errors exit with a message before the
terminal is touched.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .app import run_browser
from .config import load_browser_config
from .errors import DirectoryUnreadable, TerminalUnavailable
from .ui_theme import available_theme_names, resolve_theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse a directory in the terminal and rename entries in place."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--hide-dotfiles", action="store_true", help="Do not list entries starting with '.'.")
    return parser


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch the browser.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    config = load_browser_config()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    theme = resolve_theme(args.theme or config.theme, no_color=args.no_color)
    show_hidden = config.show_hidden and not args.hide_dotfiles
    try:
        run_browser(path, theme=theme, show_hidden=show_hidden)
    except (DirectoryUnreadable, TerminalUnavailable) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
