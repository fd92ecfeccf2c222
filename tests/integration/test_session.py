"""End-to-end session tests driving ``BrowserApp`` with scripted keys.

A real temporary directory backs the listing; terminal output is captured
in memory instead of going to a tty.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazybrowse.app import BrowserApp, Mode, run_browser
from lazybrowse.browser import Browser
from lazybrowse.errors import DirectoryUnreadable
from lazybrowse.fs import Filesystem
from lazybrowse.ui_theme import PLAIN_THEME


class SessionTestCase(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name).resolve()
        (self.root / "alpha").mkdir()
        (self.root / "alpha" / "inner.txt").write_text("inner\n", encoding="utf-8")
        (self.root / "notes.txt").write_text("notes\n", encoding="utf-8")
        self.frames: list[str] = []
        self.size = (80, 24)
        browser = Browser(Filesystem())
        browser.load_directory(self.root)
        self.app = BrowserApp(
            browser,
            write=self.frames.append,
            terminal_size=lambda: self.size,
            theme=PLAIN_THEME,
        )
        # First paint sizes the viewport from the terminal, as the run loop does.
        self.app.repaint()
        self.frames.clear()

    def press(self, *keys: str) -> None:
        for key in keys:
            self.app.handle_key(key)
            self.app.repaint()

    def run_keys(self, *keys: str) -> None:
        script = iter(keys)
        self.app.run(lambda: next(script, ""))


class BrowsingSessionTests(SessionTestCase):
    def test_initial_frame_lists_directory_first(self) -> None:
        self.app.repaint()
        frame = self.frames[-1]
        self.assertLess(frame.index("alpha"), frame.index("notes.txt"))
        self.assertIn(str(self.root), frame)

    def test_descend_and_return_to_parent(self) -> None:
        self.press("ENTER")
        self.assertEqual(self.app.browser.current_directory, self.root / "alpha")
        self.assertIn("inner.txt", self.frames[-1])

        self.press("BACKSPACE")
        self.assertEqual(self.app.browser.current_directory, self.root)
        self.assertEqual(self.app.browser.selected_entry().name, "alpha")

    def test_movement_keys_and_arrow_aliases(self) -> None:
        self.press("j")
        self.assertEqual(self.app.browser.selected_entry().name, "notes.txt")
        self.press("k")
        self.assertEqual(self.app.browser.selected_entry().name, "alpha")
        self.press("DOWN", "UP", "d")
        self.assertEqual(self.app.browser.selected_entry().name, "notes.txt")
        self.press("g")
        self.assertEqual(self.app.browser.selected_entry().name, "alpha")

    def test_enter_on_file_is_noop(self) -> None:
        self.press("j", "ENTER")
        self.assertEqual(self.app.browser.current_directory, self.root)
        self.assertEqual(self.app.browser.selected_entry().name, "notes.txt")

    def test_directory_removed_after_listing_is_reported(self) -> None:
        (self.root / "alpha" / "inner.txt").unlink()
        (self.root / "alpha").rmdir()

        self.press("ENTER")

        self.assertEqual(self.app.browser.current_directory, self.root)
        self.assertTrue(self.app.browser.status_is_error)
        self.assertIn("cannot read", self.frames[-1])

        self.press("j")
        self.assertEqual(self.app.browser.status_message, "")

    def test_run_stops_on_quit_key(self) -> None:
        self.run_keys("j", "q", "k")
        self.assertEqual(self.app.browser.selected_entry().name, "notes.txt")
        self.assertEqual(len(self.frames), 2)

    def test_run_stops_at_end_of_input(self) -> None:
        self.run_keys("j")
        self.assertEqual(len(self.frames), 2)


class RenameSessionTests(SessionTestCase):
    def test_rename_through_editor_mode_updates_disk_and_listing(self) -> None:
        self.press("j", "r")
        self.assertIs(self.app.mode, Mode.EDITING)
        self.assertIn("│notes.txt", self.frames[-1])

        self.press(*(["LEFT"] * len(".txt")), *(["BACKSPACE"] * len("notes")), "t", "o", "d", "o", "ENTER")

        self.assertIs(self.app.mode, Mode.BROWSING)
        self.assertIsNone(self.app.editor)
        self.assertTrue((self.root / "todo.txt").exists())
        self.assertFalse((self.root / "notes.txt").exists())
        entry = self.app.browser.selected_entry()
        self.assertEqual(entry.name, "todo.txt")
        self.assertEqual(entry.path, self.root / "todo.txt")
        self.assertIn("renamed notes.txt to todo.txt", self.frames[-1])

    def test_browser_keys_are_captured_while_editing(self) -> None:
        self.press("r", "q", "j")
        self.assertIs(self.app.mode, Mode.EDITING)
        self.assertEqual(self.app.editor.content, "alphaqj")
        self.assertEqual(self.app.browser.selected_entry().name, "alpha")

    def test_cancel_leaves_disk_and_entry_untouched(self) -> None:
        with mock.patch.object(Filesystem, "rename") as rename_mock:
            self.press("j", "r", "x", "CTRL_C")

        rename_mock.assert_not_called()
        self.assertIs(self.app.mode, Mode.BROWSING)
        self.assertTrue((self.root / "notes.txt").exists())
        self.assertEqual(self.app.browser.selected_entry().name, "notes.txt")

    def test_empty_enter_keeps_editor_open(self) -> None:
        self.press("j", "r", *(["BACKSPACE"] * len("notes.txt")), "ENTER")
        self.assertIs(self.app.mode, Mode.EDITING)
        self.press("a", "ENTER")
        self.assertIs(self.app.mode, Mode.BROWSING)
        self.assertTrue((self.root / "a").exists())

    def test_rename_onto_existing_name_reports_failure(self) -> None:
        self.press("j", "r", *(["BACKSPACE"] * len("notes.txt")), *"alpha", "ENTER")

        self.assertTrue((self.root / "notes.txt").exists())
        self.assertEqual(self.app.browser.selected_entry().name, "notes.txt")
        self.assertEqual(self.app.browser.view.cursor_row, 2)
        self.assertIn("target already exists", self.frames[-1])

    def test_over_long_name_is_reported_without_crashing(self) -> None:
        self.press("j")

        self.assertFalse(self.app.browser.rename_selected("a" * 300))

        self.assertTrue((self.root / "notes.txt").exists())
        self.assertEqual(self.app.browser.selected_entry().name, "notes.txt")
        self.assertTrue(self.app.browser.status_is_error)
        self.app.repaint()
        self.assertIn("cannot rename notes.txt", self.frames[-1])

    def test_editor_repaint_draws_listing_behind_box(self) -> None:
        self.press("r")
        frame = self.frames[-1]
        self.assertIn("notes.txt", frame)
        self.assertLess(frame.index("notes.txt"), frame.index("╭"))


class RunBrowserTests(unittest.TestCase):
    def test_session_runs_inside_raw_mode_and_restores(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            controller = mock.MagicMock()
            controller.size.return_value = (80, 24)
            with mock.patch("lazybrowse.app.TerminalController", return_value=controller), mock.patch(
                "lazybrowse.app.read_key", side_effect=["j", "q"]
            ):
                run_browser(Path(tmp), stdin_fd=0, stdout_fd=1)

        controller.raw_mode.assert_called_once()
        controller.raw_mode.return_value.__enter__.assert_called_once()
        controller.raw_mode.return_value.__exit__.assert_called_once()
        self.assertGreaterEqual(controller.write.call_count, 2)

    def test_unreadable_start_directory_fails_before_raw_mode(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            controller = mock.MagicMock()
            with mock.patch("lazybrowse.app.TerminalController", return_value=controller):
                with self.assertRaises(DirectoryUnreadable):
                    run_browser(Path(tmp) / "missing", stdin_fd=0, stdout_fd=1)

        controller.raw_mode.assert_not_called()


if __name__ == "__main__":
    unittest.main()
