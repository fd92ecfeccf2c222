"""Tests for raw-mode lifecycle safety and emitted control sequences."""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from lazybrowse.errors import TerminalUnavailable
from lazybrowse.terminal import CLEAR_AND_HOME, TerminalController


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_tui_mode_use_alternate_screen_sequences(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("lazybrowse.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "lazybrowse.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("lazybrowse.terminal.os.write") as write_mock, mock.patch(
            "lazybrowse.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?1049h"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, CLEAR_AND_HOME + b"\x1b[?25h\x1b[?1049l"))
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("lazybrowse.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode") as enable_mock, mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_non_tty_stdin_raises_terminal_unavailable(self) -> None:
        with mock.patch("lazybrowse.terminal.termios.tcgetattr", side_effect=termios.error(25, "not a tty")):
            with self.assertRaises(TerminalUnavailable):
                TerminalController(stdin_fd=0, stdout_fd=1)

    def test_raw_mode_failure_raises_and_still_restores(self) -> None:
        with mock.patch("lazybrowse.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch("lazybrowse.terminal.tty.setraw", side_effect=termios.error(5, "io")), mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(TerminalUnavailable):
                with controller.raw_mode():
                    self.fail("body must not run")

        disable_mock.assert_called_once()

    def test_write_encodes_utf8(self) -> None:
        with mock.patch("lazybrowse.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "lazybrowse.terminal.os.write"
        ) as write_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=7)
            controller.write("╭é")

        write_mock.assert_called_once_with(7, "╭é".encode("utf-8"))

    def test_size_falls_back_to_default(self) -> None:
        fallback = mock.Mock(columns=0, lines=0)
        with mock.patch("lazybrowse.terminal.shutil.get_terminal_size", return_value=fallback):
            self.assertEqual(TerminalController.size(), (1, 1))


if __name__ == "__main__":
    unittest.main()
