from __future__ import annotations
import io
import sys
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

import lectern_lang
from lectern_lang import exception_driver

EXPECTED_LINES = [
    "We're in the try block. Get ready for things to go wrong.",
    "We made it into the catch block! Error: null",
    "That could have gone worse!",
    "Ducking this bizzare exception!",
]


class ExceptionDrillTests(unittest.TestCase):
    def test_drill_prints_four_lines_then_exits_zero(self) -> None:
        buf = io.StringIO()
        with redirect_stdout(buf):
            with self.assertRaises(SystemExit) as ctx:
                lectern_lang.run_drill()
        self.assertEqual(ctx.exception.code, 0)
        self.assertEqual(buf.getvalue().splitlines(), EXPECTED_LINES)

    def test_drill_writes_through_io_handler(self) -> None:
        io_handler = lectern_lang.BufferedIO()
        with self.assertRaises(SystemExit):
            lectern_lang.run_drill(io_handler)
        self.assertEqual(io_handler.lines, EXPECTED_LINES)

    def test_marker_never_escapes_guarded_block(self) -> None:
        io_handler = lectern_lang.BufferedIO()
        with patch.object(exception_driver.sys, "exit") as fake_exit:
            lectern_lang.run_drill(io_handler)
        fake_exit.assert_called_once_with(0)
        self.assertEqual(io_handler.lines, EXPECTED_LINES)

    def test_trap_exits_before_raising(self) -> None:
        io_handler = lectern_lang.BufferedIO()
        try:
            lectern_lang.exceptional_method(io_handler)
        except lectern_lang.LessonException:  # pragma: no cover
            self.fail("the trap raised its declared exception")
        except SystemExit as e:
            self.assertEqual(e.code, 0)
        self.assertEqual(io_handler.lines, ["Ducking this bizzare exception!"])

    def test_trap_without_exit_returns_quietly(self) -> None:
        io_handler = lectern_lang.BufferedIO()
        with patch.object(exception_driver.sys, "exit") as fake_exit:
            self.assertIsNone(lectern_lang.exceptional_method(io_handler))
        fake_exit.assert_called_once_with(0)

    def test_describe_error_renders_absent_message_as_null(self) -> None:
        self.assertEqual(lectern_lang.describe_error(lectern_lang.LessonException()), "null")
        self.assertEqual(lectern_lang.describe_error(ValueError("boom")), "boom")
        self.assertEqual(lectern_lang.describe_error(ValueError("")), "")

    def test_lesson_exception_is_a_lectern_error(self) -> None:
        self.assertTrue(issubclass(lectern_lang.LessonException, lectern_lang.LecternError))
        self.assertEqual(lectern_lang.LessonException().args, ())

    def test_main_entry_point(self) -> None:
        buf = io.StringIO()
        with patch.object(sys, "argv", ["lectern-drill"]), redirect_stdout(buf):
            with self.assertRaises(SystemExit) as ctx:
                exception_driver.main()
        self.assertEqual(ctx.exception.code, 0)
        self.assertEqual(buf.getvalue().splitlines(), EXPECTED_LINES)


if __name__ == "__main__":
    unittest.main(verbosity=2)
