"""Lectern entrypoint module exposing the public API and CLI."""

import argparse
import logging
import os
import sys

from lark import Lark

from lectern_lang import (
    LECTERN_GRAMMAR,
    BufferedIO,
    ConsoleIO,
    IOHandler,
    LecternConfig,
    LecternError,
    LessonException,
    LessonInterpreter,
    describe_error,
    exceptional_method,
    render,
    replace_char,
    reverse_string,
    configure_logging,
    run_drill,
)

__all__ = [
    "LECTERN_GRAMMAR",
    "BufferedIO",
    "ConsoleIO",
    "IOHandler",
    "LecternConfig",
    "LecternError",
    "LessonException",
    "LessonInterpreter",
    "describe_error",
    "exceptional_method",
    "render",
    "replace_char",
    "reverse_string",
    "run_drill",
    "run_repl",
    "configure_logging",
    "main",
    "Lark",
]

logger = logging.getLogger("lectern")


def run_repl(interpreter: LessonInterpreter):
    interpreter.io.emit("Lectern interactive classroom")
    interpreter.io.emit("Type 'exit' or 'quit' to leave.")
    while True:
        text = interpreter.io.read_input(">> ").strip()
        if not text:
            break
        if text in ("exit", "quit"):
            break
        try:
            result = interpreter.run(text, start="statement")
            if result is not None:
                interpreter.io.emit(render(result), "=>")
        except Exception as e:
            logger.debug("REPL statement failed: %r", e)
            interpreter.io.emit(str(e), "Error:")


def main():
    parser = argparse.ArgumentParser(description="Lectern classroom drills")
    parser.add_argument("script", nargs="?", help="Path to a lesson script")
    parser.add_argument(
        "--drill", action="store_true", help="Run the exception drill and exit"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug output to stderr"
    )
    args = parser.parse_args()

    config = LecternConfig.verbose() if args.verbose else LecternConfig.from_env()
    configure_logging(config)

    if args.drill:
        run_drill()
        return

    interpreter = LessonInterpreter(io_handler=ConsoleIO(), config=config)

    if not args.script:
        run_repl(interpreter)
        return

    entry_path = os.path.abspath(args.script)
    try:
        with open(entry_path, "r", encoding="utf-8") as f:
            source = f.read()
        interpreter.run(source)
    except Exception as e:
        logger.error("Lesson %s failed: %s", entry_path, e)
        print(f"FATAL ERROR\n{e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
