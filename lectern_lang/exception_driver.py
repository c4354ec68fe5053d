"""Exception drill: guarded-block flow followed by a trap that exits early.

Run it with ``python -m lectern_lang.exception_driver`` or the
``lectern-drill`` console script. The output is always four lines and the
process ends with status 0.
"""

import logging
import sys
from typing import Optional

from .exceptions import LessonException
from .interfaces import ConsoleIO, IOHandler
from .models import LecternConfig, configure_logging

logger = logging.getLogger(__name__)

ABSENT_MESSAGE = "null"


def describe_error(error: BaseException) -> str:
    """Render an exception message, using ``null`` when none was attached."""
    if not error.args:
        return ABSENT_MESSAGE
    return str(error)


def run_drill(io: Optional[IOHandler] = None) -> None:
    io = io if io is not None else ConsoleIO()
    try:
        io.emit("We're in the try block. Get ready for things to go wrong.")
        logger.debug("Raising %s inside the guarded block", LessonException.__name__)
        raise LessonException()
    except Exception as e:
        logger.debug("Caught %s", type(e).__name__)
        io.emit(f"We made it into the catch block! Error: {describe_error(e)}")
    finally:
        io.emit("That could have gone worse!")

    exceptional_method(io)


def exceptional_method(io: Optional[IOHandler] = None) -> None:
    """Print a farewell and terminate the process.

    Callers may prepare for a ``LessonException`` here, but the process is
    gone before one could be raised.
    """
    io = io if io is not None else ConsoleIO()
    io.emit("Ducking this bizzare exception!")
    logger.debug("Exiting with status 0")
    sys.exit(0)


def main():
    configure_logging(LecternConfig.from_env())
    run_drill()


if __name__ == "__main__":
    main()
