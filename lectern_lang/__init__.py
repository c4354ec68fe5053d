from .grammar import LECTERN_GRAMMAR
from .exceptions import LecternError, LessonException
from .interfaces import IOHandler, ConsoleIO, BufferedIO
from .models import LecternConfig, configure_logging
from .string_methods import replace_char, reverse_string
from .exception_driver import describe_error, run_drill, exceptional_method
from .interpreter import LessonInterpreter, render

__all__ = [
    "LECTERN_GRAMMAR",
    "LecternError",
    "LessonException",
    "IOHandler",
    "ConsoleIO",
    "BufferedIO",
    "LecternConfig",
    "configure_logging",
    "replace_char",
    "reverse_string",
    "describe_error",
    "run_drill",
    "exceptional_method",
    "LessonInterpreter",
    "render",
]
