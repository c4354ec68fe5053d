import inspect
import logging
import sys
from typing import Any, Callable, Dict, Optional

from lark import Lark
from lark.visitors import Interpreter

from .exceptions import LecternError, LessonException
from .exception_driver import describe_error, run_drill
from .grammar import LECTERN_GRAMMAR
from .interfaces import ConsoleIO, IOHandler
from .models import LecternConfig
from .string_methods import replace_char, reverse_string

logger = logging.getLogger(__name__)

_ESCAPES = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}


def _unescape(body: str) -> str:
    out = []
    chars = iter(body)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, "")
            out.append(_ESCAPES.get(nxt, "\\" + nxt))
        else:
            out.append(ch)
    return "".join(out)


def render(value: Any) -> str:
    if value is None:
        return "null"
    return str(value)


class LessonInterpreter(Interpreter):
    """Executes lesson scripts parsed with ``LECTERN_GRAMMAR``."""

    def __init__(
        self,
        io_handler: Optional[IOHandler] = None,
        config: Optional[LecternConfig] = None,
    ):
        self.config = config if config is not None else LecternConfig.from_env()
        self.io = io_handler if io_handler is not None else ConsoleIO()
        self.scope: Dict[str, Any] = {}
        self._parsers: Dict[str, Lark] = {}
        self._register_builtins()

    def _register_builtins(self) -> None:
        self.scope["replace_char"] = self._replace_char
        self.scope["reverse_string"] = reverse_string
        self.scope["length"] = self._length
        self.scope["drill"] = lambda: run_drill(self.io)

    @staticmethod
    def _length(value: Any) -> int:
        if not hasattr(value, "__len__"):
            raise LecternError(f"length() needs a sized value, got {type(value).__name__}")
        return len(value)

    def _replace_char(self, text: str, target: str, replacement: str) -> str:
        return replace_char(text, target, replacement, max_depth=self.config.max_recursion)

    def parser(self, start: str = "start") -> Lark:
        if start not in self._parsers:
            self._parsers[start] = Lark(LECTERN_GRAMMAR, parser="lalr", start=start)
        return self._parsers[start]

    def run(self, source: str, start: str = "start") -> Any:
        return self.visit(self.parser(start).parse(source))

    def _lookup(self, name: str) -> Any:
        if name in self.scope:
            return self.scope[name]
        raise LecternError(f"Unknown name '{name}'")

    # --- Root Statements ---

    def start(self, tree):
        result = None
        for stmt in tree.children:
            result = self.visit(stmt)
        return result

    def print_stmt(self, tree):
        self.io.emit(render(self.visit(tree.children[0])))

    def let(self, tree):
        name, expr = tree.children
        value = self.visit(expr)
        self.scope[str(name)] = value
        return value

    def expr_stmt(self, tree):
        return self.visit(tree.children[0])

    # --- Flow Control ---

    def block(self, tree):
        result = None
        for stmt in tree.children:
            result = self.visit(stmt)
        return result

    def raise_stmt(self, tree):
        if tree.children:
            message = render(self.visit(tree.children[0]))
            logger.debug("Script raised LessonException(%r)", message)
            raise LessonException(message)
        logger.debug("Script raised LessonException()")
        raise LessonException()

    def guarded(self, tree):
        try_blk, err_name, catch_blk = tree.children[:3]
        finally_clause = tree.children[3] if len(tree.children) > 3 else None
        try:
            return self.visit(try_blk)
        except Exception as e:
            logger.debug("Guarded block caught %s", type(e).__name__)
            self.scope[str(err_name)] = describe_error(e)
            return self.visit(catch_blk)
        finally:
            if finally_clause is not None:
                self.visit(finally_clause.children[0])

    def exit_stmt(self, tree):
        code = int(tree.children[0]) if tree.children else 0
        logger.debug("Script exiting with status %d", code)
        sys.exit(code)

    # --- Expressions ---

    def concat(self, tree):
        left, right = tree.children
        return render(self.visit(left)) + render(self.visit(right))

    def call(self, tree):
        func_name = str(tree.children[0])
        args_node = tree.children[1] if len(tree.children) > 1 else None
        args = [self.visit(c) for c in args_node.children] if args_node else []
        func = self._lookup(func_name)
        if not callable(func):
            raise LecternError(f"'{func_name}' is not callable")
        self._check_arity(func_name, func, args)
        try:
            return func(*args)
        except RecursionError as e:
            raise LecternError("Host recursion limit reached.") from e

    @staticmethod
    def _check_arity(func_name: str, func: Callable, args: list) -> None:
        try:
            inspect.signature(func).bind(*args)
        except TypeError as e:
            raise LecternError(f"Bad arguments for '{func_name}': {e}") from e
        except ValueError:
            # builtins without an introspectable signature
            pass

    def var(self, tree):
        return self._lookup(str(tree.children[0]))

    def string(self, tree):
        return _unescape(str(tree.children[0])[1:-1])
