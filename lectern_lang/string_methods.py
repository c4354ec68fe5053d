import inspect
import logging
import sys
from typing import Optional

from .exceptions import LecternError
from .models import LecternConfig

logger = logging.getLogger(__name__)

STACK_MARGIN = 200


def _require_char(name: str, value) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise LecternError(f"{name} must be a single character, got {value!r}")


def replace_char(
    text: Optional[str], target: str, replacement: str, max_depth: Optional[int] = None
) -> str:
    """Replace every ``target`` in ``text`` with ``replacement``.

    The recursive form splices the prefix before the first match with the
    replacement and recurses on the rest, one frame per match. The host
    recursion limit is raised to fit that depth. Inputs with ``max_depth`` or
    more matches, or whose depth cannot be fitted, take an iterative scan with
    the same output.
    """
    _require_char("target", target)
    _require_char("replacement", replacement)
    if not text:
        return ""
    limit = max_depth if max_depth is not None else LecternConfig.from_env().max_recursion
    matches = text.count(target)
    if matches >= limit or not _ensure_stack_headroom(matches + 1):
        logger.debug("replace_char: %d matches (limit %d), scanning iteratively", matches, limit)
        return _replace_iteratively(text, target, replacement)
    return _replace_recursively(text, target, replacement)


def _stack_depth() -> int:
    depth = 0
    frame = inspect.currentframe()
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


def _ensure_stack_headroom(frames: int) -> bool:
    """Raise the interpreter recursion limit so ``frames`` more calls fit."""
    needed = _stack_depth() + frames + STACK_MARGIN
    if sys.getrecursionlimit() >= needed:
        return True
    try:
        sys.setrecursionlimit(needed)
    except (ValueError, RecursionError) as e:
        logger.debug("replace_char: cannot raise recursion limit to %d: %s", needed, e)
    return sys.getrecursionlimit() >= needed


def _replace_recursively(text: str, target: str, replacement: str) -> str:
    index = text.find(target)
    if index == -1:
        return text
    return text[:index] + replacement + _replace_recursively(
        text[index + 1 :], target, replacement
    )


def _replace_iteratively(text: str, target: str, replacement: str) -> str:
    return "".join(replacement if ch == target else ch for ch in text)


def reverse_string(text: Optional[str]) -> str:
    """Return ``text`` reversed, swapping characters from both ends inward."""
    if not text:
        return ""
    chars = list(text)
    last = len(chars) - 1
    for i in range(len(chars) // 2):
        tmp = chars[i]
        chars[i] = chars[last - i]
        chars[last - i] = tmp
    return "".join(chars)
