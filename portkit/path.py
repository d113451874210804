"""Path manipulation helpers that accept both forward and back slashes."""

from __future__ import annotations

import re
from functools import lru_cache

_SEPARATORS = "/\\"
_SEPARATOR_RUN = re.compile(r"[/\\]+")


def is_absolute(path: str) -> bool:
    """Return True if the path starts with a slash or a backslash."""
    return path[:1] in ("/", "\\") and path != ""


def is_relative(path: str) -> bool:
    """Return True if the path is not absolute."""
    return not is_absolute(path)


def _filename_start(path: str) -> int:
    stem = path.rstrip(_SEPARATORS)
    return max(stem.rfind("/"), stem.rfind("\\")) + 1


def get_filename(path: str) -> str:
    """Return the last component of the path, with any trailing separators."""
    return path[_filename_start(path):]


def remove_filename(path: str) -> str:
    """Return the path with its last component removed."""
    return path[:_filename_start(path)]


def truncate(src: str, max_len: int) -> str:
    """Return at most ``max_len`` characters of the path."""
    return src[:max_len]


def _up_one_level(out: str, at_end: bool, sep_then_end: bool, slash: str) -> str:
    # Called only when the output holds more than one character.
    idx = out.rfind("/", 0, len(out) - 1)
    if idx >= 0:
        if out[idx + 1:idx + 3] == "..":
            out += ".."
        else:
            out = out[:idx]
        if not out:
            return "/"
        return out + slash
    if len(out) == 3 and out.startswith(".."):
        return out + ".." + slash
    if at_end:
        return "."
    if sep_then_end:
        return "./"
    return ""


def canonicalize(path: str) -> str:
    """Simplify a path: unify separators and resolve "." and ".." elements."""
    tokens = _SEPARATOR_RUN.sub("/", path).split("/")
    trailing = len(tokens) > 1 and tokens[-1] == ""
    if trailing:
        tokens.pop()

    out = ""
    count = len(tokens)
    for idx, token in enumerate(tokens):
        last = idx == count - 1
        has_sep = not last or trailing
        at_end = not has_sep
        sep_then_end = last and trailing
        slash = "/" if has_sep else ""

        if token == ".":
            if not out:
                if at_end:
                    out = "."
                elif sep_then_end:
                    out = "./"
            elif len(out) > 1 and at_end:
                out = out[:-1]
        elif token == "..":
            if not out:
                out = ".." + slash
            elif len(out) > 1:
                out = _up_one_level(out, at_end, sep_then_end, slash)
        else:
            out += token + slash
    return out


def add_slash(path: str, max_len: int) -> str:
    """Append a slash unless the path already ends with one or would exceed ``max_len``."""
    if not path:
        return "/" if max_len >= 1 else path
    if path[-1] not in _SEPARATORS and max_len >= len(path) + 1:
        return path + "/"
    return path


def remove_slash(path: str) -> str:
    """Remove trailing separators, keeping a leading root separator."""
    head = path[:1] if is_absolute(path) else ""
    return head + path[len(head):].rstrip(_SEPARATORS)


def combine(path: str, more: str, max_len: int) -> str:
    """Join two paths with a single separator, limited to ``max_len`` characters."""
    if path:
        path = add_slash(path, max_len)
    more = more.lstrip(_SEPARATORS)
    if len(path) < max_len:
        return path + more[:max_len - len(path)]
    return path


@lru_cache(maxsize=256)
def _pattern_regex(pattern: str) -> re.Pattern:
    parts = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def match(path: str, pattern: str) -> bool:
    """Case-insensitive wildcard match where "*" matches any run and "?" one character."""
    return _pattern_regex(pattern).fullmatch(path) is not None