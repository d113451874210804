"""String helpers for trimming, replacing and bounded copying."""

from __future__ import annotations

from typing import Optional

from portkit.errors import ErrorCode, PortError

# Characters treated as white space by the classic "C" locale.
_WHITESPACE = " \t\n\v\f\r"


def duplicate(s: Optional[str]) -> Optional[str]:
    """Return a copy of the string, or None when given None."""
    if s is None:
        return None
    return str(s)


def trim_whitespace(s: str) -> str:
    """Return the string without leading and trailing white space."""
    return s.strip(_WHITESPACE)


def remove_trailing_space(s: str) -> str:
    """Return the string without trailing white space."""
    return s.rstrip(_WHITESPACE)


def replace_char(s: str, old_char: str, new_char: str) -> str:
    """Return the string with every ``old_char`` replaced by ``new_char``."""
    if len(old_char) != 1 or len(new_char) != 1:
        raise ValueError("old_char and new_char must be single characters")
    return s.replace(old_char, new_char)


def safe_copy(src: Optional[str], dest_size: int) -> str:
    """Return ``src`` cut to fit a buffer of ``dest_size`` including its terminator.

    Raises :class:`PortError` with ``INVALID_PARAMETER`` when ``src`` is None
    or ``dest_size`` is smaller than one.
    """
    if src is None or dest_size < 1:
        raise PortError(ErrorCode.INVALID_PARAMETER)
    return src[:dest_size - 1]