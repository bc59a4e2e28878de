"""Bash quoting for displaying a value as a single shell argument."""

from __future__ import annotations

from shellarg.core.chars import needs_quoting


def shell_escape_arg(arg: str) -> str:
    """Quote a string so a POSIX shell would read it back as exactly one argument.

    Safe strings are returned as-is. Anything else is wrapped in single quotes,
    with embedded single quotes written as '\\'' (close, escaped quote, reopen).
    Returns '' for empty strings.

    This is for display (logs, docs, command previews). It says nothing about
    how the receiving program interprets the argument: "--force" comes back
    unchanged.

    Raises:
        TypeError: arg is not a str.
        ValueError: arg contains NUL, which no process argument can hold.
    """
    if not isinstance(arg, str):
        raise TypeError("arg must be a string")
    if "\x00" in arg:
        raise ValueError("arg must not include NUL (\\u0000)")

    if not needs_quoting(arg):
        return arg
    return "'" + arg.replace("'", "'\\''") + "'"
