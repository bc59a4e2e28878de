"""
Debug helper for previewing shell argument literals.

Usage:
    python -m shellarg.preview ARG [ARG ...]

Prints one literal per argument, exactly as shell_escape_arg() renders it.
Set SHELLARG_LOG to a file path to record every preview as a JSON line
(add SHELLARG_LOG_FULL=1 to include the raw argument).
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from shellarg.core.bash import shell_escape_arg
from shellarg.core.config import configure_logging, load_config, log_preview


def preview(args: Sequence[str]) -> list[str]:
    """Render each argument as a shell literal, logging every decision.

    Raises whatever shell_escape_arg() raises for the first bad argument,
    after logging it as rejected.
    """
    literals = []
    for arg in args:
        try:
            literal = shell_escape_arg(arg)
        except (TypeError, ValueError) as e:
            log_preview("rejected", arg if isinstance(arg, str) else "", error=str(e))
            raise
        decision = "plain" if literal is arg else "quoted"
        log_preview(decision, arg, literal=literal)
        literals.append(literal)
    return literals


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print("Usage: python -m shellarg.preview ARG [ARG ...]", file=sys.stderr)
        return 2

    try:
        config = load_config()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    configure_logging(config)

    try:
        literals = preview(argv)
    except (TypeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for literal in literals:
        print(literal)
    return 0


if __name__ == "__main__":
    sys.exit(main())
