"""Character classification for shell argument literals.

Each predicate answers one question about a whole string. needs_quoting()
ORs them together to decide whether a value can be shown bare or has to be
wrapped in single quotes.
"""

from __future__ import annotations

# Characters the shell interprets instead of passing through literally:
#   quoting and escapes     ' " \ ` $
#   operators, redirection  | & ; < > ( )
#   globs, brace expansion  * ? [ ] { }
#   history, comments       ! #
SHELL_META_CHARS = frozenset("'\"\\$`|&;<>()*?[]{}!#")


def starts_with_tilde(s: str) -> bool:
    """Check if string starts with a tilde (would trigger tilde expansion).

    `~`, `~user` and `~/path` at the start of a word all expand to a home
    directory. A tilde anywhere else (`a~b`) is left alone by the shell.
    """
    return s.startswith("~")


def has_unicode_whitespace(s: str) -> bool:
    """Check if string contains any Unicode whitespace.

    Covers the ASCII set (tab, LF, VT, FF, CR, space) as well as NEL, NBSP,
    the U+2000 space block, line/paragraph separators and the ideographic
    space. str.isspace() tracks the interpreter's Unicode database, so new
    whitespace code points are picked up without changes here.
    """
    return any(c.isspace() for c in s)


def has_ascii_control_chars(s: str) -> bool:
    """Check if string contains ASCII control characters (U+0001-U+001F, U+007F).

    NUL is not checked: it can never appear in a process argument and is
    rejected before classification.
    """
    for c in s:
        code = ord(c)
        if 0x01 <= code <= 0x1F or code == 0x7F:
            return True
    return False


def has_shell_meta_chars(s: str) -> bool:
    """Check if string contains any of SHELL_META_CHARS."""
    return not SHELL_META_CHARS.isdisjoint(s)


def needs_quoting(s: str) -> bool:
    """Check if string needs quoting to survive shell parsing as one word.

    Empty strings, leading tilde, whitespace, control characters and shell
    meta-characters all require quoting. Nothing else does: `-n`, `a=b` and
    `user@host` are returned bare.
    """
    return (
        len(s) == 0
        or starts_with_tilde(s)
        or has_unicode_whitespace(s)
        or has_ascii_control_chars(s)
        or has_shell_meta_chars(s)
    )
