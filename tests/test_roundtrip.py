"""Property-based tests for shell_escape_arg using Hypothesis.

shlex.split() in POSIX mode is the reference parser: the literal must read
back as exactly one word equal to the input.
"""

from __future__ import annotations

import shlex

import pytest
from hypothesis import given
from hypothesis import strategies as st

from shellarg import needs_quoting, shell_escape_arg

args = st.text(
    alphabet=st.characters(
        exclude_categories=("Cs",),  # No surrogates
        exclude_characters="\x00",  # No null bytes
    ),
    max_size=200,
)

# Biased toward characters the shell cares about
shellish_args = st.text(
    alphabet=st.sampled_from(list("ab~'\"\\$`|&;<>()*?[]{}!# \t\n-=@\u00a0\u3000\x7f")),
    max_size=40,
)


@given(args)
def test_round_trip(arg: str):
    assert shlex.split(shell_escape_arg(arg)) == [arg]


@given(shellish_args)
def test_round_trip_shell_chars(arg: str):
    assert shlex.split(shell_escape_arg(arg)) == [arg]


@given(args)
def test_fast_path_is_identity(arg: str):
    if not needs_quoting(arg):
        assert shell_escape_arg(arg) == arg


@given(shellish_args)
def test_quoted_form(arg: str):
    literal = shell_escape_arg(arg)
    if needs_quoting(arg):
        assert literal.startswith("'") and literal.endswith("'")
        assert literal[1:-1].replace("'\\''", "'") == arg
        assert literal.count("'\\''") == arg.count("'")


@given(args)
def test_deterministic(arg: str):
    assert shell_escape_arg(arg) == shell_escape_arg(arg)
    assert needs_quoting(arg) == needs_quoting(arg)


@given(st.text(min_size=1).map(lambda s: s[: len(s) // 2] + "\x00" + s[len(s) // 2 :]))
def test_nul_always_rejected(arg: str):
    with pytest.raises(ValueError):
        shell_escape_arg(arg)
