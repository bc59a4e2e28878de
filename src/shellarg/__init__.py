"""
shellarg - Render any string as a single POSIX shell argument.

Meant for display: logs, generated docs and command previews. Not a
substitute for passing argv lists to subprocess.
"""

from __future__ import annotations

__version__ = "0.1.0"

from shellarg.core.bash import shell_escape_arg
from shellarg.core.chars import needs_quoting

__all__ = ["shell_escape_arg", "needs_quoting", "__version__"]
