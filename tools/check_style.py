#!/usr/bin/env python3
"""Check for banned Python constructions in shellarg source.

Banned constructions:

    Construction          Reason                            Use instead
    --------------------  --------------------------------  --------------------------
    import shlex          shellarg owns quoting; shlex      shellarg.shell_escape_arg
    from shlex import     quotes differently
    import subprocess     shellarg formats for display      nothing; never spawn
    from subprocess       and never runs anything
"""

import ast
import os
import sys

BANNED_MODULES = {
    "shlex": "banned, use shell_escape_arg for quoting",
    "subprocess": "banned, shellarg never spawns processes",
}


def find_python_files(directory):
    """Find all .py files recursively, skipping caches."""
    result = []
    for root, dirs, files in os.walk(directory):
        if "__pycache__" in dirs:
            dirs.remove("__pycache__")
        for f in files:
            if f.endswith(".py"):
                result.append(os.path.join(root, f))
    result.sort()
    return result


def check_source(source, filepath="<string>"):
    """Return (lineno, description) for each banned import in source."""
    tree = ast.parse(source, filepath)
    errors = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                top = alias.name.split(".")[0]
                if top in BANNED_MODULES:
                    errors.append(
                        (node.lineno, f"import {alias.name}: {BANNED_MODULES[top]}")
                    )
        elif isinstance(node, ast.ImportFrom) and node.module:
            top = node.module.split(".")[0]
            if node.level == 0 and top in BANNED_MODULES:
                errors.append(
                    (node.lineno, f"from {node.module} import: {BANNED_MODULES[top]}")
                )

    return errors


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    src_dir = argv[0] if argv else "src"

    if not os.path.isdir(src_dir):
        print(f"Directory not found: {src_dir}")
        return 1

    files = find_python_files(src_dir)
    if not files:
        print(f"No Python files found in: {src_dir}")
        return 1

    all_errors = []
    for filepath in files:
        with open(filepath, encoding="utf-8") as f:
            source = f.read()
        try:
            errors = check_source(source, filepath)
        except SyntaxError as e:
            print(f"Syntax error in {filepath}: {e}")
            return 1
        for lineno, description in errors:
            all_errors.append((filepath, lineno, description))

    if not all_errors:
        return 0

    print(f"Found {len(all_errors)} banned construction(s):")
    for filepath, lineno, description in sorted(all_errors):
        print(f"  {filepath}:{lineno}: {description}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
