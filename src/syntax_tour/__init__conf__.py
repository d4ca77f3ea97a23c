"""Static package metadata surfaced to CLI commands and documentation.

Values here are kept in sync with ``pyproject.toml``; the ``version`` line is
rewritten on release.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ``shell_command``)
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name, as published.
name = "syntax_tour"
#: One-line description used as CLI help title.
title = "A guided tour of basic syntax: records, functions, loops and conditionals"
#: Package version, kept in sync with pyproject.toml.
version = "1.0.0"
#: Console script name.
shell_command = "syntax-tour"


def print_info() -> None:
    """Print the package metadata as an aligned ``key = value`` block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for syntax_tour:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
