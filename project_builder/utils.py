"""Shared utility functions for the Project Builder.

Provides the title-to-folder helpers, file-system helpers and the Rich-based
output helpers used by the collector, the emitter and the CLI.  The output
helpers print to the shared module-level ``console`` unless a different
``Console`` is passed in (tests pass one backed by ``io.StringIO``).
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------

_UNSAFE_TITLE_CHARS = re.compile(r"[^a-zA-Z0-9_ ]")


def sanitize_title(title: str) -> str:
    """Convert a project title to the name of its output directory.

    * Removes every character that is not an ASCII letter, digit, underscore
      or space.
    * Replaces each remaining space with an underscore.

    Examples::

        sanitize_title("My Project! #1") -> "My_Project_1"
        sanitize_title("Library System") -> "Library_System"
    """
    return _UNSAFE_TITLE_CHARS.sub("", title).replace(" ", "_")


def folder_label(title: str) -> str:
    """Return the folder name shown to the operator after a run.

    Only spaces are replaced, so for titles with punctuation this differs
    from ``sanitize_title`` and from the directory actually written.
    """
    return title.replace(" ", "_")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object for the directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text(path: Path, content: str) -> Path:
    """Write *content* verbatim as UTF-8, replacing any existing file."""
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    return path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------
# Single-line messages use ``soft_wrap=True`` so long titles and paths are
# never folded at the console width.


def print_section_header(
    title: str,
    target: Console | None = None,
    leading_blank: bool = True,
) -> None:
    """Print a section banner such as ``--- Add Modules ---``.

    The opening banner passes ``leading_blank=False`` so a run does not
    start with an empty line.
    """
    out = target or console
    if leading_blank:
        out.print()
    out.print(escape(title), style="bold cyan", soft_wrap=True)


def print_summary_table(
    data: dict[str, str],
    title: str = "Summary",
    target: Console | None = None,
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        target: Console to print to; defaults to the shared console.
    """
    out = target or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    out.print(table)


def print_line(message: str, target: Console | None = None) -> None:
    """Print an unstyled message on one line."""
    (target or console).print(escape(message), soft_wrap=True)


def print_success(message: str, target: Console | None = None) -> None:
    """Print a green success message."""
    (target or console).print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str, target: Console | None = None) -> None:
    """Print a red error message."""
    (target or console).print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)


def print_warning(message: str, target: Console | None = None) -> None:
    """Print a yellow warning message."""
    (target or console).print(f"[bold yellow]{escape(message)}[/bold yellow]", soft_wrap=True)
