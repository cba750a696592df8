"""Terminal adapter for the input collector.

Binds the ``LineSource`` protocol from :mod:`project_builder.collector` to a
real terminal using Rich: prompts are written through ``Console.input`` and
section banners through the shared output helpers.

Answers are taken verbatim, so bytes that are not valid UTF-8 become U+FFFD
instead of aborting the run.
"""

from __future__ import annotations

import sys

from rich.console import Console

from project_builder.utils import console as default_console
from project_builder.utils import print_section_header


def prepare_stdin() -> None:
    """Make standard input replace undecodable bytes with U+FFFD.

    Must be called before the first read.
    """
    reconfigure = getattr(sys.stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")


def scrub(line: str) -> str:
    """Replace lone surrogates left by a ``surrogateescape`` decode with U+FFFD."""
    try:
        raw = line.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = line.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace")


class ConsoleSource:
    """Reads operator answers from standard input, one line per prompt."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def read(self, prompt: str) -> str:
        # Raises EOFError once stdin is closed; the collector handles it.
        return scrub(self.console.input(prompt, markup=False, emoji=False))

    def announce(self, message: str, leading_blank: bool = True) -> None:
        print_section_header(message, target=self.console, leading_blank=leading_blank)
