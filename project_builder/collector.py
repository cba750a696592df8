"""Operator input collection.

Turns a line-oriented source of answers into a finalized :class:`Project`.

The section readers (``collect_modules``, ``collect_requirements``) are plain
functions over a ``LineSource`` so they can be driven by a scripted source in
tests; :class:`~project_builder.console.ConsoleSource` binds the same protocol
to a terminal.  Defaults are filled in once, after every section has been
read, by :func:`apply_defaults`.
"""

from __future__ import annotations

from typing import Protocol

from project_builder.config import BuilderConfig
from project_builder.models import Author, Module, Project, ProjectDraft

# ---------------------------------------------------------------------------
# Prompts and banners
# ---------------------------------------------------------------------------

BANNER = "=== Project Builder ==="

PROMPT_NAME = "Enter your name: "
PROMPT_ROLL = "Enter your roll number: "

SECTION_DETAILS = "--- Enter Project Details ---"
PROMPT_TITLE = "Project Title: "
PROMPT_PROBLEM = "Problem Statement: "
PROMPT_SCOPE = "Project Scope: "

SECTION_MODULES = "--- Add Modules ---"
PROMPT_MODULE_TITLE = "Module Title (or 'done'): "
PROMPT_MODULE_DESCRIPTION = "Module Description: "

SECTION_FUNCTIONAL = "--- Add Functional Requirements ---"
PROMPT_FUNCTIONAL = "Functional Requirement (or 'done'): "

SECTION_NON_FUNCTIONAL = "--- Add Non-Functional Requirements ---"
PROMPT_NON_FUNCTIONAL = "Non-Functional Requirement (or 'done'): "


class LineSource(Protocol):
    """Anything that can answer a prompt with one line of text.

    ``read`` raises ``EOFError`` once no more input is available.
    """

    def read(self, prompt: str) -> str: ...

    def announce(self, message: str, leading_blank: bool = True) -> None: ...


# ---------------------------------------------------------------------------
# Section readers
# ---------------------------------------------------------------------------


def is_terminator(value: str, token: str = "done") -> bool:
    """Return ``True`` if *value* ends a repeating section (case-insensitive)."""
    return value.strip().lower() == token.strip().lower()


def read_field(source: LineSource, prompt: str) -> str:
    """Read a single-value field.  Empty answers are kept as ``""``."""
    try:
        return source.read(prompt).strip()
    except EOFError:
        return ""


def collect_modules(source: LineSource, token: str = "done") -> list[Module]:
    """Read title/description pairs until the terminator is entered.

    The description is asked for every non-terminator title, including an
    empty one.
    """
    modules: list[Module] = []
    while True:
        try:
            title = source.read(PROMPT_MODULE_TITLE).strip()
        except EOFError:
            break
        if is_terminator(title, token):
            break
        description = read_field(source, PROMPT_MODULE_DESCRIPTION)
        modules.append(Module(title=title, description=description))
    return modules


def collect_requirements(
    source: LineSource,
    prompt: str,
    token: str = "done",
) -> list[str]:
    """Read free-text requirement lines until the terminator is entered.

    Blank lines are skipped.
    """
    requirements: list[str] = []
    while True:
        try:
            line = source.read(prompt).strip()
        except EOFError:
            break
        if is_terminator(line, token):
            break
        if line:
            requirements.append(line)
    return requirements


# ---------------------------------------------------------------------------
# Default fill
# ---------------------------------------------------------------------------


def apply_defaults(draft: ProjectDraft, config: BuilderConfig) -> ProjectDraft:
    """Top up under-filled sections with the configured defaults.

    When fewer than ``config.min_modules`` modules were entered, every
    default module is appended after the entered ones (1 entered module
    yields 4 in total, not 3).  Requirement defaults are appended only when
    the section is empty.
    """
    if len(draft.modules) < config.min_modules:
        for module in config.default_modules:
            draft.add_module(module)

    if not draft.functional_requirements:
        for requirement in config.default_functional:
            draft.add_functional(requirement)

    if not draft.non_functional_requirements:
        for requirement in config.default_non_functional:
            draft.add_non_functional(requirement)

    return draft


# ---------------------------------------------------------------------------
# InputCollector
# ---------------------------------------------------------------------------


class InputCollector:
    """Walks the operator through every prompt and returns the project.

    Usage::

        collector = InputCollector(ConsoleSource(), BuilderConfig())
        project = collector.collect()
    """

    def __init__(self, source: LineSource, config: BuilderConfig | None = None) -> None:
        self.source = source
        self.config = config or BuilderConfig()

    def collect(self) -> Project:
        """Run the full prompt sequence and return the finalized project."""
        token = self.config.terminator
        self.source.announce(BANNER, leading_blank=False)

        author = self.collect_author()
        draft = ProjectDraft(author=author)

        self.source.announce(SECTION_DETAILS)
        draft.title = read_field(self.source, PROMPT_TITLE)
        draft.problem_statement = read_field(self.source, PROMPT_PROBLEM)
        draft.scope = read_field(self.source, PROMPT_SCOPE)

        self.source.announce(SECTION_MODULES)
        for module in collect_modules(self.source, token):
            draft.add_module(module)

        self.source.announce(SECTION_FUNCTIONAL)
        for requirement in collect_requirements(self.source, PROMPT_FUNCTIONAL, token):
            draft.add_functional(requirement)

        self.source.announce(SECTION_NON_FUNCTIONAL)
        for requirement in collect_requirements(self.source, PROMPT_NON_FUNCTIONAL, token):
            draft.add_non_functional(requirement)

        apply_defaults(draft, self.config)
        return draft.finalize()

    def collect_author(self) -> Author:
        name = read_field(self.source, PROMPT_NAME)
        roll = read_field(self.source, PROMPT_ROLL)
        return Author(name=name, roll=roll, course=self.config.course)
