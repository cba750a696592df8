"""Shared pytest fixtures for the Project Builder test suite.

Provides reusable fixtures for:
- A scripted line source that replays canned operator answers
- A Rich console that records output into a string buffer
- A configuration pointing at a temporary output root
- Pre-built authors and projects
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from project_builder.config import BuilderConfig
from project_builder.models import Author, Module, Project


# ---------------------------------------------------------------------------
# Scripted input
# ---------------------------------------------------------------------------

class ScriptedSource:
    """Line source that answers prompts from a fixed list.

    Raises ``EOFError`` once the answers run out, like ``input()`` does when
    stdin is closed.  Every prompt and announcement is recorded.
    """

    def __init__(self, answers: list[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.announcements: list[str] = []
        self.blank_before: list[bool] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def announce(self, message: str, leading_blank: bool = True) -> None:
        self.announcements.append(message)
        self.blank_before.append(leading_blank)

    @property
    def remaining(self) -> int:
        return len(self._answers)


@pytest.fixture
def scripted():
    """Factory fixture: ``scripted(["answer", ...])`` -> ``ScriptedSource``."""
    return ScriptedSource


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------

@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def captured_console(buffer: io.StringIO) -> Console:
    """Plain-text Rich console writing into ``buffer``."""
    return Console(file=buffer, width=200, color_system=None, force_terminal=False)


# ---------------------------------------------------------------------------
# Configuration & paths
# ---------------------------------------------------------------------------

@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    return tmp_path / "output"


@pytest.fixture
def config(output_root: Path) -> BuilderConfig:
    """Default configuration writing under a temporary output root."""
    return BuilderConfig(output_root=output_root)


# ---------------------------------------------------------------------------
# Sample entities
# ---------------------------------------------------------------------------

@pytest.fixture
def author() -> Author:
    return Author(name="Asha", roll="21CE045", course="Computer Engineering 3rd Semester")


@pytest.fixture
def sample_project(author: Author) -> Project:
    """A fully populated project as the collector would return it."""
    return Project(
        title="Library System",
        problem_statement="Books are tracked on paper.",
        scope="Single branch library.",
        modules=(
            Module(title="Catalogue", description="Stores book records"),
            Module(title="Lending", description="Issues and returns books"),
            Module(title="Members", description="Keeps member details"),
        ),
        functional_requirements=("Librarian can add books", "Member can borrow books"),
        non_functional_requirements=("Runs offline", "Responds within a second"),
        author=author,
    )


@pytest.fixture
def library_answers() -> list[str]:
    """Answers for the 'Library System' run with every section left empty."""
    return [
        "Asha",
        "21CE045",
        "Library System",
        "Books are tracked on paper.",
        "Single branch library.",
        "done",
        "done",
        "done",
    ]
