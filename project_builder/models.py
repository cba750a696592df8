"""Pydantic v2 models for the Project Builder.

Defines the entity model collected from the operator (author, modules and the
project aggregate) plus the ``ProjectDraft`` builder that accumulates fields
during collection and is finalized exactly once into an immutable ``Project``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class DraftFinalizedError(Exception):
    """Raised when a ``ProjectDraft`` is used after it has been finalized."""


# ---------------------------------------------------------------------------
# Immutable entities
# ---------------------------------------------------------------------------

class Author(BaseModel):
    """Identity of the student submitting the project."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(default="", description="Author's full name")
    roll: str = Field(default="", description="Roll number / enrolment identifier")
    course: str = Field(..., description="Course the project is submitted for")


class Module(BaseModel):
    """A named functional unit of the described project."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    title: str = Field(default="", description="Module name, e.g. 'User Management'")
    description: str = Field(default="", description="What the module does")


class Project(BaseModel):
    """Fully collected project, ready for rendering.

    Sequences are tuples so that a rendered project can never change
    underneath the renderer.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    title: str = Field(default="")
    problem_statement: str = Field(default="")
    scope: str = Field(default="")
    modules: tuple[Module, ...] = Field(default=())
    functional_requirements: tuple[str, ...] = Field(default=())
    non_functional_requirements: tuple[str, ...] = Field(default=())
    author: Author


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class ProjectDraft(BaseModel):
    """Mutable accumulator used while prompting the operator.

    Single-value fields are assigned directly; repeating sections go through
    the ``add_*`` helpers. ``finalize()`` produces the immutable ``Project``
    and locks the draft.
    """

    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    author: Author
    title: str = Field(default="")
    problem_statement: str = Field(default="")
    scope: str = Field(default="")
    modules: list[Module] = Field(default_factory=list)
    functional_requirements: list[str] = Field(default_factory=list)
    non_functional_requirements: list[str] = Field(default_factory=list)

    _finalized: bool = PrivateAttr(default=False)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def add_module(self, module: Module) -> None:
        self._check_open()
        self.modules.append(module)

    def add_functional(self, requirement: str) -> None:
        self._check_open()
        self.functional_requirements.append(requirement.strip())

    def add_non_functional(self, requirement: str) -> None:
        self._check_open()
        self.non_functional_requirements.append(requirement.strip())

    def finalize(self) -> Project:
        """Freeze the draft into a ``Project``.

        Raises:
            DraftFinalizedError: If the draft was already finalized.
        """
        self._check_open()
        self._finalized = True
        return Project(
            title=self.title,
            problem_statement=self.problem_statement,
            scope=self.scope,
            modules=tuple(self.modules),
            functional_requirements=tuple(self.functional_requirements),
            non_functional_requirements=tuple(self.non_functional_requirements),
            author=self.author,
        )

    def _check_open(self) -> None:
        if self._finalized:
            raise DraftFinalizedError("Project draft has already been finalized")
