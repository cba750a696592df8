"""Project Builder configuration.

Every fixed constant the tool relies on (course name, default modules and
requirements, output locations) lives in a single Pydantic v2 model so it can
be validated at construction time and overridden explicitly in tests.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from project_builder.models import Module
from project_builder.utils import sanitize_title

DEFAULT_COURSE = "Computer Engineering 3rd Semester"

DEFAULT_MODULES: tuple[Module, ...] = (
    Module(title="User Management", description="Handles basic user details"),
    Module(title="Project Management", description="Stores project information"),
    Module(title="Report Generator", description="Creates README & statement files"),
)

DEFAULT_FUNCTIONAL: tuple[str, ...] = (
    "User can create/view project details",
    "System generates README.md & statement.md",
)

DEFAULT_NON_FUNCTIONAL: tuple[str, ...] = (
    "Simple console-based application",
    "Generates structured markdown files",
)


class BuilderConfig(BaseModel):
    """Global Project Builder configuration.

    Instances are created once by the CLI entry point and passed through the
    collector and the emitter.
    """

    course: str = Field(default=DEFAULT_COURSE)
    default_modules: list[Module] = Field(default_factory=lambda: list(DEFAULT_MODULES))
    default_functional: list[str] = Field(default_factory=lambda: list(DEFAULT_FUNCTIONAL))
    default_non_functional: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NON_FUNCTIONAL)
    )
    min_modules: int = Field(
        default=3, ge=1, description="Below this count the default modules are appended"
    )
    terminator: str = Field(
        default="done", min_length=1, description="Token that ends a repeating section"
    )
    output_root: Path = Field(default=Path("output"))
    readme_name: str = Field(default="README.md")
    statement_name: str = Field(default="statement.md")

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def project_dir(self, title: str) -> Path:
        """Directory that receives the documents for *title*."""
        return self.output_root / sanitize_title(title)

    def readme_path(self, title: str) -> Path:
        return self.project_dir(title) / self.readme_name

    def statement_path(self, title: str) -> Path:
        return self.project_dir(title) / self.statement_name
