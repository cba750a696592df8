"""Writes rendered documents to the output directory.

The emitter owns the only failure mode of a run: any ``OSError`` raised while
creating the project directory or writing a file is captured in the returned
:class:`EmitResult` instead of propagating, and files written before the
failure are left in place.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from project_builder.config import BuilderConfig
from project_builder.models import Project
from project_builder.renderer import render_readme, render_statement
from project_builder.utils import ensure_dir, write_text


class EmitResult(BaseModel):
    """Outcome of writing a project's documents."""

    directory: Path = Field(..., description="Directory the documents were written to")
    written: list[str] = Field(
        default_factory=list, description="Paths of the files written, in order"
    )
    success: bool = Field(default=True)
    error: str = Field(default="", description="Message of the I/O error, if any")


class FileEmitter:
    """Creates ``<output_root>/<sanitized title>/`` and writes both documents."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def emit(self, project: Project) -> EmitResult:
        """Render *project* and write ``README.md`` and ``statement.md``."""
        return self.write(project.title, render_readme(project), render_statement(project))

    def write(self, title: str, readme: str, statement: str) -> EmitResult:
        """Write already-rendered bodies for the project called *title*.

        Existing files are overwritten.  The README is written first.
        """
        directory = self.config.project_dir(title)
        result = EmitResult(directory=directory)

        try:
            ensure_dir(directory)
            for path, content in (
                (self.config.readme_path(title), readme),
                (self.config.statement_path(title), statement),
            ):
                write_text(path, content)
                result.written.append(str(path))
        except OSError as exc:
            result.success = False
            result.error = str(exc)

        return result
