"""Command-line entry point for the Project Builder.

Runs the three stages in order: collect the project from the operator, render
both documents, write them under ``output/``.  A write failure is reported but
does not change the exit status.
"""

from __future__ import annotations

import sys

from rich.console import Console

from project_builder.collector import InputCollector, LineSource
from project_builder.config import BuilderConfig
from project_builder.console import ConsoleSource, prepare_stdin
from project_builder.emitter import EmitResult, FileEmitter
from project_builder.models import Project
from project_builder.renderer import render_readme, render_statement
from project_builder.utils import console as default_console
from project_builder.utils import (
    folder_label,
    print_error,
    print_line,
    print_success,
    print_summary_table,
    print_warning,
)


def run(
    source: LineSource,
    config: BuilderConfig | None = None,
    console: Console | None = None,
) -> EmitResult:
    """Collect, render and write one project, then report to *console*."""
    config = config or BuilderConfig()
    out = console or default_console

    project = InputCollector(source, config).collect()
    readme = render_readme(project)
    statement = render_statement(project)
    result = FileEmitter(config).write(project.title, readme, statement)

    report(project, result, config, out)
    return result


def report(
    project: Project,
    result: EmitResult,
    config: BuilderConfig,
    console: Console,
) -> None:
    """Print the outcome of a run."""
    if not result.success:
        print_error(f"ERROR WRITING FILES: {result.error}", target=console)

    print_summary_table(
        {
            "Modules": str(len(project.modules)),
            "Functional requirements": str(len(project.functional_requirements)),
            "Non-functional requirements": str(len(project.non_functional_requirements)),
            "Files written": "\n".join(result.written) or "-",
        },
        title="Project Builder",
        target=console,
    )

    console.print()
    print_success("Project files generated successfully!", target=console)
    folder = f"{config.output_root.as_posix()}/{folder_label(project.title)}"
    print_line(f"Check the folder: {folder}", target=console)


def main() -> None:
    """CLI entry point for ``project-builder`` and ``python -m project_builder``."""
    console = default_console
    prepare_stdin()
    try:
        run(ConsoleSource(console), BuilderConfig(), console)
    except KeyboardInterrupt:
        console.print()
        print_warning("Aborted, no files were written.", target=console)
        sys.exit(130)


if __name__ == "__main__":
    main()
