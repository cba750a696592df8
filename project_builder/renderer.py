"""Markdown rendering for collected projects.

Two independent renderers: ``render_readme`` for the full ``README.md`` and
``render_statement`` for the short ``statement.md``.  Both are pure
functions of a finalized :class:`Project` and never fail.
"""

from __future__ import annotations

from project_builder.models import Module, Project

README_MODULES_HEADING = "## Modules"


def render_readme(project: Project) -> str:
    """Render the README body.

    Sections, in order: title, author block, Problem Statement, Project
    Scope, Modules, Functional Requirements, Non-Functional Requirements.
    The text ends with a single newline.
    """
    author = project.author
    lines: list[str] = [
        f"# {project.title}",
        "",
        f"*Author:* {author.name}",
        f"*Roll No:* {author.roll}",
        f"*Course:* {author.course}",
        "",
        "## Problem Statement",
        project.problem_statement,
        "",
        "## Project Scope",
        project.scope,
        "",
        README_MODULES_HEADING,
    ]
    for module in project.modules:
        lines.append(f"- *{module.title}*: {module.description}")

    lines.append("")
    lines.append("## Functional Requirements")
    for requirement in project.functional_requirements:
        lines.append(f"- {requirement}")

    lines.append("")
    lines.append("## Non-Functional Requirements")
    for requirement in project.non_functional_requirements:
        lines.append(f"- {requirement}")

    return "\n".join(lines) + "\n"


def render_statement(project: Project) -> str:
    """Render the one-page project statement.

    Flat layout with bold labels instead of section headings, closed by an
    ``*Author:* name (roll)`` trailer with no final newline.
    """
    return (
        "# Project Statement\n\n"
        f"*Title:* {project.title}\n\n"
        f"*Problem Statement:*\n{project.problem_statement}\n\n"
        f"*Scope:*\n{project.scope}\n\n"
        "*Modules:*\n"
        f"{_module_lines(project.modules)}"
        f"\n*Author:* {project.author.name} ({project.author.roll})"
    )


def _module_lines(modules: tuple[Module, ...]) -> str:
    return "".join(f"- {m.title}: {m.description}\n" for m in modules)


def count_module_bullets(readme: str) -> int:
    """Count the bullet lines under the README's Modules heading."""
    count = 0
    in_modules = False
    for line in readme.splitlines():
        if line.startswith("## "):
            in_modules = line == README_MODULES_HEADING
            continue
        if in_modules and line.startswith("- "):
            count += 1
    return count
