"""Unit tests for the markdown renderers (project_builder.renderer).

Tests cover:
- render_readme exact layout and section order
- render_statement exact layout and trailer
- count_module_bullets against the number of modules
"""

from __future__ import annotations

import pytest

from project_builder.models import Author, Module, Project
from project_builder.renderer import count_module_bullets, render_readme, render_statement

EXPECTED_README = (
    "# Library System\n"
    "\n"
    "*Author:* Asha\n"
    "*Roll No:* 21CE045\n"
    "*Course:* Computer Engineering 3rd Semester\n"
    "\n"
    "## Problem Statement\n"
    "Books are tracked on paper.\n"
    "\n"
    "## Project Scope\n"
    "Single branch library.\n"
    "\n"
    "## Modules\n"
    "- *Catalogue*: Stores book records\n"
    "- *Lending*: Issues and returns books\n"
    "- *Members*: Keeps member details\n"
    "\n"
    "## Functional Requirements\n"
    "- Librarian can add books\n"
    "- Member can borrow books\n"
    "\n"
    "## Non-Functional Requirements\n"
    "- Runs offline\n"
    "- Responds within a second\n"
)

EXPECTED_STATEMENT = (
    "# Project Statement\n"
    "\n"
    "*Title:* Library System\n"
    "\n"
    "*Problem Statement:*\n"
    "Books are tracked on paper.\n"
    "\n"
    "*Scope:*\n"
    "Single branch library.\n"
    "\n"
    "*Modules:*\n"
    "- Catalogue: Stores book records\n"
    "- Lending: Issues and returns books\n"
    "- Members: Keeps member details\n"
    "\n"
    "*Author:* Asha (21CE045)"
)


class TestRenderReadme:
    @pytest.mark.unit
    def test_exact_output(self, sample_project: Project):
        assert render_readme(sample_project) == EXPECTED_README

    @pytest.mark.unit
    def test_section_order(self, sample_project: Project):
        readme = render_readme(sample_project)
        headings = [line for line in readme.splitlines() if line.startswith("#")]
        assert headings == [
            "# Library System",
            "## Problem Statement",
            "## Project Scope",
            "## Modules",
            "## Functional Requirements",
            "## Non-Functional Requirements",
        ]

    @pytest.mark.unit
    def test_ends_with_single_newline(self, sample_project: Project):
        readme = render_readme(sample_project)
        assert readme.endswith("second\n")
        assert not readme.endswith("\n\n")

    @pytest.mark.unit
    def test_empty_text_fields(self, author: Author):
        project = Project(
            modules=(Module(),),
            functional_requirements=("f",),
            non_functional_requirements=("n",),
            author=author,
        )
        readme = render_readme(project)
        assert readme.startswith("# \n\n")
        assert "## Problem Statement\n\n\n## Project Scope\n\n\n## Modules\n- **: \n" in readme

    @pytest.mark.unit
    def test_unicode_passthrough(self, author: Author):
        project = Project(title="Bibliothèque 📚", author=author)
        assert render_readme(project).startswith("# Bibliothèque 📚\n")


class TestRenderStatement:
    @pytest.mark.unit
    def test_exact_output(self, sample_project: Project):
        assert render_statement(sample_project) == EXPECTED_STATEMENT

    @pytest.mark.unit
    def test_no_trailing_newline(self, sample_project: Project):
        assert not render_statement(sample_project).endswith("\n")

    @pytest.mark.unit
    def test_has_no_section_headings_besides_title(self, sample_project: Project):
        statement = render_statement(sample_project)
        assert [l for l in statement.splitlines() if l.startswith("#")] == ["# Project Statement"]

    @pytest.mark.unit
    def test_modules_listed_without_emphasis(self, sample_project: Project):
        statement = render_statement(sample_project)
        assert "- Catalogue: Stores book records\n" in statement
        assert "*Catalogue*" not in statement

    @pytest.mark.unit
    def test_differs_from_readme(self, sample_project: Project):
        assert render_statement(sample_project) != render_readme(sample_project)


class TestCountModuleBullets:
    @pytest.mark.unit
    @pytest.mark.parametrize("count", [0, 1, 3, 5, 12])
    def test_matches_module_count(self, author: Author, count: int):
        project = Project(
            title="T",
            modules=tuple(Module(title=f"M{i}", description="d") for i in range(count)),
            functional_requirements=("f1", "f2"),
            non_functional_requirements=("n1", "n2"),
            author=author,
        )
        assert count_module_bullets(render_readme(project)) == count

    @pytest.mark.unit
    def test_sample_project(self, sample_project: Project):
        readme = render_readme(sample_project)
        assert count_module_bullets(readme) == len(sample_project.modules)
