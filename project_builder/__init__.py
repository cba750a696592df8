"""Project Builder: interactive generator for project README and statement files.

Modules:
    config      - Named constants (course, defaults, output locations)
    models      - Author, Module, Project and the ProjectDraft builder
    collector   - Prompt sequence, section readers and default fill
    console     - Rich terminal adapter for the collector
    renderer    - README.md and statement.md markdown renderers
    emitter     - Output directory creation and file writes
    cli         - ``project-builder`` entry point
"""

from .collector import InputCollector, apply_defaults, collect_modules, collect_requirements
from .config import BuilderConfig
from .emitter import EmitResult, FileEmitter
from .models import Author, DraftFinalizedError, Module, Project, ProjectDraft
from .renderer import render_readme, render_statement

__all__ = [
    # Configuration
    "BuilderConfig",
    # Entities
    "Author",
    "Module",
    "Project",
    "ProjectDraft",
    "DraftFinalizedError",
    # Collection
    "InputCollector",
    "apply_defaults",
    "collect_modules",
    "collect_requirements",
    # Rendering and output
    "render_readme",
    "render_statement",
    "FileEmitter",
    "EmitResult",
]

__version__ = "0.1.0"
