"""monoforge scaffolder -- builds client/server monorepos.

Takes a ``ScaffoldChoice`` and produces a workspace whose ``apps/client`` and
``apps/server`` packages come from each framework's official generator (or a
hand-written template), wired together through a demo endpoint.

Quick usage::

    from monoforge.config import Config
    from monoforge.scaffolder import MonorepoGenerator

    generator = MonorepoGenerator(Config())
    project_root = await generator.generate(choice)
"""

from monoforge.scaffolder.generator import MonorepoGenerator
from monoforge.scaffolder.templates import TemplateRenderer

__all__ = [
    "MonorepoGenerator",
    "TemplateRenderer",
]
