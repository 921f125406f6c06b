"""monoforge command-line entry point.

Fully interactive: there are no flags.  Tuning knobs come from the
environment (see ``Config.from_env``).

Usage::

    monoforge
    python -m monoforge
"""

from __future__ import annotations

import asyncio

from rich.panel import Panel
from rich.traceback import install as install_rich_traceback

from monoforge.config import Config
from monoforge.prompts import collect_choice
from monoforge.reporter import print_summary
from monoforge.scaffolder import MonorepoGenerator
from monoforge.utils import console


def main() -> None:
    """CLI entry point for ``monoforge`` / ``python -m monoforge``.

    Errors are not caught: a failing generator or filesystem operation ends
    the run with a non-zero exit status and a traceback, leaving whatever was
    already scaffolded in place.
    """
    install_rich_traceback(console=console)
    config = Config.from_env()

    console.print(
        Panel(
            "[bold bright_cyan]monoforge[/bold bright_cyan]\n"
            "Client + server monorepo scaffolder",
            border_style="bright_cyan",
        )
    )

    choice = collect_choice()
    generator = MonorepoGenerator(config)
    project_root = asyncio.run(generator.generate(choice))
    print_summary(choice, project_root)


if __name__ == "__main__":
    main()
