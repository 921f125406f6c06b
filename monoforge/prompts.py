"""Interactive collection of the operator's scaffold choice.

Asks for the package manager, client framework, server framework and
project name.  Choice questions only accept members of their fixed list;
the project name is asked again until it passes validation.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from monoforge.models import (
    PROJECT_NAME_PATTERN,
    ClientFramework,
    PackageManager,
    ScaffoldChoice,
    ServerFramework,
)
from monoforge.utils import console as default_console
from monoforge.utils import print_error


def resolve_project_path(name: str, cwd: Path) -> Path:
    """Return *name* as an absolute path, resolving relative names against *cwd*."""
    path = Path(name)
    if path.is_absolute():
        return path
    return (cwd / path).resolve()


def validate_project_name(name: str, cwd: Path) -> str | None:
    """Return an error message for an unusable project name, or ``None``.

    The existence check is advisory only: nothing stops another process from
    creating the directory before the workspace is initialised.
    """
    if not name or not name.strip():
        return "Project name must not be empty"
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        return "Project name may only contain letters, digits, '-', '_', '.' and '/'"
    if resolve_project_path(name, cwd).exists():
        return "A file or directory with that name already exists"
    return None


def ask_project_name(cwd: Path, console: Console | None = None) -> str:
    """Prompt until a valid, not-yet-existing project name is entered."""
    console = console or default_console
    while True:
        name = Prompt.ask("Project name", console=console)
        error = validate_project_name(name, cwd)
        if error is None:
            return name
        print_error(error)


def collect_choice(cwd: Path | None = None, console: Console | None = None) -> ScaffoldChoice:
    """Ask the four scaffolding questions and return the validated answers."""
    console = console or default_console
    cwd = cwd or Path.cwd()

    package_manager = Prompt.ask(
        "Package manager",
        choices=[pm.value for pm in PackageManager],
        default=PackageManager.NPM.value,
        console=console,
    )
    client = Prompt.ask(
        "Frontend framework",
        choices=[c.value for c in ClientFramework],
        default=ClientFramework.REACT.value,
        console=console,
    )
    server = Prompt.ask(
        "Backend framework",
        choices=[s.value for s in ServerFramework],
        default=ServerFramework.EXPRESS.value,
        console=console,
    )
    name = ask_project_name(cwd, console)

    return ScaffoldChoice(
        package_manager=PackageManager(package_manager),
        client=ClientFramework(client),
        server=ServerFramework(server),
        project_name=name,
    )
