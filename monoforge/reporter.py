"""Final summary: the generated layout and what to run next."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.tree import Tree

from monoforge.models import PackageManager, ScaffoldChoice
from monoforge.utils import console as default_console


def build_tree(choice: ScaffoldChoice) -> Tree:
    """Return the project layout as a Rich tree."""
    tree = Tree(f"[bold]{choice.project_name}/[/bold]")
    tree.add("package.json")
    if choice.package_manager is PackageManager.PNPM:
        tree.add("pnpm-workspace.yaml")
    apps = tree.add("apps/")
    apps.add(f"client/ [cyan]({choice.client.value})[/cyan]")
    apps.add(f"server/ [cyan]({choice.server.value})[/cyan]")
    return tree


def next_steps(choice: ScaffoldChoice) -> list[str]:
    """Commands the operator runs to install and start the new project."""
    pm = choice.package_manager.value
    return [
        f"cd {choice.project_name}",
        f"{pm} install",
        f"{pm} run dev",
    ]


def print_summary(
    choice: ScaffoldChoice,
    project_root: Path | None = None,
    console: Console | None = None,
) -> None:
    """Print the project tree and next-step instructions."""
    console = console or default_console
    console.print()
    console.print("[bold]Project structure:[/bold]")
    console.print(build_tree(choice))
    console.print()

    lines = [f"  [green]$[/green] {cmd}" for cmd in next_steps(choice)]
    title = "[bold]Monorepo created[/bold]"
    if project_root is not None:
        lines.insert(0, f"[dim]{project_root}[/dim]\n")
    console.print(Panel("\n".join(lines), title=title, border_style="bright_green"))
