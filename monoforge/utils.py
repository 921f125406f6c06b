"""Shared utility functions for monoforge.

Provides async command execution, JSON I/O, and Rich-based console helpers.
Child processes started here always share the operator's terminal, so
third-party generators can ask their own interactive questions.
"""

from __future__ import annotations

import asyncio
import json
import shutil
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

console = Console()

# Async callable that runs an argv in a working directory and raises on failure.
CommandRunner = Callable[[list[str], Path], Awaitable[None]]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for all monoforge errors."""


class CommandError(ScaffoldError):
    """Raised when an external command fails or times out."""

    def __init__(self, message: str, command: str = "", returncode: int | None = None):
        self.command = command
        self.returncode = returncode
        super().__init__(message)


# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 900,
) -> int | None:
    """Run a command asynchronously, attached to the operator's terminal.

    Args:
        cmd: Argument vector. The executable is looked up on ``PATH`` so that
            wrapper scripts such as ``npm.cmd`` resolve on Windows.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        The process return code, or ``None`` if it was killed after *timeout*.
    """
    argv = list(cmd)
    argv[0] = shutil.which(argv[0]) or argv[0]

    process = await asyncio.create_subprocess_exec(
        *argv,
        cwd=str(cwd) if cwd else None,
    )

    try:
        return await asyncio.wait_for(process.wait(), timeout=timeout)
    except asyncio.TimeoutError:
        return None
    finally:
        # Never leave an orphaned child behind.
        if process.returncode is None:
            process.kill()
            await process.wait()


async def run_checked(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 900,
) -> None:
    """Run *cmd* attached to the terminal and raise on failure.

    Raises:
        CommandError: If the process exits non-zero or exceeds *timeout*.
    """
    cmd_str = " ".join(cmd)
    console.print(f"  [dim]$ {escape(cmd_str)}[/dim]")
    returncode = await run_command(cmd, cwd=cwd, timeout=timeout)
    if returncode is None:
        raise CommandError(
            f"Command timed out after {timeout}s: {cmd_str}",
            command=cmd_str,
        )
    if returncode != 0:
        raise CommandError(
            f"Command exited with code {returncode}: {cmd_str}",
            command=cmd_str,
            returncode=returncode,
        )


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON object file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


def save_json(data: dict[str, Any], path: str | Path) -> None:
    """Save *data* as JSON pretty-printed with a two-space indent."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step_header(title: str, color: str = "bright_cyan") -> None:
    """Print a full-width rule announcing a scaffolding step."""
    console.print()
    console.print(Rule(f"[bold {color}] {title} [/bold {color}]", style=color))
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
