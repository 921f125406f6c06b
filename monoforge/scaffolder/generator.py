"""Main scaffolding orchestrator.

Takes a ``ScaffoldChoice`` and builds the monorepo: workspace root, then the
client app, then the server app.  Steps run strictly one after another and
all paths are derived from an explicit project root; the process working
directory is never changed.
"""

from __future__ import annotations

import functools
from pathlib import Path

from monoforge.config import Config
from monoforge.models import ScaffoldChoice
from monoforge.prompts import resolve_project_path
from monoforge.utils import CommandRunner, print_step_header, print_success, run_checked

from .client import ClientProvisioner
from .server import ServerProvisioner
from .templates import TemplateRenderer
from .workspace import WorkspaceInitializer


class MonorepoGenerator:
    """Builds a client/server monorepo from an operator's choice.

    Any failing external command raises ``CommandError`` and aborts the run;
    whatever was already written stays on disk.
    """

    def __init__(self, config: Config, runner: CommandRunner | None = None) -> None:
        self.config = config
        if runner is None:
            runner = functools.partial(run_checked, timeout=config.command_timeout)
        self.runner = runner
        self.renderer = TemplateRenderer()
        self.workspace = WorkspaceInitializer(config, self.runner)
        self.client = ClientProvisioner(config, self.runner, self.renderer)
        self.server = ServerProvisioner(config, self.runner, self.renderer)

    async def generate(self, choice: ScaffoldChoice, cwd: str | Path | None = None) -> Path:
        """Scaffold the project described by *choice*.

        Args:
            choice: Validated operator answers.
            cwd: Directory a relative project name is resolved against.
                Defaults to the current working directory.

        Returns:
            Path to the generated project root.
        """
        project_root = resolve_project_path(choice.project_name, Path(cwd or Path.cwd()))

        print_step_header(f"Workspace ({choice.package_manager.value})")
        await self.workspace.initialize(choice, project_root)

        print_step_header(f"Client ({choice.client.value})", color="bright_green")
        await self.client.provision(choice, project_root)

        print_step_header(f"Server ({choice.server.value})", color="bright_yellow")
        await self.server.provision(choice, project_root)

        print_success(f"Scaffolded {project_root}")
        return project_root
