"""Workspace root initialisation.

Creates the project directory, runs the package manager's own ``init`` and
turns the resulting ``package.json`` into a workspace root whose members are
``apps/*``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import yaml

from monoforge.config import Config
from monoforge.models import PackageManager, ScaffoldChoice
from monoforge.utils import CommandRunner, load_json, save_json

from .registry import APPS_DIR, INIT_COMMANDS, WORKSPACE_GLOB, dev_script


class WorkspaceInitializer:
    """Creates and configures the monorepo root."""

    def __init__(self, config: Config, runner: CommandRunner) -> None:
        self.config = config
        self.runner = runner

    async def initialize(self, choice: ScaffoldChoice, project_root: Path) -> Path:
        """Create *project_root* and make it a workspace root.

        ``mkdir`` is not ``exist_ok``: a directory created by someone else
        since the name was validated raises ``FileExistsError``.

        Returns:
            Path to the root ``package.json``.
        """
        await asyncio.to_thread(project_root.mkdir)

        await self.runner(list(INIT_COMMANDS[choice.package_manager]), project_root)

        if choice.package_manager is PackageManager.PNPM:
            write_pnpm_workspace(project_root)

        manifest_path = project_root / "package.json"
        manifest = load_json(manifest_path)
        manifest["private"] = True
        manifest["workspaces"] = [WORKSPACE_GLOB]
        manifest["dependencies"] = {"concurrently": self.config.concurrently_version}
        manifest["scripts"] = {"dev": dev_script(choice.package_manager, choice.client)}
        save_json(manifest, manifest_path)

        (project_root / APPS_DIR).mkdir()
        return manifest_path


def write_pnpm_workspace(project_root: Path) -> Path:
    """Write ``pnpm-workspace.yaml`` declaring ``apps/*`` as member packages."""
    path = project_root / "pnpm-workspace.yaml"
    path.write_text(
        yaml.safe_dump({"packages": [WORKSPACE_GLOB]}, sort_keys=False),
        encoding="utf-8",
    )
    return path
