"""Frontend app provisioning.

Runs the selected framework's official generator next to ``apps/``, moves
its output to ``apps/client`` and rewrites the entry component so it fetches
the demo endpoint.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from monoforge.config import Config
from monoforge.models import ScaffoldChoice
from monoforge.utils import CommandRunner

from .patches import apply_patch, relocate_app
from .registry import APPS_DIR, CLIENT_APP, CLIENT_SPECS, demo_context, format_command
from .templates import TemplateRenderer


class ClientProvisioner:
    """Generates and patches the ``apps/client`` package."""

    def __init__(
        self,
        config: Config,
        runner: CommandRunner,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.runner = runner
        self.renderer = renderer or TemplateRenderer()

    async def provision(self, choice: ScaffoldChoice, project_root: Path) -> Path:
        """Generate the client app and apply its patches.

        Returns:
            Path to ``apps/client``.
        """
        spec = CLIENT_SPECS[choice.client]
        command = format_command(
            spec.command,
            app_name=CLIENT_APP,
            package_manager=choice.package_manager.value,
        )
        await self.runner(command, project_root)

        app_dir = await asyncio.to_thread(relocate_app, project_root, CLIENT_APP, APPS_DIR)
        if app_dir is None:
            return project_root / APPS_DIR / CLIENT_APP

        await self.patch(choice, app_dir)
        return app_dir

    async def patch(self, choice: ScaffoldChoice, app_dir: Path) -> list[str]:
        """Apply the client spec's patches; returns the paths actually changed."""
        spec = CLIENT_SPECS[choice.client]
        context = demo_context(choice.server.value, self.config)
        changed: list[str] = []
        for file_patch in spec.patches:
            if await apply_patch(app_dir, file_patch, self.renderer, context):
                changed.append(file_patch.path)
        return changed
