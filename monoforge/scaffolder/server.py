"""Backend app provisioning.

Express and Koa servers are hand-written from templates (one entry file plus
a manifest).  NestJS goes through the official Nest CLI and is then patched
to enable CORS and expose the demo route.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from monoforge.config import Config
from monoforge.models import ScaffoldChoice, ServerSpec
from monoforge.utils import CommandRunner, save_json

from .patches import apply_patch, relocate_app
from .registry import APPS_DIR, SERVER_APP, SERVER_SPECS, demo_context, format_command
from .templates import TemplateRenderer


class ServerProvisioner:
    """Generates (or writes) and patches the ``apps/server`` package."""

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
        """Create the server app for *choice* under ``apps/server``."""
        spec = SERVER_SPECS[choice.server]
        context = demo_context(choice.server.value, self.config)
        app_dir = project_root / APPS_DIR / SERVER_APP

        if spec.hand_written:
            await self._write_server(spec, app_dir, context)
            return app_dir

        command = format_command(
            spec.command,
            app_name=SERVER_APP,
            package_manager=choice.package_manager.value,
        )
        await self.runner(command, project_root)

        relocated = await asyncio.to_thread(relocate_app, project_root, SERVER_APP, APPS_DIR)
        if relocated is None:
            return app_dir

        await self.patch(choice, relocated)
        return relocated

    async def patch(self, choice: ScaffoldChoice, app_dir: Path) -> list[str]:
        """Apply the server spec's patches; returns the paths actually changed."""
        spec = SERVER_SPECS[choice.server]
        context = demo_context(choice.server.value, self.config)
        changed: list[str] = []
        for file_patch in spec.patches:
            if await apply_patch(app_dir, file_patch, self.renderer, context):
                changed.append(file_patch.path)
        return changed

    async def _write_server(
        self, spec: ServerSpec, app_dir: Path, context: dict[str, Any]
    ) -> None:
        await asyncio.to_thread(app_dir.mkdir)
        for output_name, template_name in spec.files.items():
            await self.renderer.render_to_file(template_name, app_dir / output_name, context)
        save_json(server_manifest(spec), app_dir / "package.json")


def server_manifest(spec: ServerSpec) -> dict[str, Any]:
    """Return the ``package.json`` contents for a hand-written server."""
    return {
        "name": SERVER_APP,
        "version": "0.0.0",
        "scripts": {"start:dev": spec.start_script},
        "dependencies": dict(spec.dependencies),
    }
