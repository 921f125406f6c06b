"""Tests for the declarative scaffolding tables (monoforge.scaffolder.registry)."""

from __future__ import annotations

import pytest

from monoforge.config import Config
from monoforge.models import ClientFramework, PackageManager, PatchKind, ServerFramework
from monoforge.scaffolder.registry import (
    CLIENT_SPECS,
    INIT_COMMANDS,
    SERVER_SPECS,
    demo_context,
    dev_script,
    format_command,
)
from monoforge.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


class TestTablesAreComplete:
    def test_every_package_manager_has_init(self):
        assert set(INIT_COMMANDS) == set(PackageManager)

    def test_every_client_has_spec(self):
        assert set(CLIENT_SPECS) == set(ClientFramework)

    def test_every_server_has_spec(self):
        assert set(SERVER_SPECS) == set(ServerFramework)

    def test_referenced_templates_exist(self):
        template_dir = TemplateRenderer().template_dir
        referenced = [
            p.template
            for spec in [*CLIENT_SPECS.values(), *SERVER_SPECS.values()]
            for p in spec.patches
            if p.kind is PatchKind.TEMPLATE
        ]
        referenced += [t for spec in SERVER_SPECS.values() for t in spec.files.values()]
        assert referenced
        for name in referenced:
            assert (template_dir / name).is_file(), name


class TestInitCommands:
    def test_npm_and_yarn_are_non_interactive(self):
        assert INIT_COMMANDS[PackageManager.NPM] == ["npm", "init", "-y"]
        assert INIT_COMMANDS[PackageManager.YARN] == ["yarn", "init", "-y"]

    def test_pnpm(self):
        assert INIT_COMMANDS[PackageManager.PNPM] == ["pnpm", "init"]


class TestDevScript:
    @pytest.mark.parametrize(
        "pm, client_part, server_part",
        [
            ("npm", "npm run dev -w=client", "npm run start:dev -w=server"),
            ("pnpm", "pnpm --dir=apps/client run dev", "pnpm --dir=apps/server run start:dev"),
            ("yarn", "yarn --cwd=apps/client run dev", "yarn --cwd=apps/server run start:dev"),
        ],
    )
    def test_per_package_manager(self, pm, client_part, server_part):
        script = dev_script(PackageManager(pm), ClientFramework.REACT)
        assert script == f'concurrently "{client_part}" "{server_part}"'

    @pytest.mark.parametrize("pm", ["npm", "yarn", "pnpm"])
    def test_angular_serves_from_client_dir(self, pm):
        script = dev_script(PackageManager(pm), ClientFramework.ANGULAR)
        assert script.startswith('concurrently "cd apps/client && ng serve" ')
        assert "start:dev" in script

    def test_quotes_are_balanced(self):
        for pm in PackageManager:
            for client in ClientFramework:
                assert dev_script(pm, client).count('"') == 4


class TestFormatCommand:
    def test_substitutes_placeholders(self):
        argv = format_command(
            SERVER_SPECS[ServerFramework.NESTJS].command,
            app_name="server",
            package_manager="pnpm",
        )
        assert argv == [
            "npx", "@nestjs/cli", "new", "server", "--skip-install",
            "--directory=server", "--package-manager=pnpm",
        ]

    def test_react_generator(self):
        argv = format_command(CLIENT_SPECS[ClientFramework.REACT].command, app_name="client")
        assert argv == ["npm", "create", "vite@latest", "client", "--", "--template", "react"]

    def test_angular_generator(self):
        argv = format_command(CLIENT_SPECS[ClientFramework.ANGULAR].command, app_name="client")
        assert "--skip-install" in argv
        assert "--ssr=true" in argv
        assert "--directory=client" in argv


class TestServerSpecs:
    def test_express_dependencies(self):
        assert SERVER_SPECS[ServerFramework.EXPRESS].dependencies == {
            "express": "^4.21.2",
            "cors": "^2.8.5",
        }

    def test_koa_dependencies(self):
        assert SERVER_SPECS[ServerFramework.KOA].dependencies == {
            "koa": "^3.0.0",
            "@koa/cors": "5.0.0",
        }

    def test_only_nest_runs_a_generator(self):
        assert SERVER_SPECS[ServerFramework.EXPRESS].hand_written
        assert SERVER_SPECS[ServerFramework.KOA].hand_written
        assert not SERVER_SPECS[ServerFramework.NESTJS].hand_written


class TestDemoContext:
    def test_values(self):
        ctx = demo_context("Koa", Config())
        assert ctx == {
            "framework": "Koa",
            "message": "Hello from Koa!",
            "api_port": 3000,
            "api_url": "http://localhost:3000/api/message",
        }
