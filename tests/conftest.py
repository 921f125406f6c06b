"""Shared pytest fixtures for the monoforge test suite.

Provides reusable fixtures for:
- Default configuration
- A fake command runner that simulates the package managers and framework
  generators on disk, so no Node.js tooling is needed
- Scaffold choices for every package manager / framework combination
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any

import pytest

from monoforge.config import Config
from monoforge.models import ClientFramework, PackageManager, ScaffoldChoice, ServerFramework


# ---------------------------------------------------------------------------
# Simulated generator output
# ---------------------------------------------------------------------------

NEST_MAIN_TS = textwrap.dedent(
    """\
    import { NestFactory } from '@nestjs/core';
    import { AppModule } from './app.module';

    async function bootstrap() {
      const app = await NestFactory.create(AppModule);
      await app.listen(process.env.PORT ?? 3000);
    }
    bootstrap();
    """
)

NEST_CONTROLLER_TS = textwrap.dedent(
    """\
    import { Controller, Get } from '@nestjs/common';
    import { AppService } from './app.service';

    @Controller()
    export class AppController {
      constructor(private readonly appService: AppService) {}

      @Get()
      getHello(): string {
        return this.appService.getHello();
      }
    }
    """
)

ANGULAR_ROUTES_TS = "import { Routes } from '@angular/router';\n\nexport const routes: Routes = [];\n"


def _generated_files(argv: list[str]) -> tuple[str, dict[str, str]] | None:
    """Return ``(app_name, {relative_path: content})`` for a generator argv."""
    joined = " ".join(argv)
    if "vite@latest" in joined:
        return "client", {
            "package.json": json.dumps({"name": "client", "scripts": {"dev": "vite"}}),
            "src/App.jsx": "export default function App() { return <h1>Vite + React</h1>; }\n",
            "src/main.jsx": "import App from './App.jsx';\n",
        }
    if "vue@latest" in joined:
        return "client", {
            "package.json": json.dumps({"name": "client", "scripts": {"dev": "vite"}}),
            "src/App.vue": "<template><HelloWorld /></template>\n",
            "src/main.js": "import { createApp } from 'vue';\n",
        }
    if "@angular/cli" in joined:
        return "client", {
            "package.json": json.dumps({"name": "client", "scripts": {"start": "ng serve"}}),
            "src/app/app.component.ts": "export class AppComponent { title = 'client'; }\n",
            "src/app/app.component.html": "<router-outlet />\n",
            "src/app/app.config.ts": "export const appConfig = { providers: [provideClientHydration()] };\n",
            "src/app/app.routes.ts": ANGULAR_ROUTES_TS,
        }
    if "@nestjs/cli" in joined:
        return "server", {
            "package.json": json.dumps(
                {"name": "server", "scripts": {"start": "nest start", "start:dev": "nest start"}}
            ),
            "src/main.ts": NEST_MAIN_TS,
            "src/app.controller.ts": NEST_CONTROLLER_TS,
            "src/app.service.ts": "export class AppService { getHello() { return 'Hello World!'; } }\n",
        }
    return None


class FakeRunner:
    """Async stand-in for ``run_checked`` that fakes generator output.

    Records every ``(argv, cwd)`` call.  Paths listed in *omit* (relative to
    the generated app, e.g. ``"src/app/app.component.ts"``) are not created,
    which simulates upstream generator drift.  With ``create_apps=False`` the
    generators produce nothing at all.
    """

    def __init__(self, omit: set[str] | None = None, create_apps: bool = True) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.omit = omit or set()
        self.create_apps = create_apps

    async def __call__(self, argv: list[str], cwd: Path) -> None:
        self.calls.append((list(argv), Path(cwd)))

        if argv[1:2] == ["init"]:
            manifest: dict[str, Any] = {
                "name": Path(cwd).name,
                "version": "1.0.0",
                "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
            }
            (Path(cwd) / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
            return

        generated = _generated_files(argv)
        if generated is None or not self.create_apps:
            return
        app_name, files = generated
        for rel, content in files.items():
            if rel in self.omit:
                continue
            path = Path(cwd) / app_name / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

    @property
    def commands(self) -> list[str]:
        return [" ".join(argv) for argv, _ in self.calls]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> Config:
    """Default configuration (demo API on port 3000)."""
    return Config()


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A FakeRunner that creates every generated file."""
    return FakeRunner()


@pytest.fixture
def make_choice():
    """Factory for ``ScaffoldChoice`` objects with sensible defaults."""

    def factory(
        package_manager: str = "npm",
        client: str = "React",
        server: str = "Express",
        project_name: str = "demo",
    ) -> ScaffoldChoice:
        return ScaffoldChoice(
            package_manager=PackageManager(package_manager),
            client=ClientFramework(client),
            server=ServerFramework(server),
            project_name=project_name,
        )

    return factory


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """A project root laid out as after workspace initialisation (``apps/`` exists)."""
    root = tmp_path / "demo"
    (root / "apps").mkdir(parents=True)
    return root


@pytest.fixture
def runner_factory():
    """The ``FakeRunner`` class, for tests that need ``omit``/``create_apps``."""
    return FakeRunner
