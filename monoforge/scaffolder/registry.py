"""Declarative scaffolding tables.

Every package-manager and framework specific detail lives here: init
commands, dev-script fragments, generator invocations and the patches
applied to generated files.  Provisioners only interpret these tables.
"""

from __future__ import annotations

from monoforge.config import Config
from monoforge.models import (
    ClientFramework,
    ClientSpec,
    FilePatch,
    PackageManager,
    PatchKind,
    ServerFramework,
    ServerSpec,
)

APPS_DIR = "apps"
WORKSPACE_GLOB = f"{APPS_DIR}/*"
CLIENT_APP = "client"
SERVER_APP = "server"


# ---------------------------------------------------------------------------
# Workspace
# ---------------------------------------------------------------------------

INIT_COMMANDS: dict[PackageManager, list[str]] = {
    PackageManager.NPM: ["npm", "init", "-y"],
    PackageManager.YARN: ["yarn", "init", "-y"],
    PackageManager.PNPM: ["pnpm", "init"],
}

# (client fragment, server fragment) run side by side by ``concurrently``.
DEV_SCRIPT_FRAGMENTS: dict[PackageManager, tuple[str, str]] = {
    PackageManager.NPM: (
        "npm run dev -w=client",
        "npm run start:dev -w=server",
    ),
    PackageManager.PNPM: (
        "pnpm --dir=apps/client run dev",
        "pnpm --dir=apps/server run start:dev",
    ),
    PackageManager.YARN: (
        "yarn --cwd=apps/client run dev",
        "yarn --cwd=apps/server run start:dev",
    ),
}

ANGULAR_DEV_FRAGMENT = "cd apps/client && ng serve"


def dev_script(package_manager: PackageManager, client: ClientFramework) -> str:
    """Build the root ``dev`` script for a package manager / client pair."""
    client_cmd, server_cmd = DEV_SCRIPT_FRAGMENTS[package_manager]
    if client is ClientFramework.ANGULAR:
        client_cmd = ANGULAR_DEV_FRAGMENT
    return f'concurrently "{client_cmd}" "{server_cmd}"'


# ---------------------------------------------------------------------------
# Clients
# ---------------------------------------------------------------------------

CLIENT_SPECS: dict[ClientFramework, ClientSpec] = {
    ClientFramework.REACT: ClientSpec(
        command=["npm", "create", "vite@latest", "{app_name}", "--", "--template", "react"],
        patches=[
            FilePatch(
                path="src/App.jsx",
                kind=PatchKind.TEMPLATE,
                template="client/react/App.jsx.j2",
            ),
        ],
    ),
    ClientFramework.VUE: ClientSpec(
        command=["npm", "create", "vue@latest", "{app_name}"],
        patches=[
            FilePatch(
                path="src/App.vue",
                kind=PatchKind.TEMPLATE,
                template="client/vue/App.vue.j2",
            ),
        ],
    ),
    ClientFramework.ANGULAR: ClientSpec(
        command=[
            "npx", "-p", "@angular/cli", "ng", "new", "{app_name}",
            "--directory={app_name}", "--skip-install", "--ssr=true",
        ],
        patches=[
            FilePatch(
                path="src/app/app.component.ts",
                kind=PatchKind.TEMPLATE,
                template="client/angular/app.component.ts.j2",
            ),
            FilePatch(
                path="src/app/app.component.html",
                kind=PatchKind.TEMPLATE,
                template="client/angular/app.component.html.j2",
            ),
            # Replaces whatever providers the generator emitted.
            FilePatch(
                path="src/app/app.config.ts",
                kind=PatchKind.TEMPLATE,
                template="client/angular/app.config.ts.j2",
            ),
        ],
    ),
}


# ---------------------------------------------------------------------------
# Servers
# ---------------------------------------------------------------------------

SERVER_SPECS: dict[ServerFramework, ServerSpec] = {
    ServerFramework.EXPRESS: ServerSpec(
        files={"index.js": "server/express/index.js.j2"},
        dependencies={"express": "^4.21.2", "cors": "^2.8.5"},
    ),
    ServerFramework.KOA: ServerSpec(
        files={"index.js": "server/koa/index.js.j2"},
        dependencies={"koa": "^3.0.0", "@koa/cors": "5.0.0"},
    ),
    ServerFramework.NESTJS: ServerSpec(
        command=[
            "npx", "@nestjs/cli", "new", "{app_name}", "--skip-install",
            "--directory={app_name}", "--package-manager={package_manager}",
        ],
        patches=[
            FilePatch(
                path="src/main.ts",
                kind=PatchKind.INSERT_AFTER,
                pattern=r"const app = await NestFactory\.create\([^)]+\);",
                insertion="\n  app.enableCors();",
                guard="app.enableCors()",
            ),
            FilePatch(
                path="src/app.controller.ts",
                kind=PatchKind.TEMPLATE,
                template="server/nestjs/app.controller.ts.j2",
            ),
            FilePatch(
                path="package.json",
                kind=PatchKind.JSON_SET,
                keys=["scripts", "start:dev"],
                value="nest start --watch",
            ),
            # Same port the client fetches and Express/Koa listen on.
            FilePatch(
                path="src/main.ts",
                kind=PatchKind.REPLACE,
                pattern=r"app\.listen\([^;]*\);",
                replacement="app.listen({api_port});",
            ),
        ],
    ),
}


def format_command(command: list[str], **values: str) -> list[str]:
    """Substitute ``{placeholder}`` fields in every argument of *command*."""
    return [arg.format(**values) for arg in command]


def demo_context(server: str, config: Config) -> dict[str, object]:
    """Template context for the demo ``GET /api/message`` endpoint served by *server*."""
    return {
        "framework": server,
        "message": f"Hello from {server}!",
        "api_port": config.api_port,
        "api_url": config.api_url,
    }
