"""monoforge configuration.

Typed settings for a scaffolding run.  All settings use Pydantic v2 models so
they are validated at construction time and can be overridden from the
environment without boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global monoforge configuration.

    Created once by the CLI entry point and passed to ``MonorepoGenerator``.
    """

    command_timeout: int = Field(
        default=900, ge=10, description="Per-generator process timeout in seconds"
    )
    api_port: int = Field(
        default=3000, ge=1, le=65535, description="Port the generated server listens on"
    )
    concurrently_version: str = Field(
        default="^9.1.2", description="Version range of concurrently in the root manifest"
    )

    @property
    def api_url(self) -> str:
        """URL of the demo endpoint the generated client fetches."""
        return f"http://localhost:{self.api_port}/api/message"

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MONOFORGE_COMMAND_TIMEOUT, MONOFORGE_API_PORT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MONOFORGE_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["MONOFORGE_COMMAND_TIMEOUT"])
        if os.environ.get("MONOFORGE_API_PORT"):
            kwargs["api_port"] = int(os.environ["MONOFORGE_API_PORT"])
        return cls(**kwargs)
