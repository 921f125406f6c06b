"""Pydantic v2 models for monoforge.

Defines the operator's scaffold choice and the declarative descriptors that
drive client/server provisioning (generator commands and file patches).
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_/.\-]+$")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class PackageManager(str, Enum):
    """Supported Node.js package managers."""
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class ClientFramework(str, Enum):
    """Supported frontend frameworks."""
    REACT = "React"
    VUE = "Vue"
    ANGULAR = "Angular"


class ServerFramework(str, Enum):
    """Supported backend frameworks."""
    EXPRESS = "Express"
    KOA = "Koa"
    NESTJS = "NestJS"


class PatchKind(str, Enum):
    """How a ``FilePatch`` changes its target file."""
    TEMPLATE = "template"
    INSERT_AFTER = "insert_after"
    REPLACE = "replace"
    JSON_SET = "json_set"


# ---------------------------------------------------------------------------
# Operator input
# ---------------------------------------------------------------------------

class ScaffoldChoice(BaseModel):
    """The four answers collected from the operator."""
    package_manager: PackageManager
    client: ClientFramework
    server: ServerFramework
    project_name: str = Field(..., description="Directory name or path of the new project")

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be empty")
        if not PROJECT_NAME_PATTERN.fullmatch(value):
            raise ValueError(
                "project name may only contain letters, digits, '-', '_', '.' and '/'"
            )
        return value


# ---------------------------------------------------------------------------
# Provisioning descriptors
# ---------------------------------------------------------------------------

class FilePatch(BaseModel):
    """A single post-generation change to a file inside an app directory."""
    path: str = Field(..., description="Target file, relative to the app directory")
    kind: PatchKind
    template: Optional[str] = Field(
        default=None, description="Template rendered over the file (TEMPLATE)"
    )
    pattern: Optional[str] = Field(
        default=None, description="Regex whose first match is edited (INSERT_AFTER, REPLACE)"
    )
    insertion: Optional[str] = Field(default=None, description="Text inserted after the match")
    replacement: Optional[str] = Field(
        default=None,
        description="Text substituted for the first match; {placeholders} come from the context",
    )
    guard: Optional[str] = Field(
        default=None, description="Substring whose presence means the patch is already applied"
    )
    keys: list[str] = Field(
        default_factory=list, description="Key path into a JSON manifest (JSON_SET)"
    )
    value: Any = None


class ClientSpec(BaseModel):
    """How to generate and patch one frontend framework."""
    command: list[str] = Field(..., description="Generator argv with {app_name} placeholders")
    patches: list[FilePatch] = Field(default_factory=list)


class ServerSpec(BaseModel):
    """How to generate (or hand-write) and patch one backend framework.

    A spec without ``command`` is hand-written: ``files`` maps output paths to
    templates and ``dependencies`` / ``start_script`` become its manifest.
    """
    command: Optional[list[str]] = Field(
        default=None,
        description="Generator argv with {app_name}/{package_manager} placeholders",
    )
    files: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    start_script: str = Field(default="node index.js")
    patches: list[FilePatch] = Field(default_factory=list)

    @property
    def hand_written(self) -> bool:
        return self.command is None
