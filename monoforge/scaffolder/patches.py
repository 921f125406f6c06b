"""Post-generation file patches.

Generated apps are treated as opaque: they are moved into the workspace and
a few files are overwritten or edited by targeted text replacement.  Every
patch checks that its target exists first; a missing target (usually
upstream generator drift) is reported as a warning and skipped.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from monoforge.models import FilePatch, PatchKind
from monoforge.utils import load_json, print_warning, save_json

from .templates import TemplateRenderer


def insert_after(text: str, pattern: str, insertion: str) -> str:
    """Insert *insertion* right after the first match of *pattern*.

    Returns *text* unchanged when the pattern does not match.
    """
    return re.sub(pattern, lambda m: m.group(0) + insertion, text, count=1)


def replace_first(text: str, pattern: str, replacement: str) -> str:
    """Replace the first match of *pattern* with the literal *replacement*."""
    return re.sub(pattern, lambda m: replacement, text, count=1)


def set_json_value(data: dict[str, Any], keys: list[str], value: Any) -> dict[str, Any]:
    """Set ``data[k1][k2]...[kn] = value``, creating intermediate objects."""
    node = data
    for key in keys[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[keys[-1]] = value
    return data


async def apply_patch(
    app_dir: Path,
    patch: FilePatch,
    renderer: TemplateRenderer,
    context: dict[str, Any],
) -> bool:
    """Apply one ``FilePatch`` inside *app_dir*.

    Returns:
        ``True`` if the target file was rewritten, ``False`` if the patch was
        skipped or would not change the file.
    """
    target = app_dir / patch.path
    if not target.is_file():
        print_warning(f"  Skipped patch: {app_dir.name}/{patch.path} was not generated")
        return False

    if patch.kind is PatchKind.TEMPLATE:
        await renderer.render_to_file(patch.template, target, context)
        return True

    if patch.kind in (PatchKind.INSERT_AFTER, PatchKind.REPLACE):
        text = target.read_text(encoding="utf-8")
        if patch.guard and patch.guard in text:
            return False
        if re.search(patch.pattern, text) is None:
            print_warning(
                f"  Skipped patch: no match for {patch.pattern!r} in {app_dir.name}/{patch.path}"
            )
            return False
        if patch.kind is PatchKind.INSERT_AFTER:
            patched = insert_after(text, patch.pattern, patch.insertion)
        else:
            patched = replace_first(text, patch.pattern, patch.replacement.format(**context))
        if patched == text:
            return False
        target.write_text(patched, encoding="utf-8")
        return True

    if patch.kind is PatchKind.JSON_SET:
        data = load_json(target)
        save_json(set_json_value(data, patch.keys, patch.value), target)
        return True

    raise ValueError(f"Unknown patch kind: {patch.kind}")


def relocate_app(project_root: Path, app_name: str, apps_dir: str) -> Path | None:
    """Move a generator's ``<root>/<app_name>`` output to ``<root>/<apps_dir>/<app_name>``.

    Returns the new location, or ``None`` when the generator produced nothing
    at the expected path.
    """
    source = project_root / app_name
    if not source.is_dir():
        print_warning(f"  Skipped move: generator did not create {app_name}/")
        return None
    target = project_root / apps_dir / app_name
    source.rename(target)
    return target
