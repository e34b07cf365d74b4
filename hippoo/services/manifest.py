"""Read dependency names from a package.json manifest."""

from __future__ import annotations

import json
from pathlib import Path

from result import Err, Ok, Result

RUNTIME_SECTIONS = ("dependencies",)
DEV_SECTIONS = ("devDependencies",)


def read_dependencies(path: str | Path, include_dev: bool = False) -> Result[list[str], str]:
    """Return dependency names in manifest order, de-duplicated.

    Version ranges are dropped: the size API resolves ``name`` to its latest
    release, and npm ranges like ``^18.2.0`` are not valid identifiers there.
    """
    resolved = Path(path).expanduser()
    if not resolved.exists():
        return Err(f"No package.json found at {resolved}.")

    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        return Err(f"Failed reading {resolved}: {exc}.")
    if not isinstance(data, dict):
        return Err(f"Manifest at {resolved} must be a JSON object.")

    sections = RUNTIME_SECTIONS + DEV_SECTIONS if include_dev else RUNTIME_SECTIONS
    names: list[str] = []
    seen: set[str] = set()
    for section in sections:
        deps = data.get(section) or {}
        if not isinstance(deps, dict):
            return Err(f"'{section}' in {resolved} must be an object.")
        for name in deps:
            if name not in seen:
                seen.add(name)
                names.append(name)
    return Ok(names)
