from __future__ import annotations

import json
from pathlib import Path

from relver.core.result import Err, Ok, Result
from relver.core.structured import as_str_dict, get_str
from relver.release.errors import ReleaseError


def read_manifest_version(path: Path) -> Result[str, ReleaseError]:
    """Return the ``version`` field of a JSON package manifest."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(
            ReleaseError(
                kind="manifest_unreadable",
                message=f"failed to read {path.name}: {e}",
                hint=str(path),
            )
        )
    except UnicodeDecodeError as e:
        return Err(
            ReleaseError(
                kind="manifest_invalid",
                message=f"{path.name} is not valid UTF-8: {e}",
                hint=str(path),
            )
        )

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(
            ReleaseError(
                kind="manifest_invalid",
                message=f"invalid JSON in {path.name}: {e}",
                hint=str(path),
            )
        )

    data = as_str_dict(obj)
    if data is None:
        return Err(
            ReleaseError(
                kind="manifest_invalid",
                message=f"{path.name} must contain a JSON object",
                hint=str(path),
            )
        )

    version = get_str(data, "version")
    if version is None:
        return Err(
            ReleaseError(
                kind="manifest_invalid",
                message=f"{path.name} has no version",
                hint=str(path),
            )
        )
    return Ok(version)
