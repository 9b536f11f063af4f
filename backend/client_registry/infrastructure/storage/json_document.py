"""Whole-document JSON file I/O shared by the file-backed adapters.

Writes go to a temporary file in the target directory which then replaces
the target with ``os.replace``, so readers see either the old or the new
document, never a partial one.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from client_registry.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


def read_json_document(path: Path, default: Any) -> Any:
    """Parse the JSON document at ``path``; return ``default`` if the file does not exist."""
    if not path.exists():
        return default
    try:
        return json.loads(path.read_text("utf-8"))
    except (OSError, ValueError) as exc:
        raise StorageError(str(path), f"could not read JSON document: {exc}") from exc


def write_json_document(path: Path, data: Any) -> None:
    """Atomically replace the document at ``path`` with ``data`` (2-space indented)."""
    content = json.dumps(data, indent=2, ensure_ascii=False)
    tmp_path: str | None = None

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(content)
        os.replace(tmp_path, path)
    except OSError as exc:
        raise StorageError(str(path), f"could not write JSON document: {exc}") from exc
    finally:
        if tmp_path is not None:
            Path(tmp_path).unlink(missing_ok=True)

    logger.debug("Wrote %s (%d bytes)", path, len(content))
