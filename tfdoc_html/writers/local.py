"""Write the generated document to the local filesystem."""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import OutputError

FILE_MODE = 0o644


def write_to_file(path: str | Path, document: str) -> Path:
    """Overwrite ``path`` with ``document`` and return the written path.

    New files are created with mode 0644 (subject to the process umask).
    """

    target = Path(path)
    payload = document.encode("utf-8")
    try:
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
    except OSError as exc:
        raise OutputError(f"Unable to write {target}: {exc}") from exc
    return target
