"""Key-value blob store backed by a directory of ``<key>.json`` files."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


class JsonBlobStore:

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def path_for(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        """Return the stored text for *key*, or None if nothing is stored."""
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def put(self, key: str, text: str) -> None:
        """Replace the blob for *key*.

        Written to a temporary file first and moved into place, so a
        crash mid-write never leaves a truncated blob behind.
        """
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_name, self.path_for(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
