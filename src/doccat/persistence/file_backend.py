"""JSON file backend implementing IStateStorage for the client workflow store."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from doccat.core.exceptions import PersistenceError
from doccat.core.logging import get_logger

LOGGER = get_logger(__name__)


class JsonFileStateStorage:
    """Stores each named snapshot as ``<directory>/<name>.json``."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def _path(self, name: str) -> Path:
        return self._directory / f"{name}.json"

    def load(self, name: str) -> dict[str, Any] | None:
        path = self._path(name)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (ValueError, OSError) as exc:
            # a corrupt snapshot is dropped; the store starts from its initial state
            LOGGER.warning("Ignoring unreadable state snapshot %s: %s", path, exc)
            return None
        return data if isinstance(data, dict) else None

    def save(self, name: str, value: dict[str, Any]) -> None:
        path = self._path(name)
        tmp = path.with_suffix(".json.tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(value), encoding="utf-8")
            os.replace(tmp, path)
        except OSError as exc:
            raise PersistenceError(f"State write failed for {path}: {exc}") from exc

    def remove(self, name: str) -> None:
        self._path(name).unlink(missing_ok=True)
