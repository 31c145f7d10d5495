"""File-system storage for the single save file."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


class SaveFileStore:
    """Reads and overwrites one JSON save file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read(self) -> Dict[str, Any]:
        """Parse the save file; raises OSError or ValueError on failure."""
        text = self._path.read_text(encoding="utf-8")
        try:
            return json.loads(text)
        except RecursionError as exc:
            raise ValueError(f"Save file {self._path} is nested too deeply to parse.") from exc

    def write(self, payload: Dict[str, Any]) -> None:
        """Replace the save file with ``payload``."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def delete(self) -> None:
        try:
            self._path.unlink()
        except FileNotFoundError:
            return
