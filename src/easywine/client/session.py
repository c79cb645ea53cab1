from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Protocol

log = logging.getLogger("client")

NAME_KEY = "easywine_user_name"
MIN_NAME_LENGTH = 2


class NameStore(Protocol):
    def load(self) -> Optional[str]: ...
    def save(self, name: str) -> None: ...
    def clear(self) -> None: ...


class InMemoryNameStore:
    def __init__(self, name: Optional[str] = None) -> None:
        self._values: Dict[str, str] = {}
        if name:
            self._values[NAME_KEY] = name

    def load(self) -> Optional[str]:
        return self._values.get(NAME_KEY)

    def save(self, name: str) -> None:
        self._values[NAME_KEY] = name

    def clear(self) -> None:
        self._values.pop(NAME_KEY, None)


def default_session_path() -> Path:
    home = os.getenv("EASYWINE_HOME")
    base = Path(home).expanduser() if home else Path.home() / ".easywine"
    return base / "session.json"


class FileNameStore:
    """
    Key/value JSON file standing in for the browser's localStorage.
    Other keys in the file are preserved.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path else default_session_path()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (json.JSONDecodeError, UnicodeDecodeError):
            log.warning("session file %s is corrupt, ignoring it", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    def load(self) -> Optional[str]:
        value = self._read().get(NAME_KEY)
        return value if isinstance(value, str) and value else None

    def save(self, name: str) -> None:
        data = self._read()
        data[NAME_KEY] = name
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if data.pop(NAME_KEY, None) is not None:
            self._write(data)
