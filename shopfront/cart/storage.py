"""Key-value stores the cart persists into.

Both backends speak the browser ``localStorage`` vocabulary: string keys,
string values, ``get_item`` returning None for a missing key.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class Storage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class FileStorage:
    """Store every key in one JSON object on disk.

    The file is rewritten on each ``set_item``/``remove_item``. An unreadable
    file is treated as empty so a damaged store never blocks start-up.
    """

    def __init__(self, path: "str | os.PathLike[str]"):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable storage file %s", self.path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: top level is not an object", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
        os.replace(tmp, self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)
