from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Dict, Optional

from ..common.logging import get_logger
from ..core.constants import SESSION_KEY

logger = get_logger(__name__)


class LocalStorage:
    """String key/value storage persisted to a JSON file.

    Survives restarts the way browser ``localStorage`` survives reloads.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable local storage at %s", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp, self._path)

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = str(value)
            self._save(data)

    def remove_item(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if key in data:
                del data[key]
                self._save(data)

    # Session flag helpers

    def is_logged_in(self) -> bool:
        return self.get_item(SESSION_KEY) == "true"

    def set_logged_in(self) -> None:
        self.set_item(SESSION_KEY, "true")

    def clear_session(self) -> None:
        self.remove_item(SESSION_KEY)
