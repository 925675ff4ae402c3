"""Durable key-value storage for presentation state.

Two string entries survive restarts: the active theme (``theme``) and
the active color set (``selectedColorSet``, absent when none is
selected).  Writes may fail (read-only file system, full disk); callers
treat that as "not saved" rather than as an error.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
COLOR_SET_KEY = "selectedColorSet"


class MemoryStorage:
    """In-process storage; nothing outlives the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._data)


class JsonFileStorage:
    """Storage backed by a JSON object in a file.

    Every write rewrites the whole file through a temporary file and
    :func:`os.replace`, so a crash never leaves a half-written file.
    Write failures propagate as :class:`OSError`.

    Args:
        path: Location of the JSON file.  Parent directories are created
            on first write.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def _read(self) -> Dict[str, object]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable state file %s", self.path,
                           exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring state file %s: not a JSON object",
                           self.path)
            return {}
        return data

    def _write(self, data: Dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(
            dir=self.path.parent, prefix=".state-", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
