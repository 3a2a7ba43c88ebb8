"""Durable key-value slots scoped to one tab context."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

_logger = logging.getLogger(__name__)


class SessionStorage(Protocol):
    """String slot storage that outlives a reload but not the tab context."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key."""

    def remove_item(self, key: str) -> None:
        """Remove a key; no-op when absent."""


@dataclass
class InMemorySessionStorage(SessionStorage):
    """Storage living as long as this object."""

    items: dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@dataclass
class FileSessionStorage(SessionStorage):
    """Storage backed by a JSON file shared by processes of one tab context.

    The file is deleted when its last key is removed.
    """

    path: Path

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key not in items:
            return
        del items[key]
        if items:
            self._write(items)
        else:
            self.path.unlink(missing_ok=True)

    def _write(self, items: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(items, handle)

    def _read(self) -> dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            _logger.warning("Ignoring unreadable session storage at %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}
