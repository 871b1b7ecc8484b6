"""JSON-file-backed key/value store: the client's local storage.

Values are strings, as in a browser's localStorage.  The same file
holds the cart snapshot and the Supabase auth session, so this class
also serves as the Supabase client's session storage (``get_item`` /
``set_item`` / ``remove_item``).

An unreadable or malformed file reads as empty; it is replaced on the
next write.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.logging import get_logger

logger = get_logger(__name__)


class LocalStorage:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def get_item(self, key: str) -> str | None:
        value = self._load_raw().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        records = self._load_raw()
        records[key] = value
        self._persist_raw(records)

    def remove_item(self, key: str) -> None:
        records = self._load_raw()
        if records.pop(key, None) is not None:
            self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable local storage at %s", self._file_path)
            return {}
        return raw if isinstance(raw, dict) else {}

    def _persist_raw(self, records: dict[str, str]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )
