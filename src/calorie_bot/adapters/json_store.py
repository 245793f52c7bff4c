"""JSON file-backed key-value store."""

import json
import logging
import os
import tempfile
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Persistence interface for a whole JSON-like mapping."""

    def load(self) -> dict[str, Any]:
        """Return the last saved mapping, or an empty mapping."""

    def save(self, data: dict[str, Any]) -> None:
        """Overwrite the stored mapping."""


@dataclass
class JsonFileStore(KeyValueStore):
    """Store a mapping as a single pretty-printed JSON object on disk."""

    path: Path
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def load(self) -> dict[str, Any]:
        """Read the mapping; a missing or malformed file reads as empty."""
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw)
        except (OSError, ValueError) as exc:
            _logger.debug("Store %s read as empty: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            _logger.debug("Store %s does not hold a JSON object", self.path)
            return {}
        return data

    def save(self, data: dict[str, Any]) -> None:
        """Rewrite the whole file; errors propagate to the caller."""
        with self._lock:
            try:
                payload = json.dumps(data, ensure_ascii=False, indent=2)
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
                )
                try:
                    with os.fdopen(fd, "w", encoding="utf-8") as handle:
                        handle.write(payload)
                    os.replace(tmp_name, self.path)
                except BaseException:
                    Path(tmp_name).unlink(missing_ok=True)
                    raise
            except Exception:
                _logger.exception("Failed to save store %s", self.path)
                raise
