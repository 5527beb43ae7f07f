"""JSON file backed state store.

Persists the latest snapshot only.  There is no journal: every committed
transaction rewrites the whole file via a sibling temp file and ``os.replace`` so a
reader never observes a half-written snapshot.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from catpoint.exceptions import CatpointStorageError, InconsistentStateError
from catpoint.state.snapshot import SecuritySnapshot
from catpoint.state.store import InMemoryStateStore

_logger = logging.getLogger(__name__)


def load_snapshot(path: Path) -> SecuritySnapshot:
    """Read a snapshot from *path*; a missing file yields the defaults."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        _logger.debug("No snapshot at %s; starting from defaults", path)
        return SecuritySnapshot()
    except OSError as exc:
        raise CatpointStorageError(f"cannot read snapshot: {exc}", path=str(path)) from exc

    try:
        snapshot = SecuritySnapshot.model_validate_json(text)
    except ValidationError as exc:
        if any(error["type"] == "json_invalid" for error in exc.errors()):
            raise CatpointStorageError("snapshot is not valid JSON", path=str(path)) from exc
        raise InconsistentStateError(f"snapshot at {path} failed validation: {exc}") from exc
    _logger.debug("Loaded snapshot from %s sensors=%d", path, len(snapshot.sensors))
    return snapshot


def save_snapshot(path: Path, snapshot: SecuritySnapshot) -> None:
    """Atomically replace the file at *path* with *snapshot*."""
    tmp_path = path.with_name(f"{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError as exc:
        raise CatpointStorageError(f"cannot write snapshot: {exc}", path=str(path)) from exc
    _logger.debug("Saved snapshot to %s", path)


class JsonFileStateStore(InMemoryStateStore):
    """In-memory store that mirrors committed changes to a JSON file.

    The file is written once per outermost transaction, so a whole
    engine operation lands on disk together or not at all.  If writing
    fails the in-memory state is rolled back and
    :class:`CatpointStorageError` is raised.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        super().__init__(load_snapshot(self._path))

    def _commit(self) -> None:
        save_snapshot(self._path, self.snapshot())
