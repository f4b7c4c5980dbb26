from __future__ import annotations

import threading
import time
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union
from uuid import uuid4

from loguru import logger

from comphub.domain.activity import ActivityEntry
from comphub.domain.errors import MalformedStoreError
from comphub.infrastructure.stores.json_document import JsonDocument
from comphub.settings import get_settings
from comphub.utils.clock import isoformat_utc, parse_iso
from comphub.utils.logging_config import LogFiles, Logger

ACTIVITY_FILE = "activity.json"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _new_entry_id() -> str:
    return f"act-{int(time.time() * 1000)}-{uuid4().hex[:8]}"


class ActivityStore:
    """Append-only activity log persisted as ``{task_id: [entry, ...]}``.

    Entries are kept in insertion order on disk and sorted newest-first on
    read. Task ids are not checked against the task store.
    """

    def __init__(
        self, data_dir: Optional[Union[Path, str]] = None, *, filename: str = ACTIVITY_FILE
    ):
        self.data_dir = Path(data_dir) if data_dir is not None else get_settings().data_dir
        self._document = JsonDocument(self.data_dir / filename)
        self._lock = threading.RLock()
        self._entries: Optional[Dict[str, List[ActivityEntry]]] = None

    @property
    def path(self) -> Path:
        return self._document.path

    def append(self, task_id: int, entry: ActivityEntry) -> List[ActivityEntry]:
        """Stamp ``entry`` with an id and timestamp, append it and persist."""
        return self.append_many(task_id, [entry])

    def append_many(self, task_id: int, entries: Sequence[ActivityEntry]) -> List[ActivityEntry]:
        """Append several entries in one write; either all are stored or none."""
        stamp = isoformat_utc()
        stamped = [replace(e, id=_new_entry_id(), timestamp=stamp) for e in entries]
        with self._lock:
            current = self._mapping()
            key = str(int(task_id))
            updated = dict(current)
            updated[key] = list(current.get(key, [])) + stamped
            self._commit(updated)
            for entry in stamped:
                Logger.info(
                    f"Appended {entry.type.value} to task {key} (actor={entry.actor})",
                    file=LogFiles.ACTIVITY,
                )
            return list(updated[key])

    def list_for_task(self, task_id: int) -> List[ActivityEntry]:
        """Entries for one task, newest first. Ties keep the latest append first."""
        with self._lock:
            entries = list(self._mapping().get(str(int(task_id)), []))
        entries.reverse()
        entries.sort(key=lambda e: parse_iso(e.timestamp) or _EPOCH, reverse=True)
        return entries

    def clear(self) -> None:
        with self._lock:
            self._commit({})
            Logger.info("Cleared activity log", file=LogFiles.ACTIVITY)

    def _mapping(self) -> Dict[str, List[ActivityEntry]]:
        if self._entries is None:
            self._entries = self._read()
        return self._entries

    def _commit(self, mapping: Dict[str, List[ActivityEntry]]) -> None:
        self._document.write(
            {key: [e.to_dict() for e in entries] for key, entries in mapping.items()}
        )
        self._entries = mapping

    def _read(self) -> Dict[str, List[ActivityEntry]]:
        try:
            raw = self._document.read()
            if raw is None:
                return {}
            if not isinstance(raw, dict):
                raise MalformedStoreError(
                    f"{self.path.name} is not a JSON object", path=str(self.path)
                )
            try:
                return {
                    str(key): [ActivityEntry.from_dict(item) for item in (items or [])]
                    for key, items in raw.items()
                }
            except (TypeError, ValueError, AttributeError) as exc:
                raise MalformedStoreError(
                    f"{self.path.name} holds an invalid entry: {exc}", path=str(self.path)
                ) from exc
        except MalformedStoreError as exc:
            logger.warning(f"Ignoring unreadable activity log, starting empty: {exc}")
            Logger.warning(f"Malformed activity log: {exc}", file=LogFiles.ERROR)
            return {}
