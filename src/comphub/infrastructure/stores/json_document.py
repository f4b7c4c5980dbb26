from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger

from comphub.domain.errors import MalformedStoreError, PersistenceError
from comphub.utils.logging_config import LogFiles, Logger


class JsonDocument:
    """A single JSON file that is always read and written as a whole.

    Writes go to a temp file in the same directory and are renamed over the
    target, so a reader never sees a half-written document.
    """

    def __init__(self, path: Union[Path, str]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> Optional[Any]:
        """Return the parsed document, or None if it has never been written."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            raise MalformedStoreError(
                f"{self.path.name} is not valid UTF-8", path=str(self.path)
            ) from exc
        except OSError as exc:
            logger.error(f"Error reading {self.path}: {exc}")
            raise PersistenceError(f"failed to read {self.path.name}", path=str(self.path)) from exc

        try:
            return json.loads(raw)
        except ValueError as exc:
            raise MalformedStoreError(
                f"{self.path.name} is not valid JSON: {exc}", path=str(self.path)
            ) from exc

    def write(self, data: Any) -> None:
        try:
            payload = json.dumps(data, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise PersistenceError(
                f"failed to serialize {self.path.name}: {exc}", path=str(self.path)
            ) from exc

        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            logger.error(f"Error writing {self.path}: {exc}")
            Logger.error(f"Write failed for {self.path}: {exc}", file=LogFiles.ERROR)
            raise PersistenceError(f"failed to write {self.path.name}", path=str(self.path)) from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

        Logger.debug(f"Wrote {len(payload)} bytes to {self.path}", file=LogFiles.STORE)
