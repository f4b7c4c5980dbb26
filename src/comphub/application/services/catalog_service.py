# application/services/catalog_service.py
"""
Template catalog loading.

The catalog is a YAML document with two sections:

    domains:
      <domain_id>: {name, color, description}
    boards:
      - id, name, domain, cadence, desc
        tasks:
          - {title, month, owner, priority, duration?}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from comphub.domain.catalog import Board, DomainMeta, TaskTemplate, TemplateCatalog

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "default_catalog.yaml"

_PRIORITIES = {"low", "medium", "high"}


class CatalogService:
    """Loads and validates the read-only template catalog."""

    def __init__(self, catalog_path: Optional[Union[str, Path]] = None):
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH
        self._config: Optional[Dict[str, Any]] = None
        self._catalog: Optional[TemplateCatalog] = None

    def load_config(self) -> Dict[str, Any]:
        """Read the raw YAML document."""
        if self._config is not None:
            return self._config

        if not self.catalog_path.exists():
            raise FileNotFoundError(f"Template catalog not found: {self.catalog_path}")

        try:
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in catalog file: {e}") from e

        self._validate_config(config)
        self._config = config
        logger.info(f"Loaded template catalog from {self.catalog_path}")
        return config

    def load_catalog(self) -> TemplateCatalog:
        if self._catalog is not None:
            return self._catalog

        config = self.load_config()
        domains = {
            str(key): DomainMeta(
                id=str(key),
                name=str(meta.get("name") or key),
                color=str(meta.get("color") or ""),
                description=str(meta.get("description") or ""),
            )
            for key, meta in (config.get("domains") or {}).items()
        }
        boards = tuple(self._parse_board(raw) for raw in config.get("boards") or [])
        self._catalog = TemplateCatalog(domains=domains, boards=boards)
        logger.info(
            f"Catalog has {len(boards)} boards and {self._catalog.total_templates} templates"
        )
        return self._catalog

    @staticmethod
    def _parse_board(raw: Dict[str, Any]) -> Board:
        templates: List[TaskTemplate] = []
        for item in raw.get("tasks") or []:
            templates.append(
                TaskTemplate(
                    title=str(item["title"]),
                    month=int(item["month"]),
                    owner=str(item["owner"]),
                    priority=str(item.get("priority") or "medium"),
                    duration=str(item["duration"]) if item.get("duration") else None,
                )
            )
        return Board(
            id=str(raw["id"]),
            name=str(raw["name"]),
            domain=str(raw["domain"]),
            cadence=str(raw.get("cadence") or ""),
            desc=str(raw.get("desc") or ""),
            templates=tuple(templates),
        )

    @staticmethod
    def _validate_config(config: Any) -> None:
        if not config or not isinstance(config, dict):
            raise ValueError("Catalog is empty")

        domains = config.get("domains")
        if not isinstance(domains, dict) or not domains:
            raise ValueError("Missing 'domains' section in catalog")

        boards = config.get("boards")
        if not isinstance(boards, list) or not boards:
            raise ValueError("Missing 'boards' section in catalog")

        seen = set()
        for i, board in enumerate(boards):
            if not isinstance(board, dict):
                raise ValueError(f"Board at index {i} is not a mapping")
            for key in ("id", "name", "domain"):
                if not board.get(key):
                    raise ValueError(f"Board at index {i} missing '{key}'")
            if board["id"] in seen:
                raise ValueError(f"Duplicate board id '{board['id']}'")
            seen.add(board["id"])
            if board["domain"] not in domains:
                raise ValueError(f"Board '{board['id']}' references unknown domain '{board['domain']}'")

            tasks = board.get("tasks") or []
            if not tasks:
                logger.warning(f"Board '{board['id']}' has no task templates")
            for j, tmpl in enumerate(tasks):
                where = f"Template {j} of board '{board['id']}'"
                if not isinstance(tmpl, dict):
                    raise ValueError(f"{where} is not a mapping")
                for key in ("title", "month", "owner"):
                    if not tmpl.get(key):
                        raise ValueError(f"{where} missing '{key}'")
                try:
                    month = int(tmpl["month"])
                except (TypeError, ValueError):
                    raise ValueError(f"{where} has non-integer month {tmpl['month']!r}")
                if not 1 <= month <= 12:
                    raise ValueError(f"{where} has month {month} outside 1-12")
                priority = tmpl.get("priority") or "medium"
                if priority not in _PRIORITIES:
                    raise ValueError(f"{where} has unknown priority '{priority}'")
