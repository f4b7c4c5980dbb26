"""Template catalog value objects (domains, boards, task templates)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class TaskTemplate:
    title: str
    month: int
    owner: str
    priority: str
    duration: Optional[str] = None


@dataclass(frozen=True)
class Board:
    id: str
    name: str
    domain: str
    cadence: str = ""
    desc: str = ""
    templates: Tuple[TaskTemplate, ...] = ()

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "domain": self.domain,
            "cadence": self.cadence,
            "desc": self.desc,
            "taskCount": len(self.templates),
        }


@dataclass(frozen=True)
class DomainMeta:
    id: str
    name: str
    color: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "color": self.color, "description": self.description}


@dataclass(frozen=True)
class TemplateCatalog:
    """Read-only set of domains and boards used to seed the task store."""

    domains: Dict[str, DomainMeta] = field(default_factory=dict)
    boards: Tuple[Board, ...] = ()

    @property
    def total_templates(self) -> int:
        return sum(len(b.templates) for b in self.boards)

    def domain_name(self, domain_id: str) -> str:
        meta = self.domains.get(domain_id)
        return meta.name if meta else ""

    def summary(self) -> Dict[str, Any]:
        return {
            "domains": {key: meta.to_dict() for key, meta in self.domains.items()},
            "boards": [b.summary() for b in self.boards],
            "totalTemplates": self.total_templates,
        }
