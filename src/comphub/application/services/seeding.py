"""Expand the template catalog into a fresh task collection."""

from __future__ import annotations

import random
from datetime import date, datetime
from typing import List, Optional

from comphub.domain.catalog import TemplateCatalog
from comphub.domain.task import DEFAULT_DURATION, DEFAULT_STATUS, Task
from comphub.utils.clock import isoformat_utc, utc_now

# Due dates land on day 5..24 of the template's month.
DUE_DAY_MIN = 5
DUE_DAY_SPREAD = 20


def seed_tasks(
    catalog: TemplateCatalog,
    *,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> List[Task]:
    """Build one task per template, boards outer and templates inner, ids from 1.

    All tasks share a single createdAt/updatedAt stamp.
    """
    now = now or utc_now()
    rng = rng or random.Random()
    stamp = isoformat_utc(now)

    tasks: List[Task] = []
    next_id = 1
    for board in catalog.boards:
        domain_name = catalog.domain_name(board.domain)
        for template in board.templates:
            day = DUE_DAY_MIN + rng.randint(0, DUE_DAY_SPREAD - 1)
            tasks.append(
                Task(
                    id=next_id,
                    title=template.title,
                    month=template.month,
                    duration=template.duration or DEFAULT_DURATION,
                    owner=template.owner,
                    priority=template.priority,
                    status=DEFAULT_STATUS,
                    due_date=date(now.year, template.month, day).isoformat(),
                    board_id=board.id,
                    board_name=board.name,
                    domain_id=board.domain,
                    domain_name=domain_name,
                    notes="",
                    created_at=stamp,
                    updated_at=stamp,
                )
            )
            next_id += 1
    return tasks
