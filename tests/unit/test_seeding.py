from __future__ import annotations

import random
from datetime import date, datetime, timezone

from comphub.application.services.seeding import seed_tasks
from comphub.domain.catalog import TemplateCatalog


def test_seed_builds_one_task_per_template_in_traversal_order(small_catalog: TemplateCatalog):
    tasks = seed_tasks(small_catalog)

    assert [t.id for t in tasks] == [1, 2, 3, 4, 5, 6]
    assert [t.title for t in tasks] == [
        "Confirm budget",
        "Load eligibility",
        "Calibration",
        "Match jobs",
        "Submit data",
        "Validate results",
    ]
    assert [t.board_id for t in tasks] == ["merit"] * 3 + ["surveys"] * 3


def test_seed_copies_template_and_board_fields(small_catalog: TemplateCatalog):
    first, second = seed_tasks(small_catalog)[:2]

    assert first.owner == "Comp Manager"
    assert first.priority == "high"
    assert first.duration == "1 week"
    assert second.duration == "3 days"
    assert first.status == "not_started"
    assert first.notes == ""
    assert first.board_name == "Merit Cycle"
    assert first.domain_id == "planning"
    assert first.domain_name == "Compensation Planning"


def test_seed_due_dates_fall_in_template_month_days_5_to_24(small_catalog: TemplateCatalog):
    now = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)

    for seed in range(25):
        for task in seed_tasks(small_catalog, now=now, rng=random.Random(seed)):
            due = date.fromisoformat(task.due_date)
            assert due.year == 2026
            assert due.month == task.month
            assert 5 <= due.day <= 24


def test_seed_uses_one_timestamp_for_the_batch(small_catalog: TemplateCatalog):
    tasks = seed_tasks(small_catalog)

    stamps = {t.created_at for t in tasks} | {t.updated_at for t in tasks}
    assert len(stamps) == 1


def test_seed_is_deterministic_with_seeded_rng(small_catalog: TemplateCatalog):
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    a = seed_tasks(small_catalog, now=now, rng=random.Random(7))
    b = seed_tasks(small_catalog, now=now, rng=random.Random(7))

    assert a == b


def test_seed_empty_catalog_yields_no_tasks():
    assert seed_tasks(TemplateCatalog()) == []
