# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src/ to sys.path so `import comphub` works without an install.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

# Keep file logs out of the working tree; must be set before Logger initializes.
os.environ.setdefault("COMPHUB_LOG_DIR", tempfile.mkdtemp(prefix="comphub-logs-"))

from comphub.application.services.task_service import TaskService  # noqa: E402
from comphub.domain.catalog import Board, DomainMeta, TaskTemplate, TemplateCatalog  # noqa: E402
from comphub.infrastructure.stores.activity_store import ActivityStore  # noqa: E402
from comphub.infrastructure.stores.task_store import TaskStore  # noqa: E402


@pytest.fixture()
def small_catalog() -> TemplateCatalog:
    """Two boards of three templates each."""
    return TemplateCatalog(
        domains={
            "planning": DomainMeta(id="planning", name="Compensation Planning"),
            "market": DomainMeta(id="market", name="Market Pricing"),
        },
        boards=(
            Board(
                id="merit",
                name="Merit Cycle",
                domain="planning",
                cadence="Annual",
                templates=(
                    TaskTemplate(title="Confirm budget", month=1, owner="Comp Manager", priority="high"),
                    TaskTemplate(
                        title="Load eligibility",
                        month=2,
                        owner="HRIS Analyst",
                        priority="medium",
                        duration="3 days",
                    ),
                    TaskTemplate(title="Calibration", month=3, owner="Comp Manager", priority="high"),
                ),
            ),
            Board(
                id="surveys",
                name="Survey Submissions",
                domain="market",
                cadence="Annual",
                templates=(
                    TaskTemplate(title="Match jobs", month=4, owner="Analyst", priority="medium"),
                    TaskTemplate(title="Submit data", month=5, owner="Analyst", priority="high"),
                    TaskTemplate(title="Validate results", month=8, owner="Analyst", priority="low"),
                ),
            ),
        ),
    )


@pytest.fixture()
def task_store(tmp_path: Path) -> TaskStore:
    return TaskStore(tmp_path / "data")


@pytest.fixture()
def activity_store(tmp_path: Path) -> ActivityStore:
    return ActivityStore(tmp_path / "data")


@pytest.fixture()
def service(task_store: TaskStore, activity_store: ActivityStore, small_catalog: TemplateCatalog) -> TaskService:
    return TaskService(task_store, activity_store, small_catalog)
