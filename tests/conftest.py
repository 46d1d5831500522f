# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from athena.core.state import AppState
from athena.tasks.task_list import TaskList
from athena.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Athena",
        data_dir=data_dir,
        save_filename="athena.txt",
        save_path=data_dir / "athena.txt",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState with an empty list and a real flat-file store under tmp_path.

    NOTE: We keep the real TaskStore here because the save-after-mutation
    behaviour is part of what we want to test.
    """
    return AppState(
        settings=settings,
        task_list=TaskList(),
        task_store=TaskStore(settings.save_path),
    )
