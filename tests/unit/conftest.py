"""Shared test fixtures."""

from typing import Any

import pytest

from folder_select.core.selection.engine import SelectionEngine
from folder_select.session import build_engine

SAMPLE_RESPONSE: dict[str, Any] = {
    "folders": {
        "columns": ["id", "name", "parentId"],
        "data": [
            [1, "Projects", None],
            [2, "archive", 1],
            [3, "Active", 1],
            [4, "Personal", None],
            [5, "", 3],
            [6, "Lost", 999],
        ],
    },
    "items": {
        "columns": ["id", "name", "folderId"],
        "data": [
            [10, "roadmap", 1],
            [20, "2019 report", 2],
            [21, "2018 report", 2],
            [30, "sprint", 3],
            [50, "draft", 5],
            [40, "Taxes", 4],
            [60, "stray", 6],
            [70, "nowhere", 999],
        ],
    },
}


@pytest.fixture
def sample_response() -> dict[str, Any]:
    return SAMPLE_RESPONSE


@pytest.fixture
def engine() -> SelectionEngine:
    """Return an engine over SAMPLE_RESPONSE, built and sorted."""
    eng, _stats = build_engine(SAMPLE_RESPONSE)
    return eng
