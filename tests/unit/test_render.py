"""Tests for rendering the forest as a checkbox tree."""

from folder_select.core.selection.engine import SelectionEngine
from folder_select.core.tree.render import forest_to_dict, render_forest
from folder_select.session import build_engine
from tests.unit.fakes import make_chain_response


def test_render_full_tree(engine: SelectionEngine) -> None:
    engine.toggle_item_selection(20)
    md = render_forest(engine)
    assert md.splitlines() == [
        "- [ ] Personal (id=4)",
        "    - [ ] Taxes (id=40)",
        "- [-] Projects (id=1)",
        "    - [ ] Active (id=3)",
        "        - [ ] Unnamed Folder (id=5)",
        "            - [ ] draft (id=50)",
        "        - [ ] sprint (id=30)",
        "    - [-] archive (id=2)",
        "        - [ ] 2018 report (id=21)",
        "        - [x] 2019 report (id=20)",
        "    - [ ] roadmap (id=10)",
    ]


def test_render_collapsed_folder_shows_summary(engine: SelectionEngine) -> None:
    engine.collapse_folder(1)
    md = render_forest(engine)
    assert "    - ... (3 hidden entries)" in md
    assert "archive" not in md


def test_render_collapsed_single_entry(engine: SelectionEngine) -> None:
    engine.collapse_folder(5)
    assert "(1 hidden entry)" in render_forest(engine)


def test_render_without_items_or_ids(engine: SelectionEngine) -> None:
    engine.toggle_folder_selection(4)
    md = render_forest(engine, include_items=False, show_ids=False)
    assert md.splitlines()[0] == "- [x] Personal"
    assert "Taxes" not in md
    assert "id=" not in md


def test_forest_to_dict_carries_derived_state(engine: SelectionEngine) -> None:
    engine.toggle_folder_selection(2)
    engine.collapse_folder(4)
    data = forest_to_dict(engine)

    personal, projects = data
    assert personal["expanded"] is False
    assert projects["status"] == "indeterminate"
    archive = projects["children"][1]  # type: ignore[index]
    assert archive["status"] == "selected"
    assert archive["items"][0] == {"id": 21, "name": "2018 report", "selected": True}


def test_render_deep_chain() -> None:
    deep, _stats = build_engine(make_chain_response(3000))
    deep.toggle_item_selection(10)

    lines = render_forest(deep).splitlines()
    assert len(lines) == 3001
    assert lines[0] == "- [x] f1 (id=1)"
    assert lines[-1] == "    " * 3000 + "- [x] x (id=10)"

    data = forest_to_dict(deep)
    assert data[0]["status"] == "selected"
