"""End-to-end tests for the UIDebugger facade."""

from typing import List

import pytest

from uidebug import ElementType, NodeState, UIDebugger
from uidebug.config import DebugConfig
from uidebug.core.render import PATH_LEGEND, TREE_LEGEND


class RecordingLookup:
    """State lookup that remembers which identifiers were queried."""

    def __init__(self, states=None):
        self.states = states or {}
        self.queried: List[str] = []

    def __call__(self, identifier: str) -> NodeState:
        self.queried.append(identifier)
        return self.states.get(identifier, NodeState())


@pytest.fixture
def lookup() -> RecordingLookup:
    return RecordingLookup({"leadingButton": NodeState(True, True), "cell": NodeState(True, False)})


def test_full_tree_of_two_level_dump() -> None:
    dump = (
        "NavigationBar, 0x1, identifier: 'navigationBarView'\n"
        "    Button, 0x2, identifier: 'leadingButton'"
    )

    report = UIDebugger(dump).build_tree()

    lines = report.splitlines()
    assert "• NavigationBar navigationBarView ⚠️🔴" in lines
    assert "   • Button leadingButton ⚠️🔴" in lines
    assert "-- Summary: total=2, hittable=0, enabled=0" in lines


def test_no_match_skips_state_queries(sample_dump, lookup) -> None:
    report = UIDebugger(sample_dump, lookup).build_tree("doesNotExist")

    assert report == f"❌ No elements found with identifier 'doesNotExist'\n{TREE_LEGEND}"
    assert lookup.queried == []


def test_type_mismatch(sample_dump, lookup) -> None:
    report = UIDebugger(sample_dump, lookup).build_tree("leadingButton", ElementType.CELL)

    assert "found but not of type Cell. Available: Button" in report
    assert report.endswith(TREE_LEGEND)


def test_state_lookups_are_deduplicated(sample_dump, lookup) -> None:
    report = UIDebugger(sample_dump, lookup).build_tree()

    assert sorted(lookup.queried) == ["cell", "leadingButton", "navigationBarView", "settingsTable", "toggle"]
    assert "-- Summary: total=8, hittable=3, enabled=1" in report
    assert "         • Cell cell ✅🔴" in report.splitlines()


def test_only_kept_identifiers_are_queried(sample_dump, lookup) -> None:
    UIDebugger(sample_dump, lookup).build_tree("cell", ElementType.CELL)

    assert sorted(lookup.queried) == ["cell", "settingsTable"]


def test_path_report(sample_dump) -> None:
    report = UIDebugger(sample_dump).build_path("leadingButton")

    assert report.splitlines()[0] == (
        "🔗 Path to 'leadingButton': Application[-] → Window (Main)[-] → Other[navigationBarView] → Button[leadingButton]"
    )
    assert report.endswith(PATH_LEGEND)


def test_dump_is_fetched_on_every_call(sample_dump) -> None:
    calls: List[int] = []

    def source() -> str:
        calls.append(1)
        return sample_dump

    debugger = UIDebugger(source)
    first = debugger.build_tree()
    debugger.build_path("cell")
    second = debugger.build_tree()

    assert len(calls) == 3
    assert first == second


def test_print_helpers_write_to_stdout(sample_dump, capsys: pytest.CaptureFixture) -> None:
    debugger = UIDebugger(sample_dump)

    debugger.print_tree("toggle")
    debugger.print_path("toggle")

    out = capsys.readouterr().out
    assert "UI Tree (matching 'toggle'):" in out
    assert "Table[settingsTable] → Cell[cell] → Switch[toggle]" in out


def test_build_tree_data(sample_dump, lookup) -> None:
    data = UIDebugger(sample_dump, lookup).build_tree_data("leadingButton")

    assert data["filter"] == {"identifier": "leadingButton", "type": None}
    assert data["summary"] == {"total": 4, "hittable": 1, "enabled": 1}


def test_empty_dump() -> None:
    report = UIDebugger(lambda: "").build_tree()

    assert "-- Summary: total=0, hittable=0, enabled=0" in report


def test_out_of_range_config_is_rejected_up_front() -> None:
    with pytest.raises(ValueError):
        UIDebugger("Window, 0x1", config=DebugConfig(indent_width=0))


def test_default_config_parses_with_standard_indent() -> None:
    report = UIDebugger("Window, 0x1\n    Button, 0x2, identifier: 'ok'", config=DebugConfig.defaults()).build_tree()

    assert "   • Button ok ⚠️🔴" in report.splitlines()
    assert "-- Summary: total=2, hittable=0, enabled=0" in report
