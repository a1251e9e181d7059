"""Unit tests for the keep-set computation."""

import pytest

from uidebug.core.element_types import ElementType
from uidebug.core.filtering import FilterOutcome, FilterSpec, ancestor_indices, select
from uidebug.core.parser import parse_dump


def test_unfiltered_keeps_identified_rows_and_their_ancestors(sample_records) -> None:
    result = select(sample_records)

    assert result.outcome is FilterOutcome.MATCHED
    assert result
    # StaticText rows without identifiers (4 and 7) are neither matches nor ancestors.
    assert result.kept == [0, 1, 2, 3, 5, 6, 8, 9]


def test_identifier_filter_keeps_branch_in_dump_order(sample_records) -> None:
    result = select(sample_records, FilterSpec(identifier="cell"))

    assert result.kept == [0, 1, 5, 6, 8]


def test_identifier_and_type_filter(sample_records) -> None:
    result = select(sample_records, FilterSpec(identifier="cell", element_type=ElementType.CELL))

    assert result.outcome is FilterOutcome.MATCHED
    assert result.kept == [0, 1, 5, 6, 8]


def test_unknown_identifier_is_no_match(sample_records) -> None:
    result = select(sample_records, FilterSpec(identifier="doesNotExist"))

    assert result.outcome is FilterOutcome.NO_MATCH
    assert not result
    assert result.kept == []


def test_wrong_type_reports_available_types(sample_records) -> None:
    result = select(sample_records, FilterSpec(identifier="leadingButton", element_type=ElementType.CELL))

    assert result.outcome is FilterOutcome.TYPE_MISMATCH
    assert result.available_types == ["Button"]
    assert result.kept == []


def test_type_comparison_uses_raw_token() -> None:
    records = parse_dump("XCUIElementType9, 0x1, identifier: 'ok'")

    assert select(records, FilterSpec("ok", "XCUIElementType9")).outcome is FilterOutcome.MATCHED
    mismatch = select(records, FilterSpec("ok", ElementType.BUTTON))
    assert mismatch.outcome is FilterOutcome.TYPE_MISMATCH
    assert mismatch.available_types == ["Button"]


def test_available_types_are_distinct() -> None:
    records = parse_dump("Window, 0x1\n    Button, 0x2, identifier: 'x'\n    Button, 0x3, identifier: 'x'\n    Image, 0x4, identifier: 'x'")

    result = select(records, FilterSpec("x", "Cell"))

    assert result.available_types == ["Button", "Image"]


def test_type_only_filter(sample_records) -> None:
    result = select(sample_records, FilterSpec(element_type="Switch"))

    assert result.outcome is FilterOutcome.MATCHED
    assert result.kept == [0, 1, 5, 8, 9]
    assert select(sample_records, FilterSpec(element_type="Slider")).kept == []


def test_ancestor_indices_nearest_first(sample_records) -> None:
    assert ancestor_indices(sample_records, 9) == [8, 5, 1, 0]
    assert ancestor_indices(sample_records, 0) == []


def test_level_jump_links_to_nearest_shallower_row() -> None:
    records = parse_dump("Window, 0x1\n            Button, 0x2, identifier: 'deep'")

    assert records[1].level == 3
    assert ancestor_indices(records, 1) == [0]
    assert select(records, FilterSpec("deep")).kept == [0, 1]


@pytest.mark.parametrize("identifier", [None, "cell", "toggle", "leadingButton", "navigationBarView"])
def test_kept_rows_have_their_whole_root_path(sample_records, identifier) -> None:
    kept = set(select(sample_records, FilterSpec(identifier=identifier)).kept)

    for index in kept:
        assert set(ancestor_indices(sample_records, index)) <= kept


def test_every_identifier_can_be_found(sample_records) -> None:
    for index, record in enumerate(sample_records):
        if record.identifier is None:
            continue
        result = select(sample_records, FilterSpec(identifier=record.identifier))
        assert result.outcome is FilterOutcome.MATCHED
        assert index in result.kept
