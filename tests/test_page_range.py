from __future__ import annotations

import pytest

from docpipe import PageIndexSet, parse_page_range


def test_mixed_expression_drops_out_of_bounds_pages() -> None:
    assert parse_page_range("1, 3-5, 8", 5).indices == (0, 2, 3, 4)


def test_reversed_range_is_skipped() -> None:
    result = parse_page_range("5-2", 10)
    assert not result
    assert len(result) == 0


def test_requested_order_is_not_preserved() -> None:
    assert parse_page_range("5,2", 10).indices == (1, 4)
    assert parse_page_range("2,5", 10).indices == (1, 4)


def test_overlapping_ranges_are_deduplicated() -> None:
    assert parse_page_range("1-3, 2-4, 3", 10).indices == (0, 1, 2, 3)


def test_malformed_tokens_are_skipped() -> None:
    result = parse_page_range("a, 2, 3-x, , -1, 4-, 1-2-3, 6", 10)
    assert result.indices == (1, 5)


def test_open_ended_range_is_clamped_to_page_count() -> None:
    assert parse_page_range("1-100", 5).indices == (0, 1, 2, 3, 4)
    assert parse_page_range("4-1000000000", 5).indices == (3, 4)


def test_whitespace_inside_ranges() -> None:
    assert parse_page_range(" 2 - 3 ,4", 5).indices == (1, 2, 3)


@pytest.mark.parametrize("expression", ["", None, " , ,", "0", "0-0"])
def test_empty_selections(expression: str | None) -> None:
    assert parse_page_range(expression, 5) == PageIndexSet()


def test_zero_page_document_selects_nothing() -> None:
    assert not parse_page_range("1-3", 0)


@pytest.mark.parametrize(
    ("expression", "page_count"),
    [
        ("1,2,3", 2),
        ("9-3, 4-6, 6, 1", 5),
        ("10-12, 3, 3, 3", 11),
        ("7, 1-2, 5-5", 7),
        ("2-8", 1),
    ],
)
def test_result_is_bounded_ascending_and_unique(expression: str, page_count: int) -> None:
    result = list(parse_page_range(expression, page_count))
    assert all(0 <= index < page_count for index in result)
    assert result == sorted(set(result))


def test_page_index_set_rejects_invalid_sequences() -> None:
    with pytest.raises(ValueError):
        PageIndexSet((2, 1))
    with pytest.raises(ValueError):
        PageIndexSet((1, 1))
    with pytest.raises(ValueError):
        PageIndexSet((-1, 0))


def test_page_numbers_are_one_based() -> None:
    assert PageIndexSet((0, 4)).page_numbers() == [1, 5]


def test_overlong_page_numbers_are_skipped() -> None:
    assert parse_page_range("1, " + "9" * 5000, 5).indices == (0,)
    assert parse_page_range("9" * 5000 + "-3, 2", 5).indices == (1,)


def test_overlong_range_end_is_clamped() -> None:
    assert parse_page_range("4-" + "9" * 5000, 5).indices == (3, 4)
