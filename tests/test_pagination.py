import pytest

from shopfront.catalog.pagination import PAGE_SIZE, page_count, page_window, paginate


def test_default_page_size():
    assert PAGE_SIZE == 12


# PAGE-001: slices and page counts
def test_paginate_slices():
    items = list(range(30))

    assert paginate(items, 1) == list(range(12))
    assert paginate(items, 3) == list(range(24, 30))
    assert page_count(len(items)) == 3


@pytest.mark.parametrize("size", [1, 2, 3, 7, 12])
def test_pages_concatenate_to_input(size):
    items = list("abcdefghijklmnopq")
    pages = [paginate(items, n, size) for n in range(1, page_count(len(items), size) + 1)]

    assert [x for page in pages for x in page] == items
    assert all(len(page) <= size for page in pages)


# PAGE-002: empty input
def test_empty_sequence():
    assert page_count(0) == 0
    assert paginate([], 1) == []


# PAGE-003: no clamping past the end
def test_page_past_end_is_empty():
    assert paginate([1, 2, 3], 5, 2) == []


def test_invalid_arguments():
    with pytest.raises(ValueError):
        paginate([1], 0)
    with pytest.raises(ValueError):
        paginate([1], 1, 0)
    with pytest.raises(ValueError):
        page_count(3, 0)


# PAGE-004: scenario - page size 1, page 2 of [A, B]
def test_scenario_second_page(make_product):
    a = make_product(1, "A", 10)
    b = make_product(2, "B", 20)
    assert paginate([a, b], 2, 1) == [b]


def test_page_window():
    assert page_window(30, 1) == (1, 12)
    assert page_window(30, 3) == (25, 30)
    assert page_window(0, 1) == (0, 0)
