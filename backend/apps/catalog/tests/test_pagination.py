import pytest

from apps.catalog.pagination import PageWindow


def test_offset_and_limit():
    window = PageWindow(page=3, page_size=10)
    assert window.offset == 20
    assert window.limit == 30


@pytest.mark.parametrize(
    "page,size,returned,total,expected",
    [
        (1, 10, 10, 25, {"totalPages": 3, "hasNext": True, "hasPrev": False}),
        (3, 10, 5, 25, {"totalPages": 3, "hasNext": False, "hasPrev": True}),
        (1, 10, 0, 0, {"totalPages": 0, "hasNext": False, "hasPrev": False}),
        (2, 5, 5, 10, {"totalPages": 2, "hasNext": False, "hasPrev": True}),
        (4, 10, 0, 25, {"totalPages": 3, "hasNext": False, "hasPrev": True}),
    ],
)
def test_summarize_flags(page, size, returned, total, expected):
    summary = PageWindow(page=page, page_size=size).summarize(returned, total)
    assert summary["currentPage"] == page
    assert summary["totalProducts"] == total
    for key, value in expected.items():
        assert summary[key] == value
