import pytest
from utils.pagination import paginate

class TestPaginate:
    def test_empty_has_one_page(self):
        page = paginate([], 0, 8)
        assert page.items == []
        assert page.total_pages == 1
        assert not page.has_prev
        assert not page.has_next

    def test_slices_pages(self):
        items = list(range(20))
        first = paginate(items, 0, 8)
        last = paginate(items, 2, 8)

        assert first.items == list(range(8))
        assert first.has_next and not first.has_prev
        assert last.items == [16, 17, 18, 19]
        assert last.has_prev and not last.has_next
        assert last.total_pages == 3
        assert last.total_items == 20

    @pytest.mark.parametrize("requested,expected", [(-1, 0), (99, 2)])
    def test_out_of_range_is_clamped(self, requested, expected):
        page = paginate(list(range(20)), requested, 8)
        assert page.number == expected

    def test_exact_multiple(self):
        page = paginate(list(range(16)), 1, 8)
        assert page.total_pages == 2
        assert not page.has_next
