from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    number: int
    total_pages: int
    total_items: int

    @property
    def has_prev(self) -> bool:
        return self.number > 0

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages - 1


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """Slice one page out of items. Out-of-range page numbers are clamped."""
    page_size = max(1, page_size)
    total_pages = max(1, -(-len(items) // page_size))
    number = min(max(page, 0), total_pages - 1)
    start = number * page_size
    return Page(
        items=list(items[start:start + page_size]),
        number=number,
        total_pages=total_pages,
        total_items=len(items)
    )
