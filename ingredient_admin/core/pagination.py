import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageResult(Generic[T]):
    items: list[T]
    total_count: int
    page: int
    page_size: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def previous_page(self) -> int | None:
        return self.page - 1 if self.has_previous else None

    @property
    def next_page(self) -> int | None:
        return self.page + 1 if self.has_next else None

    @property
    def page_numbers(self) -> range:
        return range(1, self.total_pages + 1)


def paginate(collection: Sequence[T], page: int, page_size: int) -> PageResult[T]:
    """
    Slice one 1-based page out of ``collection``.

    Pages below 1 are read as page 1; pages past the end come back empty.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    page = max(page, 1)
    total_count = len(collection)
    total_pages = max(1, math.ceil(total_count / page_size))

    start = (page - 1) * page_size
    items = list(collection[start:start + page_size])

    return PageResult(
        items=items,
        total_count=total_count,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
    )
