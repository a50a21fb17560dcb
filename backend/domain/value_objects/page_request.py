"""
Paging Value Objects

Immutable page request (index, size, sort orders) and the page of results a
repository returns for it.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from constants import PaginationDefaults

T = TypeVar('T')


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """
        Create Direction from a (case-insensitive) string.

        Raises:
            ValueError: If value is neither asc nor desc
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid sort direction: {value}")


@dataclass(frozen=True)
class SortOrder:
    """A single ``property, direction`` pair."""

    property: str
    direction: Direction = Direction.ASC

    @property
    def is_descending(self) -> bool:
        return self.direction is Direction.DESC

    def __str__(self) -> str:
        return f"{self.property},{self.direction.value}"


def parse_sort(values: Optional[Iterable[str]]) -> Tuple[SortOrder, ...]:
    """
    Parse ``sort`` query values.

    Each value is ``prop[,prop...][,asc|desc]``; a trailing direction applies
    to every property listed before it in the same value.

    Examples:
        ["name,desc"]            -> (name DESC,)
        ["name", "createdAt,asc"] -> (name ASC, createdAt ASC)
        ["a,b,desc"]             -> (a DESC, b DESC)
    """
    orders: List[SortOrder] = []
    for value in values or ():
        tokens = [t.strip() for t in value.split(',') if t.strip()]
        if not tokens:
            continue
        direction = Direction.ASC
        if tokens[-1].lower() in (Direction.ASC.value, Direction.DESC.value):
            direction = Direction.from_string(tokens.pop())
        orders.extend(SortOrder(prop, direction) for prop in tokens)
    return tuple(orders)


@dataclass(frozen=True)
class PageRequest:
    """
    Immutable page request.

    page is 0-based; size is bounded by PaginationDefaults.MAX_SIZE.
    """

    page: int = PaginationDefaults.PAGE
    size: int = PaginationDefaults.SIZE
    sort: Tuple[SortOrder, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate paging bounds."""
        if self.page < 0:
            raise ValueError(f"Page index must not be negative: {self.page}")
        if not 1 <= self.size <= PaginationDefaults.MAX_SIZE:
            raise ValueError(
                f"Page size must be between 1 and {PaginationDefaults.MAX_SIZE}: {self.size}"
            )

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: int, size: int, sort: Optional[Iterable[str]] = None) -> "PageRequest":
        """Build a PageRequest from raw query values."""
        return cls(page=page, size=size, sort=parse_sort(sort))


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total number of matching elements."""

    content: List[T]
    page_request: PageRequest
    total_elements: int

    @property
    def number(self) -> int:
        return self.page_request.page

    @property
    def size(self) -> int:
        return self.page_request.size

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0
