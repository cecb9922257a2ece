"""
Page request and page result types shared by the repositories and services.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number and page size."""

    page: int = 0
    size: int = 20

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("Page index must not be negative")
        if self.size < 1:
            raise ValueError("Page size must be at least 1")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """
    One page of results.

    Attributes:
        content: Items on this page
        number: Zero-based page number
        size: Requested page size
        total_elements: Number of matching items across all pages
    """

    content: List[T] = field(default_factory=list)
    number: int = 0
    size: int = 20
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    def map(self, func: Callable[[T], U]) -> "Page[U]":
        """Return a page with ``func`` applied to every item."""
        return Page(
            content=[func(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )

    def __iter__(self):
        return iter(self.content)
