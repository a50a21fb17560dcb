"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- PageRequest: Page index, size and sort orders for a list query
- Page: A page of results with its total element count
"""

from .page_request import Direction, SortOrder, PageRequest, Page, parse_sort

__all__ = ["Direction", "SortOrder", "PageRequest", "Page", "parse_sort"]
