"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .search_error import QUERY_CONTEXT_KEY, SearchError

__all__ = ["QUERY_CONTEXT_KEY", "SearchError"]
