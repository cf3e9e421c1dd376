"""Search error domain entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

QUERY_CONTEXT_KEY = "searchQuery"


@dataclass(frozen=True)
class SearchError:
    """Immutable record of a captured image search failure.

    Attributes:
        code: Deterministic fingerprint of the failure (``IMG_SEARCH_XXXXXXXX``)
        message: Failure message with credentials redacted
        timestamp: When the failure was captured (timezone-aware UTC)
        context: Read-only view of the originating query (``searchQuery``)
            and caller metadata. Nested values are not copied.
    """

    code: str
    message: str
    timestamp: datetime
    context: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", MappingProxyType(dict(self.context)))
