"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access / Delivery)
"""

from .error_recorder import ErrorRecorder

__all__ = [
    "ErrorRecorder",
]
