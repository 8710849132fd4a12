"""Handler layer for HTTP endpoints.

Handlers depend on the DistributedCache protocol, not on Redis directly.
"""

from .values_handler import ValuesHandler

__all__ = [
    "ValuesHandler",
]
