"""Protocol interfaces for swappable implementations.

Protocols use structural typing, so any backend with matching methods can be
handed to the interceptor, including test fakes.
"""

from .distributed_cache import DistributedCache

__all__ = [
    "DistributedCache",
]
