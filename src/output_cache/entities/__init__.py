"""Domain entities for internal representation.

These are pure frozen dataclasses used by the interceptor. They carry no
serialization logic; the wire form lives in the dto package.
"""

from .cache_entry import CacheEntry

__all__ = ["CacheEntry"]
