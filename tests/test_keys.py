"""
Tests for cache key derivation.
"""

import pytest

from output_cache.keys import cache_key_for, derive_cache_key, derive_strict_cache_key

from .conftest import make_request


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/Values/123/", "Values:123"),
        ("/values", "values"),
        ("values/1/details", "values:1:details"),
        ("//a//b//", "a::b"),
        ("/", ""),
        ("", ""),
    ],
)
def test_derive_cache_key(path, expected):
    """Test trimming and separator replacement."""
    assert derive_cache_key(path) == expected


def test_derive_cache_key_is_deterministic():
    """Test the same path always gives the same key."""
    assert derive_cache_key("/a/b/c") == derive_cache_key("/a/b/c")


def test_derived_key_has_no_separators():
    """Test no path separator survives derivation."""
    key = derive_cache_key("/orders/42/items/7/")
    assert "/" not in key
    assert key == "orders:42:items:7"


def test_custom_delimiter():
    """Test the delimiter is configurable."""
    assert derive_cache_key("/a/b/", delimiter=".") == "a.b"


def test_query_string_is_ignored_by_default():
    """Test requests differing only by query share a key."""
    first = make_request("/values", query_string="page=1")
    second = make_request("/values", query_string="page=2")

    assert cache_key_for(first) == cache_key_for(second) == "values"


def test_strict_key_sorts_query_parameters():
    """Test the opt-in key includes the sorted query string."""
    assert derive_strict_cache_key("/values/", "b=2&a=1") == "values?a=1&b=2"
    assert derive_strict_cache_key("/values/", "a=1&b=2") == "values?a=1&b=2"


def test_strict_key_without_query_matches_path_key():
    """Test the strict key equals the path key when there is no query."""
    assert derive_strict_cache_key("/values/1", "") == derive_cache_key("/values/1")


def test_strict_key_distinguishes_queries():
    """Test strict keys separate different query strings."""
    first = make_request("/values", query_string="page=1")
    second = make_request("/values", query_string="page=2")

    assert cache_key_for(first, include_query_string=True) != cache_key_for(
        second, include_query_string=True
    )
