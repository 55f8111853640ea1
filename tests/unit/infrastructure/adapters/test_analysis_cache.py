"""Tests for adapters/analysis_cache.py."""

import pytest

from memberorder.infrastructure.adapters.analysis_cache import DEFAULT_CAPACITY, AnalysisCache
from tests.factories import make_violation


class TestAnalysisCache:
    """Tests for AnalysisCache."""

    def test_miss(self) -> None:
        assert AnalysisCache().get("file:///a.cs", 1) is None

    def test_hit_returns_same_tuple(self) -> None:
        cache = AnalysisCache()
        violations = (make_violation(),)
        cache.put("file:///a.cs", 1, violations)
        assert cache.get("file:///a.cs", 1) is violations

    def test_empty_result_cached(self) -> None:
        cache = AnalysisCache()
        cache.put("file:///a.cs", 1, ())
        assert cache.get("file:///a.cs", 1) == ()

    def test_version_is_part_of_key(self) -> None:
        cache = AnalysisCache()
        cache.put("file:///a.cs", 1, ())
        assert cache.get("file:///a.cs", 2) is None
        assert ("file:///a.cs", 1) in cache

    def test_default_capacity(self) -> None:
        cache = AnalysisCache()
        for version in range(DEFAULT_CAPACITY + 1):
            cache.put("file:///a.cs", version, ())
        assert len(cache) == DEFAULT_CAPACITY == 50
        assert ("file:///a.cs", 0) not in cache
        assert ("file:///a.cs", DEFAULT_CAPACITY) in cache

    def test_evicts_oldest_inserted(self) -> None:
        cache = AnalysisCache(capacity=2)
        cache.put("a", 1, ())
        cache.put("b", 1, ())
        cache.get("a", 1)
        cache.put("c", 1, ())
        assert ("a", 1) not in cache
        assert ("b", 1) in cache
        assert ("c", 1) in cache

    def test_reinsert_keeps_position(self) -> None:
        cache = AnalysisCache(capacity=2)
        cache.put("a", 1, ())
        cache.put("b", 1, ())
        cache.put("a", 1, ())
        cache.put("c", 1, ())
        assert ("a", 1) not in cache

    def test_invalidate_all_versions(self) -> None:
        cache = AnalysisCache()
        cache.put("a", 1, ())
        cache.put("a", 2, ())
        cache.put("b", 1, ())
        cache.invalidate("a")
        assert len(cache) == 1
        assert ("b", 1) in cache

    def test_clear(self) -> None:
        cache = AnalysisCache()
        cache.put("a", 1, ())
        cache.clear()
        assert len(cache) == 0

    def test_capacity_validated(self) -> None:
        with pytest.raises(ValueError, match="capacity must be >= 1"):
            AnalysisCache(capacity=0)
