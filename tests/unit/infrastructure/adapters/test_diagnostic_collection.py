"""Tests for adapters/diagnostic_collection.py."""

import pytest

from memberorder.infrastructure.adapters.diagnostic_collection import DiagnosticCollection
from tests.factories import make_violation


class TestDiagnosticCollection:
    """Tests for DiagnosticCollection."""

    def test_default_name(self) -> None:
        assert DiagnosticCollection().name == "memberorder"

    def test_set_and_get(self) -> None:
        sink = DiagnosticCollection()
        violations = (make_violation(),)
        sink.set("a", violations)
        assert sink.get("a") == violations

    def test_get_unknown_is_empty(self) -> None:
        assert DiagnosticCollection().get("missing") == ()

    def test_set_replaces(self) -> None:
        sink = DiagnosticCollection()
        sink.set("a", (make_violation(),))
        sink.set("a", ())
        assert sink.get("a") == ()
        assert len(sink) == 1

    def test_delete(self) -> None:
        sink = DiagnosticCollection()
        sink.set("a", ())
        sink.delete("a")
        sink.delete("never-published")
        assert len(sink) == 0

    def test_clear(self) -> None:
        sink = DiagnosticCollection()
        sink.set("a", ())
        sink.set("b", ())
        sink.clear()
        assert len(sink) == 0

    def test_published_is_read_only(self) -> None:
        sink = DiagnosticCollection()
        sink.set("a", ())
        assert dict(sink.published) == {"a": ()}
        with pytest.raises(TypeError):
            sink.published["b"] = ()  # type: ignore[index]
