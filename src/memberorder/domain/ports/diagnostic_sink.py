"""Diagnostic sink protocol: where violations are published."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from memberorder.domain.model.violation import Violation


class DiagnosticSinkProtocol(Protocol):
    """Contract for the output sink.

    Replaces the whole violation list of a document on every publish.
    DiagnosticCollection is the in-memory implementation.
    """

    def set(self, uri: str, violations: tuple[Violation, ...]) -> None:
        """Publish violations for a document, replacing previous ones."""
        ...

    def delete(self, uri: str) -> None:
        """Remove everything published for a document."""
        ...

    def clear(self) -> None:
        """Remove everything published for all documents."""
        ...
