"""In-memory diagnostic sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from memberorder.domain.model.violation import Violation


@dataclass
class DiagnosticCollection:
    """Published violations per document uri.

    Implements DiagnosticSinkProtocol for hosts without a marker surface
    (CLI, tests). Editor integrations provide their own sink.

    Attributes:
        name: Collection name shown by the host
        _published: uri → violations
    """

    name: str = "memberorder"
    _published: dict[str, tuple[Violation, ...]] = field(default_factory=dict)

    def set(self, uri: str, violations: tuple[Violation, ...]) -> None:
        """Publish violations for a document, replacing previous ones."""
        self._published[uri] = tuple(violations)

    def get(self, uri: str) -> tuple[Violation, ...]:
        """Violations published for a document, empty if none."""
        return self._published.get(uri, ())

    def delete(self, uri: str) -> None:
        """Remove everything published for a document."""
        self._published.pop(uri, None)

    def clear(self) -> None:
        """Remove everything published for all documents."""
        self._published.clear()

    @property
    def published(self) -> Mapping[str, tuple[Violation, ...]]:
        """Read-only view of all published violations."""
        return MappingProxyType(self._published)

    def __len__(self) -> int:
        """Number of documents with published entries."""
        return len(self._published)
