"""Document protocol: the host's view of an open file."""

from __future__ import annotations

from typing import Protocol


class DocumentProtocol(Protocol):
    """Contract for documents handed in by the host.

    TextDocument is the in-process implementation.
    Editor integrations wrap their own document model.
    """

    @property
    def uri(self) -> str:
        """Stable identity of the document."""
        ...

    @property
    def version(self) -> int:
        """Increases on every change."""
        ...

    @property
    def language_id(self) -> str:
        """Language discriminator, "csharp" for C#."""
        ...

    @property
    def file_name(self) -> str:
        """File path, may be empty."""
        ...

    def get_text(self) -> str:
        """Full document content."""
        ...
