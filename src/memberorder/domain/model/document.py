"""In-memory text document."""

from __future__ import annotations

from dataclasses import dataclass

CSHARP_LANGUAGE_ID = "csharp"
CSHARP_SUFFIX = ".cs"


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Document snapshot implementing DocumentProtocol.

    Attributes:
        uri: Stable identity
        text: Full content
        version: Increases on every edit
        language_id: Language discriminator ("csharp" for C#)
        file_name: File path, may be empty for untitled documents
    """

    uri: str
    text: str
    version: int = 1
    language_id: str = CSHARP_LANGUAGE_ID
    file_name: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.uri:
            raise ValueError("uri must not be empty")
        if self.text is None:
            raise TypeError("text must not be None")
        if self.version < 0:
            raise ValueError(f"version must be >= 0, got {self.version}")

    def get_text(self) -> str:
        """Full document content."""
        return self.text

    def with_text(self, text: str) -> TextDocument:
        """Next version of this document with new content."""
        return TextDocument(
            uri=self.uri,
            text=text,
            version=self.version + 1,
            language_id=self.language_id,
            file_name=self.file_name,
        )


def is_csharp_document(document: object) -> bool:
    """Check if a document is C# by language id or file suffix.

    Args:
        document: Anything shaped like DocumentProtocol

    Returns:
        True if analysis applies to it
    """
    if getattr(document, "language_id", None) == CSHARP_LANGUAGE_ID:
        return True
    file_name = getattr(document, "file_name", None) or ""
    return file_name.endswith(CSHARP_SUFFIX)
