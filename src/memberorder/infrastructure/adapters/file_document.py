"""File system document loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

from memberorder.domain.exceptions import DocumentError
from memberorder.domain.model.document import CSHARP_LANGUAGE_ID, CSHARP_SUFFIX, TextDocument

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path


def load_document(path: Path) -> TextDocument:
    """Read a source file into a TextDocument.

    Version is the modification time in nanoseconds, so an unchanged file
    maps to the same cache entry.

    Args:
        path: Source file

    Returns:
        Document snapshot

    Raises:
        DocumentError: If the file cannot be read or decoded
    """
    try:
        text = path.read_text(encoding="utf-8-sig")
        version = path.stat().st_mtime_ns
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(path, str(e)) from e

    language_id = CSHARP_LANGUAGE_ID if path.suffix == CSHARP_SUFFIX else path.suffix.lstrip(".")
    return TextDocument(
        uri=path.resolve().as_uri(),
        text=text,
        version=version,
        language_id=language_id or "plaintext",
        file_name=str(path),
    )


def iter_source_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Expand paths to C# files, searching directories recursively.

    Files given explicitly are yielded whatever their suffix.
    Directory contents are yielded in sorted order.
    """
    for path in paths:
        if path.is_dir():
            yield from sorted(p for p in path.rglob(f"*{CSHARP_SUFFIX}") if p.is_file())
        else:
            yield path
