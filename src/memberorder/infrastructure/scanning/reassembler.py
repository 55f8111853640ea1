"""Declaration reassembler: physical lines → logical declarations.

Walks the lines of one body range as a small state machine:

    NORMAL ──"/*" without "*/"──→ IN_BLOCK_COMMENT ──"*/"──→ (previous state)
    NORMAL ──[SerializeField]───→ ATTRIBUTE_PENDING ──declaration──→ NORMAL

Blank lines and "//" comments are skipped in every state. A declaration that
spans several lines is joined with single spaces until it holds ";", "{",
"}" or "=>".
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from memberorder.domain.model.declaration import Declaration
from memberorder.infrastructure.scanning.patterns import (
    ARROW,
    ATTRIBUTE_NAME,
    AUTO_PROPERTY_OPENER,
    LINE_TERMINATORS,
    SERIALIZATION_MARKERS,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from memberorder.domain.model.body_range import BodyRange


class ScanState(Enum):
    """Reassembler state between physical lines."""

    NORMAL = auto()
    IN_BLOCK_COMMENT = auto()
    ATTRIBUTE_PENDING = auto()  # serialization attribute seen, declaration not yet


class DeclarationReassembler:
    """Folds the lines of a body range into logical declarations.

    One instance per document. State is reset at the start of every range,
    so ranges can be reassembled in any order.

    Methods:
        reassemble(): Declarations of one body range, in line order
    """

    def __init__(self, lines: Sequence[str]) -> None:
        """Initialize reassembler.

        Args:
            lines: Document lines, without line terminators
        """
        self._lines = lines
        self._state = ScanState.NORMAL
        self._resume_state = ScanState.NORMAL

    @property
    def state(self) -> ScanState:
        """Current state (after the last processed line)."""
        return self._state

    def reassemble(self, body: BodyRange) -> tuple[Declaration, ...]:
        """Produce the logical declarations of one body range.

        Args:
            body: Range to walk, start and end inclusive

        Returns:
            Declarations in strictly increasing line order
        """
        self._state = ScanState.NORMAL
        self._resume_state = ScanState.NORMAL

        end = min(body.end_line, len(self._lines) - 1)
        declarations: list[Declaration] = []
        index = body.start_line

        while index <= end:
            text = self._consume_prefix(self._lines[index].strip())
            if not text:
                index += 1
                continue

            text, line_count = self._join_continuation(text, index, end)
            declarations.append(
                Declaration(
                    text=text,
                    attributed=self._take_attribute(),
                    line=index,
                    line_count=line_count,
                )
            )
            index += line_count

        return tuple(declarations)

    def _consume_prefix(self, line: str) -> str:
        """Strip comments and attributes, updating state.

        Returns:
            Remaining declaration text, empty if nothing is left on the line
        """
        if self._state is ScanState.IN_BLOCK_COMMENT:
            close = line.find("*/")
            if close == -1:
                return ""
            self._state = self._resume_state
            line = line[close + 2 :].strip()

        line = strip_line_comment(line)

        while line:
            if line.startswith("/*"):
                close = line.find("*/", 2)
                if close == -1:
                    self._resume_state = self._state
                    self._state = ScanState.IN_BLOCK_COMMENT
                    return ""
                line = line[close + 2 :].strip()
            elif line.startswith("["):
                close = line.find("]")
                attribute = line if close == -1 else line[: close + 1]
                if is_serialization_attribute(attribute):
                    self._state = ScanState.ATTRIBUTE_PENDING
                if close == -1:
                    return ""
                line = line[close + 1 :].strip()
            else:
                break

        return line

    def _join_continuation(self, text: str, index: int, end: int) -> tuple[str, int]:
        """Append following lines while the declaration is incomplete.

        Stops before a blank line, a comment or an attribute line; that line
        is left for the main loop.

        Returns:
            (joined text, physical lines consumed)
        """
        next_index = index + 1
        while next_index <= end and is_incomplete(text):
            following = strip_line_comment(self._lines[next_index].strip())
            if not following or following.startswith(("//", "/*", "[")):
                break
            text = f"{text} {following}"
            next_index += 1
        return text, next_index - index

    def _take_attribute(self) -> bool:
        """Consume the pending attribute flag."""
        if self._state is ScanState.ATTRIBUTE_PENDING:
            self._state = ScanState.NORMAL
            return True
        return False


def is_incomplete(declaration: str) -> bool:
    """Check if a declaration still needs its following lines."""
    return (
        LINE_TERMINATORS.search(declaration) is None
        and AUTO_PROPERTY_OPENER not in declaration
        and ARROW not in declaration
    )


def is_serialization_attribute(attribute: str) -> bool:
    """Check if a bracketed attribute list marks a serialized field.

    Matches SerializeField / SerializeReference case-insensitively, with or
    without namespace, "Attribute" suffix or "field:" target.
    """
    for match in ATTRIBUTE_NAME.finditer(attribute):
        name = match.group(1).rsplit(".", 1)[-1].lower()
        name = name.removesuffix("attribute")
        if name in SERIALIZATION_MARKERS:
            return True
    return False


def strip_line_comment(line: str) -> str:
    """Remove a trailing "//" comment outside string and char literals.

    Inline block comments closed on the same line are stepped over.
    An unclosed "/*" ends the scan and the line is returned unchanged.
    """
    quote: str | None = None
    pos = 0
    while pos < len(line):
        char = line[pos]
        if quote is not None:
            if char == "\\":
                pos += 2
                continue
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif line.startswith("//", pos):
            return line[:pos].rstrip()
        elif line.startswith("/*", pos):
            close = line.find("*/", pos + 2)
            if close == -1:
                return line
            pos = close + 2
            continue
        pos += 1
    return line
