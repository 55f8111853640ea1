"""Body range locator: class-like bodies by brace counting.

Finds every class/struct/record/interface declaration (top-level and nested)
and computes the line span of its body. Braces inside string literals and
comments are counted like any other brace.
"""

from __future__ import annotations

from bisect import bisect_right

from memberorder.domain.model.body_range import BodyRange
from memberorder.infrastructure.scanning.patterns import TYPE_DECLARATION


def find_body_ranges(text: str) -> tuple[BodyRange, ...]:
    """Locate the bodies of all type declarations in text.

    Algorithm:
    1. Match type declarations (modifiers, keyword, identifier)
    2. Take the first "{" at or after the match
    3. Skip declarations whose first ";" comes before that brace (no body)
    4. Count brace depth until it returns to zero
    5. Skip declarations whose body is never closed (malformed input)

    Ranges are returned in declaration order. Nested types produce a range
    contained in their outer type's range.

    Args:
        text: Full document text

    Returns:
        Tuple of body ranges (0-based, inclusive lines)
    """
    line_starts = _line_starts(text)
    ranges: list[BodyRange] = []

    for match in TYPE_DECLARATION.finditer(text):
        brace = text.find("{", match.start())
        if brace == -1:
            continue

        # Positional record or forward declaration: no body of its own
        if text.find(";", match.end(), brace) != -1:
            continue

        close = _matching_brace(text, brace)
        if close is None:
            continue

        ranges.append(
            BodyRange(
                start_line=_line_of(line_starts, brace),
                end_line=_line_of(line_starts, close),
            )
        )

    return tuple(ranges)


def _matching_brace(text: str, open_pos: int) -> int | None:
    """Position of the brace closing the one at open_pos, None if unbalanced."""
    depth = 0
    for pos in range(open_pos, len(text)):
        char = text[pos]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return pos
    return None


def _line_starts(text: str) -> list[int]:
    """Offsets where each line begins."""
    starts = [0]
    pos = text.find("\n")
    while pos != -1:
        starts.append(pos + 1)
        pos = text.find("\n", pos + 1)
    return starts


def _line_of(line_starts: list[int], pos: int) -> int:
    """0-based line containing offset pos."""
    return bisect_right(line_starts, pos) - 1
