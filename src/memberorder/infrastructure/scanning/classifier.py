"""Member classification for logical declarations.

Classifies a declaration by lexical shape. Rules are checked in order and
the first match wins:

    1. constant           public|private const ...     → PUBLIC_CONST / PRIVATE_CONST
    2. readonly field     ... readonly <type> ...      → READONLY_FIELD
    3. attributed field   [SerializeField] seen        → ATTRIBUTED_FIELD
    4. event              [modifiers] event ...        → EVENT
    5. property           { get; set; } / { get ... } / Name =>  → PROPERTY
    6. field              public|private <type> name [=;] → PUBLIC_FIELD / PRIVATE_FIELD
    7. method             <type> Name(...) { ; =>      → LIFECYCLE / PUBLIC / PRIVATE_METHOD
    8. anything else      statement, nested code       → None

A declaration matching both the constant and the field shape is therefore a
constant, never a field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from memberorder.domain.model.enums import MemberCategory
from memberorder.domain.model.member import UNKNOWN_NAME, Member
from memberorder.infrastructure.scanning.patterns import (
    ACCESSOR_PROPERTY,
    ARROW_PROPERTY,
    ARROW_PROPERTY_NAME,
    AUTO_PROPERTY,
    CALL_OR_STATEMENT,
    CONSTANT,
    EVENT,
    EVENT_NAME,
    EXPRESSION_BODIED_METHOD,
    FIELD,
    FIELD_NAME,
    LIFECYCLE_METHODS,
    METHOD_SIGNATURE,
    PROPERTY_NAME,
    READONLY_FIELD,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from memberorder.domain.model.declaration import Declaration

    _Rule = Callable[[str, bool], MemberCategory | None]

_FIELD_LIKE = frozenset(
    {
        MemberCategory.PUBLIC_CONST,
        MemberCategory.PRIVATE_CONST,
        MemberCategory.READONLY_FIELD,
        MemberCategory.ATTRIBUTED_FIELD,
        MemberCategory.PRIVATE_FIELD,
        MemberCategory.PUBLIC_FIELD,
    }
)

_METHODS = frozenset(
    {
        MemberCategory.LIFECYCLE_METHOD,
        MemberCategory.PUBLIC_METHOD,
        MemberCategory.PRIVATE_METHOD,
    }
)


def classify_declaration(declaration: Declaration) -> Member | None:
    """Classify a declaration and extract its name.

    Args:
        declaration: Logical declaration from the reassembler

    Returns:
        Member, or None if the declaration is not a member
    """
    category = classify_member(declaration.text, attributed=declaration.attributed)
    if category is None:
        return None
    return Member(
        name=extract_member_name(declaration.text, category),
        category=category,
        line=declaration.line,
    )


def classify_member(text: str, *, attributed: bool = False) -> MemberCategory | None:
    """Classify declaration text. First matching rule wins.

    Args:
        text: Declaration text (whitespace is collapsed here)
        attributed: True if a serialization attribute decorates it

    Returns:
        Member category, None for statements and nested code
    """
    normalized = _normalize(text)
    for rule in _RULES:
        category = rule(normalized, attributed)
        if category is not None:
            return category
    return None


def extract_member_name(text: str, category: MemberCategory) -> str:
    """Extract the member identifier for a classified declaration.

    Never fails: returns UNKNOWN_NAME when no identifier is found.
    """
    normalized = _normalize(text)

    if category in _FIELD_LIKE:
        match = FIELD_NAME.search(normalized)
        return match.group(1) if match else UNKNOWN_NAME

    if category is MemberCategory.PROPERTY:
        match = PROPERTY_NAME.search(normalized) or ARROW_PROPERTY_NAME.search(normalized)
        return match.group(1) if match else UNKNOWN_NAME

    if category is MemberCategory.EVENT:
        match = EVENT_NAME.search(normalized)
        return match.group(1) if match else UNKNOWN_NAME

    if category in _METHODS:
        return _method_name(normalized) or UNKNOWN_NAME

    return UNKNOWN_NAME


def is_method_declaration(text: str) -> bool:
    """Check if text has a method signature shape and is not a call or statement."""
    if looks_like_call_or_statement(text):
        return False
    return (
        METHOD_SIGNATURE.match(text) is not None
        or EXPRESSION_BODIED_METHOD.match(text) is not None
    )


def looks_like_call_or_statement(text: str) -> bool:
    """Check if text reads as a statement rather than a declaration.

    Expression-bodied methods are exempt: their body is an expression
    that would otherwise trip the call heuristics.
    """
    if EXPRESSION_BODIED_METHOD.match(text):
        return False
    return any(pattern.search(text) for pattern in CALL_OR_STATEMENT)


# =============================================================================
# Rules (decision table, priority order)
# =============================================================================


def _constant(text: str, attributed: bool) -> MemberCategory | None:
    match = CONSTANT.match(text)
    if match is None:
        return None
    if match.group(1) == "public":
        return MemberCategory.PUBLIC_CONST
    return MemberCategory.PRIVATE_CONST


def _readonly_field(text: str, attributed: bool) -> MemberCategory | None:
    if READONLY_FIELD.match(text) and " const " not in text:
        return MemberCategory.READONLY_FIELD
    return None


def _attributed_field(text: str, attributed: bool) -> MemberCategory | None:
    return MemberCategory.ATTRIBUTED_FIELD if attributed else None


def _event(text: str, attributed: bool) -> MemberCategory | None:
    return MemberCategory.EVENT if EVENT.match(text) else None


def _property(text: str, attributed: bool) -> MemberCategory | None:
    if (
        AUTO_PROPERTY.search(text)
        or ACCESSOR_PROPERTY.search(text)
        or ARROW_PROPERTY.match(text)
    ):
        return MemberCategory.PROPERTY
    return None


def _field(text: str, attributed: bool) -> MemberCategory | None:
    match = FIELD.match(text)
    if match is None:
        return None
    if match.group(1) == "private":
        return MemberCategory.PRIVATE_FIELD
    return MemberCategory.PUBLIC_FIELD


def _method(text: str, attributed: bool) -> MemberCategory | None:
    if not is_method_declaration(text):
        return None
    name = _method_name(text)
    if name is None:
        return None
    if name in LIFECYCLE_METHODS:
        return MemberCategory.LIFECYCLE_METHOD
    if text.startswith("public"):
        return MemberCategory.PUBLIC_METHOD
    return MemberCategory.PRIVATE_METHOD


_RULES: tuple[_Rule, ...] = (
    _constant,
    _readonly_field,
    _attributed_field,
    _event,
    _property,
    _field,
    _method,
)


def _method_name(text: str) -> str | None:
    """Identifier captured by the signature or expression-bodied shape."""
    match = METHOD_SIGNATURE.match(text) or EXPRESSION_BODIED_METHOD.match(text)
    return match.group(1) if match else None


def _normalize(text: str) -> str:
    """Collapse whitespace runs to single spaces."""
    return " ".join(text.split())
