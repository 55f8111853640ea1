"""Lexical patterns for C# declarations.

All classifier patterns run against whitespace-collapsed declaration text.
"""

from __future__ import annotations

import re

ACCESS_MODIFIERS = r"public|private|protected|internal"

TYPE_MODIFIERS = (
    r"public|private|protected|internal|static|partial|abstract|sealed"
    r"|readonly|ref|unsafe|new|file"
)

METHOD_MODIFIERS = (
    r"public|private|protected|internal|static|async|virtual|override|sealed"
    r"|extern|abstract|new|unsafe|partial|readonly"
)

# Type-like token run: generics, arrays, qualified names, nullables
TYPE_TOKENS = r"[\w<>,.?\[\]\s]+"

# =============================================================================
# Body locator
# =============================================================================

TYPE_DECLARATION = re.compile(
    rf"^[ \t]*(?:(?:{TYPE_MODIFIERS})\s+)*(class|struct|record|interface)\s+(\w+)",
    re.MULTILINE,
)

# =============================================================================
# Reassembler
# =============================================================================

LINE_TERMINATORS = re.compile(r"[;{}]")
AUTO_PROPERTY_OPENER = "{ get;"
ARROW = "=>"

ATTRIBUTE_NAME = re.compile(r"(?:^|[\[,])\s*(?:\w+\s*:\s*)?([\w.]+)")
SERIALIZATION_MARKERS = frozenset({"serializefield", "serializereference"})

# =============================================================================
# Classifier
# =============================================================================

CONSTANT = re.compile(r"^(public|private)\s+const\s+")

READONLY_FIELD = re.compile(r"^(?:\w+\s+)*readonly\s+\w")

EVENT = re.compile(
    r"^(?:(?:public|private|protected|internal|static|virtual|override|abstract|sealed|new)\s+)*"
    r"event\s+"
)

AUTO_PROPERTY = re.compile(
    r"\{\s*get;\s*(?:(?:private|protected|internal)\s+)?(?:set|init);\s*\}"
)

# Typed name opening an accessor list with get, or a bare { get ... } block
ACCESSOR_PROPERTY = re.compile(
    rf"^(?:(?:{ACCESS_MODIFIERS})\s+)?(?:\w+\s+)*{TYPE_TOKENS}\s+\w+\s*"
    rf"\{{\s*(?:(?:{ACCESS_MODIFIERS})\s+)?get\b"
    r"|\{\s*get\s*[^{}]*\}"
)

# Switch expression arms are not properties: a `when` guard or a spaced
# relational pattern ahead of the arrow, or a trailing comma.
BEFORE_ARROW = r"(?:(?!=>).)*"
SWITCH_ARM_SHAPE = rf"(?!{BEFORE_ARROW}\bwhen\b)(?!{BEFORE_ARROW}\s[<>]=?\s)(?!.*,\s*$)"

ARROW_PROPERTY = re.compile(
    rf"^{SWITCH_ARM_SHAPE}(?:(?:{ACCESS_MODIFIERS})\s+)?(?!(?:return|yield|await|else|case|var)\b)"
    rf"(?:\w+\s+)*{TYPE_TOKENS}\s+[A-Za-z_]\w*\s*=>"
)

FIELD = re.compile(
    rf"^(private|public)\s+(?!readonly\b)(?:\w+\s+)*{TYPE_TOKENS}\s+\w+\s*(?:=|;|$)"
)

METHOD_SIGNATURE = re.compile(
    rf"^(?:(?:{METHOD_MODIFIERS})\s+)*(?!(?:{METHOD_MODIFIERS})\b)"
    r"[\w<>,.?\[\]\s]*?[\w>\]?]\s+"
    r"([A-Za-z_]\w*)\s*(?:<[^()]*>)?\s*\([^)]*\)\s*(?:\{|;|=>|where\b|$)"
)

EXPRESSION_BODIED_METHOD = re.compile(
    rf"^(?:{ACCESS_MODIFIERS})\s+.*?[\w<>]+\s+([A-Za-z_]\w*)\s*(?:<[^()]*>)?\s*\([^)]*\)\s*=>"
)

CALL_OR_STATEMENT: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:else|if|return|while|for|foreach|using|await|yield)\b"),
    re.compile(r"[=+\-*/%&|^<>!]="),  # compound assignment / comparison
    re.compile(r"\.\w*\s*\("),  # member call
    re.compile(r"\w+\s*\([^)]*\)\s*;"),  # call then semicolon
    re.compile(r"\bnew\s+\w+\s*\("),  # object construction
    re.compile(r"^\s*\w+\s*\([^)]*\)\s*$"),  # bare call
)

# =============================================================================
# Name extraction
# =============================================================================

FIELD_NAME = re.compile(r"(\w+)\s*(?:=|;|$)")
PROPERTY_NAME = re.compile(r"(\w+)\s*\{")
ARROW_PROPERTY_NAME = re.compile(r"([A-Za-z_]\w*)\s*=>")
EVENT_NAME = re.compile(rf"event\s+{TYPE_TOKENS}\s+(\w+)")

# Framework callbacks, exact and case-sensitive
LIFECYCLE_METHODS: frozenset[str] = frozenset(
    {
        "Awake",
        "Start",
        "Update",
        "FixedUpdate",
        "LateUpdate",
        "OnEnable",
        "OnDisable",
        "OnDestroy",
        "OnValidate",
        "OnTriggerEnter",
        "OnTriggerEnter2D",
        "OnTriggerExit",
        "OnTriggerExit2D",
        "OnTriggerStay",
        "OnTriggerStay2D",
        "OnCollisionEnter",
        "OnCollisionEnter2D",
        "OnCollisionExit",
        "OnCollisionExit2D",
        "OnCollisionStay",
        "OnCollisionStay2D",
        "OnMouseDown",
        "OnMouseUp",
        "OnMouseEnter",
        "OnMouseExit",
        "OnMouseOver",
    }
)
