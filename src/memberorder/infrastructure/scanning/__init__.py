"""Text scanning engine.

Best-effort structural parsing built on lexical patterns, no AST:
    body_locator: class-like body ranges by brace counting
    reassembler: physical lines → logical declarations
    classifier: logical declaration → member category
"""

from memberorder.infrastructure.scanning.body_locator import find_body_ranges
from memberorder.infrastructure.scanning.classifier import (
    classify_declaration,
    classify_member,
    extract_member_name,
)
from memberorder.infrastructure.scanning.reassembler import DeclarationReassembler, ScanState

__all__ = [
    "DeclarationReassembler",
    "ScanState",
    "classify_declaration",
    "classify_member",
    "extract_member_name",
    "find_body_ranges",
]
