"""Domain model: immutable value objects."""

from memberorder.domain.model.body_range import BodyRange
from memberorder.domain.model.canonical_order import CanonicalOrder
from memberorder.domain.model.check_result import CheckResult, FileReport
from memberorder.domain.model.configuration import OrderConfig
from memberorder.domain.model.declaration import Declaration
from memberorder.domain.model.document import TextDocument
from memberorder.domain.model.enums import DEFAULT_MEMBER_ORDER, MemberCategory, Severity
from memberorder.domain.model.member import UNKNOWN_NAME, Member
from memberorder.domain.model.text_range import TextRange
from memberorder.domain.model.violation import SOURCE_TAG, Violation

__all__ = [
    "DEFAULT_MEMBER_ORDER",
    "SOURCE_TAG",
    "UNKNOWN_NAME",
    "BodyRange",
    "CanonicalOrder",
    "CheckResult",
    "Declaration",
    "FileReport",
    "Member",
    "MemberCategory",
    "OrderConfig",
    "Severity",
    "TextDocument",
    "TextRange",
    "Violation",
]
