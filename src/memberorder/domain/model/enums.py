"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, auto


class Severity(Enum):
    """Violation severity."""

    WARNING = auto()  # every order violation


class MemberCategory(Enum):
    """Semantic category of a class member.

    Declaration order of the variants is the default canonical order.
    Value is the human label used in messages and configuration.
    """

    PUBLIC_CONST = "public const"
    PRIVATE_CONST = "private const"
    READONLY_FIELD = "readonly field"
    ATTRIBUTED_FIELD = "attributed field"  # [SerializeField] and friends
    PRIVATE_FIELD = "private field"
    PUBLIC_FIELD = "public field"
    PROPERTY = "property"
    EVENT = "event"
    LIFECYCLE_METHOD = "lifecycle method"  # Awake, Update, OnEnable, ...
    PUBLIC_METHOD = "public method"
    PRIVATE_METHOD = "private method"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return self.value

    @classmethod
    def parse(cls, name: str) -> MemberCategory | None:
        """Resolve a configured category name.

        Accepts the label ("public const"), the enum name ("PUBLIC_CONST"),
        CamelCase ("PublicConst") and legacy aliases ("serialize field",
        "unity method"). Matching ignores case, spaces and underscores.

        Args:
            name: Category name as written in configuration

        Returns:
            Matching category, None if the name is not recognised
        """
        return _LOOKUP.get(_normalize(name))


def _normalize(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch not in " _-")


_ALIASES: dict[str, MemberCategory] = {
    "serialize field": MemberCategory.ATTRIBUTED_FIELD,
    "serialized field": MemberCategory.ATTRIBUTED_FIELD,
    "unity method": MemberCategory.LIFECYCLE_METHOD,
}

_LOOKUP: dict[str, MemberCategory] = {
    **{_normalize(alias): category for alias, category in _ALIASES.items()},
    **{_normalize(category.value): category for category in MemberCategory},
    **{_normalize(category.name): category for category in MemberCategory},
}

DEFAULT_MEMBER_ORDER: tuple[str, ...] = tuple(category.label for category in MemberCategory)
