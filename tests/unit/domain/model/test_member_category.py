"""Tests for domain/model/enums.py."""

import pytest

from memberorder.domain.model.enums import DEFAULT_MEMBER_ORDER, MemberCategory, Severity


class TestMemberCategory:
    """Tests for MemberCategory variants and labels."""

    def test_eleven_categories(self) -> None:
        assert len(MemberCategory) == 11

    def test_default_order_follows_declaration(self) -> None:
        assert DEFAULT_MEMBER_ORDER == (
            "public const",
            "private const",
            "readonly field",
            "attributed field",
            "private field",
            "public field",
            "property",
            "event",
            "lifecycle method",
            "public method",
            "private method",
        )

    def test_label_is_value(self) -> None:
        assert MemberCategory.LIFECYCLE_METHOD.label == "lifecycle method"

    def test_severity_is_warning_only(self) -> None:
        assert list(Severity) == [Severity.WARNING]


class TestMemberCategoryParse:
    """Tests for MemberCategory.parse()."""

    @pytest.mark.parametrize(
        "name",
        ["public const", "PUBLIC_CONST", "PublicConst", "publicconst", "  Public Const "],
    )
    def test_spellings(self, name: str) -> None:
        """Label, enum name and CamelCase all resolve."""
        assert MemberCategory.parse(name) is MemberCategory.PUBLIC_CONST

    def test_legacy_serialize_field_alias(self) -> None:
        assert MemberCategory.parse("serialize field") is MemberCategory.ATTRIBUTED_FIELD

    def test_legacy_unity_method_alias(self) -> None:
        assert MemberCategory.parse("unity method") is MemberCategory.LIFECYCLE_METHOD

    def test_attributed_field_camel_case(self) -> None:
        assert MemberCategory.parse("AttributedField") is MemberCategory.ATTRIBUTED_FIELD

    def test_unknown_returns_none(self) -> None:
        assert MemberCategory.parse("constructor") is None

    def test_empty_returns_none(self) -> None:
        assert MemberCategory.parse("") is None
