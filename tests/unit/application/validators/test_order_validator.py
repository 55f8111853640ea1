"""Tests for validators/order_validator.py."""

from itertools import permutations

from memberorder.application.validators.order_validator import OrderValidator
from memberorder.domain.model.canonical_order import TAIL_LABEL, CanonicalOrder
from memberorder.domain.model.enums import MemberCategory, Severity
from tests.factories import make_members

C = MemberCategory


def lines_for(count: int) -> list[str]:
    return [f"    member {index};" for index in range(count)]


def validate(*categories: MemberCategory, order: CanonicalOrder | None = None):
    validator = OrderValidator(order or CanonicalOrder.default())
    return validator.validate(make_members(*categories), lines_for(len(categories)))


class TestOrderValidator:
    """Tests for OrderValidator.validate()."""

    def test_empty(self) -> None:
        assert validate() == ()

    def test_single_member(self) -> None:
        assert validate(C.PRIVATE_METHOD) == ()

    def test_in_order(self) -> None:
        assert validate(C.PUBLIC_CONST, C.PRIVATE_FIELD, C.PROPERTY, C.PUBLIC_METHOD) == ()

    def test_equal_ranks_interchangeable(self) -> None:
        assert validate(C.PROPERTY, C.PROPERTY, C.EVENT, C.EVENT) == ()

    def test_one_violation(self) -> None:
        (violation,) = validate(C.PRIVATE_FIELD, C.PUBLIC_CONST)
        assert violation.member.name == "m1"
        assert violation.line == 1
        assert violation.expected_before == "private field"
        assert violation.severity is Severity.WARNING
        assert violation.message == (
            'Order violation: public const "m1" should appear before private field'
        )

    def test_span_covers_declaration_line(self) -> None:
        (violation,) = validate(C.PRIVATE_FIELD, C.PUBLIC_CONST)
        assert violation.span.start_column == 0
        assert violation.span.end_column == len("    member 1;")

    def test_threshold_never_shrinks(self) -> None:
        violations = validate(C.PUBLIC_METHOD, C.PRIVATE_FIELD, C.PROPERTY)
        assert [v.line for v in violations] == [1, 2]
        assert {v.expected_before for v in violations} == {"public method"}

    def test_threshold_raised_after_violation(self) -> None:
        violations = validate(C.PROPERTY, C.PRIVATE_FIELD, C.PUBLIC_METHOD, C.EVENT)
        assert [(v.line, v.expected_before) for v in violations] == [
            (1, "property"),
            (3, "public method"),
        ]

    def test_input_not_reordered(self) -> None:
        members = make_members(C.PRIVATE_METHOD, C.PUBLIC_CONST, C.PRIVATE_CONST)
        violations = OrderValidator(CanonicalOrder.default()).validate(members, lines_for(3))
        assert [v.member for v in violations] == [members[1], members[2]]

    def test_unlisted_member_sorts_last(self) -> None:
        order = CanonicalOrder.from_names(["private field", "public method"])
        assert validate(C.PRIVATE_FIELD, C.PUBLIC_METHOD, C.EVENT, order=order) == ()

    def test_members_after_unlisted(self) -> None:
        order = CanonicalOrder.from_names(["private field", "public method"])
        violations = validate(C.EVENT, C.PRIVATE_FIELD, C.PUBLIC_METHOD, order=order)
        assert [v.line for v in violations] == [1, 2]
        assert {v.expected_before for v in violations} == {TAIL_LABEL}

    def test_all_unlisted_never_violate(self) -> None:
        order = CanonicalOrder.from_names([])
        assert validate(C.PRIVATE_METHOD, C.PUBLIC_CONST, C.EVENT, order=order) == ()

    def test_expected_before_uses_label(self) -> None:
        order = CanonicalOrder.from_names(["Private_Field", "PUBLIC_CONST"])
        (violation,) = validate(C.PRIVATE_FIELD, C.PUBLIC_CONST, order=order)
        assert violation.expected_before == "private field"

    def test_expected_ranks_monotonic(self) -> None:
        order = CanonicalOrder.default()
        categories = (C.PUBLIC_CONST, C.ATTRIBUTED_FIELD, C.PROPERTY, C.PRIVATE_METHOD)
        for permutation in permutations(categories):
            violations = validate(*permutation, order=order)
            ranks = [order.rank_of(MemberCategory.parse(v.expected_before)) for v in violations]
            assert ranks == sorted(ranks)
            for violation in violations:
                assert order.rank_of(violation.member.category) < order.rank_of(
                    MemberCategory.parse(violation.expected_before)
                )

    def test_order_property(self) -> None:
        order = CanonicalOrder.default()
        assert OrderValidator(order).order is order
