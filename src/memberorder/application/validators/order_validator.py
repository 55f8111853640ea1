"""Member order validator.

Single forward pass over the members of one body range, never reordering
its input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from memberorder.domain.model.violation import Violation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from memberorder.domain.model.canonical_order import CanonicalOrder
    from memberorder.domain.model.member import Member


class OrderValidator:
    """Greedy order check against a canonical order.

    Keeps the highest rank seen so far. A member ranked below it is out of
    order; a member ranked above it raises it. The threshold never shrinks,
    so a lower-ranked member between two higher-ranked ones cannot clear an
    earlier violation. Equal ranks are interchangeable.

    Violation severity: WARNING.
    """

    def __init__(self, order: CanonicalOrder) -> None:
        """Initialize validator.

        Args:
            order: Canonical order to check against
        """
        self._order = order

    @property
    def order(self) -> CanonicalOrder:
        """Canonical order in use."""
        return self._order

    def validate(self, members: Sequence[Member], lines: list[str]) -> tuple[Violation, ...]:
        """Check members of one body range.

        Args:
            members: Members in declaration line order
            lines: Document lines, used for violation span width

        Returns:
            Tuple of violations (empty for fewer than two members)
        """
        if len(members) < 2:
            return ()

        violations: list[Violation] = []
        max_rank = -1

        for member in members:
            rank = self._order.rank_of(member.category)

            if rank < max_rank:
                violations.append(
                    Violation.out_of_order(
                        member,
                        expected_before=self._order.expected_before(max_rank),
                        lines=lines,
                    )
                )
            elif rank > max_rank:
                max_rank = rank

        return tuple(violations)
