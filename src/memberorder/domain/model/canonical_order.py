"""Canonical member order."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from memberorder.domain.model.enums import DEFAULT_MEMBER_ORDER, MemberCategory

logger = logging.getLogger(__name__)

TAIL_LABEL = "unlisted members"


@dataclass(frozen=True, slots=True)
class CanonicalOrder:
    """Category → rank mapping built from a configured name sequence.

    Rank is the index of the FIRST occurrence of a category in entries.
    Categories absent from entries rank at tail_rank and sort last.
    The inverse mapping is computed once, not scanned per violation.

    Attributes:
        entries: Raw configured names, in order
        ranks: Category → rank (only categories present in entries)
        categories_by_rank: Rank → category (inverse of ranks)
    """

    entries: tuple[str, ...]
    ranks: Mapping[MemberCategory, int] = field(default_factory=dict)
    categories_by_rank: Mapping[int, MemberCategory] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for category, rank in self.ranks.items():
            if not 0 <= rank < len(self.entries):
                raise ValueError(f"rank of {category.label} out of range: {rank}")
            if self.categories_by_rank.get(rank) is not category:
                raise ValueError(f"categories_by_rank is not the inverse of ranks at {rank}")
        if len(self.categories_by_rank) != len(self.ranks):
            raise ValueError("categories_by_rank must have the same size as ranks")

    @classmethod
    def from_names(cls, names: Iterable[str]) -> CanonicalOrder:
        """Build order from configured category names.

        Duplicates: first occurrence wins, later ones are logged and ignored.
        Unknown names: logged, keep their slot so later indices are stable.

        Args:
            names: Category names as written in configuration

        Returns:
            CanonicalOrder with ranks and inverse mapping
        """
        entries = tuple(names)
        ranks: dict[MemberCategory, int] = {}

        for index, name in enumerate(entries):
            category = MemberCategory.parse(name)
            if category is None:
                logger.warning("Unknown member category %r at position %d ignored", name, index)
                continue
            if category in ranks:
                logger.warning(
                    "Duplicate member category %r at position %d ignored (first at %d)",
                    name,
                    index,
                    ranks[category],
                )
                continue
            ranks[category] = index

        inverse = {rank: category for category, rank in ranks.items()}
        return cls(
            entries=entries,
            ranks=MappingProxyType(ranks),
            categories_by_rank=MappingProxyType(inverse),
        )

    @classmethod
    def default(cls) -> CanonicalOrder:
        """Order of MemberCategory declaration."""
        return cls.from_names(DEFAULT_MEMBER_ORDER)

    @property
    def tail_rank(self) -> int:
        """Rank of categories missing from entries."""
        return len(self.entries)

    def rank_of(self, category: MemberCategory) -> int:
        """Rank of category, tail_rank if not configured."""
        return self.ranks.get(category, self.tail_rank)

    def expected_before(self, rank: int) -> str:
        """Name of whatever holds rank, for violation messages.

        Category label if a category holds it, otherwise the raw configured
        entry at that index, otherwise TAIL_LABEL.
        """
        category = self.categories_by_rank.get(rank)
        if category is not None:
            return category.label
        if 0 <= rank < len(self.entries):
            return self.entries[rank]
        return TAIL_LABEL

    def __iter__(self) -> Iterator[MemberCategory]:
        """Iterate configured categories in rank order."""
        return iter(self.categories_by_rank[rank] for rank in sorted(self.categories_by_rank))
