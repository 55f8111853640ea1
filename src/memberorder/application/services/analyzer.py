"""Analyzer service: orchestrates locating, reassembling, classifying, validating.

    find_body_ranges → per range: reassemble → classify → validate → concatenate
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from memberorder.application.validators.order_validator import OrderValidator
from memberorder.domain.model.canonical_order import CanonicalOrder
from memberorder.domain.model.document import is_csharp_document
from memberorder.infrastructure.adapters.analysis_cache import AnalysisCache
from memberorder.infrastructure.scanning.body_locator import find_body_ranges
from memberorder.infrastructure.scanning.classifier import classify_declaration
from memberorder.infrastructure.scanning.reassembler import DeclarationReassembler

if TYPE_CHECKING:
    from memberorder.domain.model.body_range import BodyRange
    from memberorder.domain.model.member import Member
    from memberorder.domain.model.violation import Violation
    from memberorder.domain.ports.document import DocumentProtocol

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


class MemberOrderAnalyzer:
    """Runs the member order pipeline for documents.

    Each body range (nested ones included) is validated on its own, so the
    members of a nested type are seen by both the outer and the inner range.

    Methods:
        analyze(): Violations for a document, cached per (uri, version)
        analyze_text(): Violations for raw text, uncached
        collect_members(): Classified members of one body range
    """

    def __init__(
        self,
        order: CanonicalOrder | None = None,
        cache: AnalysisCache | None = None,
    ) -> None:
        """Initialize analyzer.

        Args:
            order: Canonical order. None = default order.
            cache: Result cache. None = fresh cache with default capacity.
        """
        self._validator = OrderValidator(order if order is not None else CanonicalOrder.default())
        self._cache = cache if cache is not None else AnalysisCache()

    @property
    def order(self) -> CanonicalOrder:
        """Canonical order in use."""
        return self._validator.order

    @property
    def cache(self) -> AnalysisCache:
        """Result cache."""
        return self._cache

    def analyze(self, document: DocumentProtocol) -> tuple[Violation, ...]:
        """Analyze a document.

        Non-C# documents yield no violations. Results are cached per
        (uri, version): unchanged documents return the identical tuple.

        Args:
            document: Document to analyze

        Returns:
            Violations of all body ranges, concatenated in range order
        """
        if not is_csharp_document(document):
            return ()

        cached = self._cache.get(document.uri, document.version)
        if cached is not None:
            logger.debug("Cache hit for %s@%d", document.uri, document.version)
            return cached

        violations = self.analyze_text(document.get_text())
        self._cache.put(document.uri, document.version, violations)
        logger.debug(
            "Analyzed %s@%d: %d violation(s)",
            document.uri,
            document.version,
            len(violations),
        )
        return violations

    def analyze_text(self, text: str) -> tuple[Violation, ...]:
        """Analyze raw source text without caching.

        Args:
            text: Full source text

        Returns:
            Violations of all body ranges, concatenated in range order
        """
        ranges = find_body_ranges(text)
        if not ranges:
            return ()

        lines = _LINE_BREAK.split(text)
        reassembler = DeclarationReassembler(lines)

        violations: list[Violation] = []
        for body in ranges:
            members = self.collect_members(reassembler, body)
            violations.extend(self._validator.validate(members, lines))

        return tuple(violations)

    def collect_members(
        self,
        reassembler: DeclarationReassembler,
        body: BodyRange,
    ) -> tuple[Member, ...]:
        """Classified members of one body range, in line order.

        Declarations that are not members are silently dropped.
        """
        members: list[Member] = []
        for declaration in reassembler.reassemble(body):
            member = classify_declaration(declaration)
            if member is not None:
                members.append(member)
        return tuple(members)

    def clear_cache(self) -> None:
        """Clear cached results."""
        self._cache.clear()
