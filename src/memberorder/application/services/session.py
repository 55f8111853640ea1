"""Order session: host-facing manager around the analyzer.

Owns the enable switch, debounced re-analysis after edits, the two user
commands (validate current file, toggle) and publishing to the sink.
The host forwards its document events:

    opened / changed / saved / focused → validate_document()
    closed                             → close_document()
    configuration changed              → update_configuration()
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from memberorder.application.services.analyzer import MemberOrderAnalyzer
from memberorder.application.services.debouncer import Debouncer
from memberorder.domain.model.configuration import OrderConfig
from memberorder.domain.model.document import is_csharp_document

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from memberorder.application.services.debouncer import TimerProtocol
    from memberorder.domain.model.violation import Violation
    from memberorder.domain.ports.diagnostic_sink import DiagnosticSinkProtocol
    from memberorder.domain.ports.document import DocumentProtocol

logger = logging.getLogger(__name__)

STATUS_ENABLED = "memberorder enabled"
STATUS_DISABLED = "memberorder disabled"


class OrderSession:
    """Analysis session for all documents open in a host.

    Documents are independent: an exception while analyzing one document is
    logged and published as "no violations" for that document only.

    Debounced analyses run on timer threads. Publishing, the enable switch,
    configuration and the analyzer cache are guarded by one reentrant lock,
    and a publish that starts after the session was disabled is dropped.
    """

    def __init__(
        self,
        sink: DiagnosticSinkProtocol,
        config: OrderConfig | None = None,
        *,
        open_documents: Callable[[], Iterable[DocumentProtocol]] = tuple,
        timer_factory: Callable[[float, Callable[[], None]], TimerProtocol] | None = None,
    ) -> None:
        """Initialize session.

        Args:
            sink: Where violations are published
            config: Initial configuration. None = defaults.
            open_documents: Returns the documents currently open in the host
            timer_factory: Debounce timer factory. None = threading.Timer.
        """
        self._sink = sink
        self._open_documents = open_documents
        self._debouncer = Debouncer(timer_factory)
        self._config = config if config is not None else OrderConfig()
        self._enabled = self._config.enabled
        self._analyzer = MemberOrderAnalyzer(self._config.canonical_order())
        self._lock = threading.RLock()

    @property
    def enabled(self) -> bool:
        """Analysis switch."""
        return self._enabled

    @property
    def config(self) -> OrderConfig:
        """Configuration in use."""
        return self._config

    @property
    def analyzer(self) -> MemberOrderAnalyzer:
        """Analyzer built from the current configuration."""
        return self._analyzer

    @property
    def debouncer(self) -> Debouncer:
        """Debouncer for edit-triggered analysis."""
        return self._debouncer

    def validate_document(self, document: DocumentProtocol) -> None:
        """Schedule a debounced analysis of a document.

        A new call for the same document restarts the delay.
        Ignored when disabled or for non-C# documents.
        """
        if not self._enabled or not is_csharp_document(document):
            return
        self._debouncer.schedule(
            document.uri,
            self._config.debounce_seconds,
            lambda: self._publish(document),
        )

    def validate_current_file(self, document: DocumentProtocol | None) -> tuple[Violation, ...]:
        """Analyze the active document now, bypassing the debounce delay.

        Args:
            document: Active document, None if no editor is active

        Returns:
            Published violations (empty if nothing was analyzed)
        """
        if document is None or not self._enabled or not is_csharp_document(document):
            return ()
        self._debouncer.cancel(document.uri)
        return self._publish(document)

    def validate_all_documents(self) -> None:
        """Analyze every open C# document now. No-op when disabled."""
        if not self._enabled:
            return
        for document in self._open_documents():
            if is_csharp_document(document):
                self._publish(document)

    def toggle_enabled(self) -> str:
        """Flip the enable switch.

        Disabling cancels pending analyses and clears everything published.
        Enabling analyzes all open documents.

        Returns:
            Status message for the user
        """
        with self._lock:
            self._enabled = not self._enabled
            if self._enabled:
                logger.info("Member order checking enabled")
                self.validate_all_documents()
                return STATUS_ENABLED

            logger.info("Member order checking disabled")
            self._debouncer.cancel_all()
            self._sink.clear()
            return STATUS_DISABLED

    def update_configuration(self, config: OrderConfig) -> None:
        """Apply a new configuration.

        Rebuilds the analyzer (dropping cached results), then clears the
        sink when disabled or re-analyzes open documents when enabled.
        """
        with self._lock:
            self._config = config
            self._enabled = config.enabled
            self._analyzer = MemberOrderAnalyzer(config.canonical_order())

            if not self._enabled:
                self._debouncer.cancel_all()
                self._sink.clear()
                return
            self.validate_all_documents()

    def close_document(self, document: DocumentProtocol) -> None:
        """Forget a closed document: cancel pending analysis, drop its entries."""
        self._debouncer.cancel(document.uri)
        with self._lock:
            self._analyzer.cache.invalidate(document.uri)
            self._sink.delete(document.uri)

    def dispose(self) -> None:
        """Cancel all pending analyses and clear the sink."""
        self._debouncer.cancel_all()
        with self._lock:
            self._sink.clear()

    def _publish(self, document: DocumentProtocol) -> tuple[Violation, ...]:
        """Analyze one document and publish the result.

        Per-document fault boundary: any exception is logged and the
        document is published with no violations. Nothing is published
        once the session is disabled.
        """
        with self._lock:
            if not self._enabled:
                logger.debug("Dropping analysis of %s: session disabled", document.uri)
                return ()
            try:
                violations = self._analyzer.analyze(document)
            except Exception:
                logger.exception("Member order analysis failed for %s", document.uri)
                violations = ()
            self._sink.set(document.uri, violations)
            return violations
