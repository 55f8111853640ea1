"""Application services.

MemberOrderAnalyzer: document → violations pipeline
Debouncer: per-key delayed callbacks, restarted on every schedule
OrderSession: host-facing manager (enable switch, commands, sink publishing)
"""

from memberorder.application.services.analyzer import MemberOrderAnalyzer
from memberorder.application.services.debouncer import Debouncer
from memberorder.application.services.session import OrderSession

__all__ = [
    "Debouncer",
    "MemberOrderAnalyzer",
    "OrderSession",
]
