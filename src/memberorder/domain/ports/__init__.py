"""Ports: contracts for collaborators outside the core."""

from memberorder.domain.ports.diagnostic_sink import DiagnosticSinkProtocol
from memberorder.domain.ports.document import DocumentProtocol
from memberorder.domain.ports.reporter import ReporterProtocol

__all__ = [
    "DiagnosticSinkProtocol",
    "DocumentProtocol",
    "ReporterProtocol",
]
