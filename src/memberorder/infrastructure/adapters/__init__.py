"""Adapters: cache, sink, configuration and document loading."""

from memberorder.infrastructure.adapters.analysis_cache import AnalysisCache
from memberorder.infrastructure.adapters.config_loader import find_config, load_config
from memberorder.infrastructure.adapters.diagnostic_collection import DiagnosticCollection
from memberorder.infrastructure.adapters.file_document import load_document

__all__ = [
    "AnalysisCache",
    "DiagnosticCollection",
    "find_config",
    "load_config",
    "load_document",
]
