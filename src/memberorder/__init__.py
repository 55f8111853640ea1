"""memberorder - class member ordering checker for C# source files."""

__version__ = "0.1.0"

from memberorder.application.services.analyzer import MemberOrderAnalyzer
from memberorder.application.services.session import OrderSession
from memberorder.domain.model.configuration import OrderConfig
from memberorder.domain.model.enums import MemberCategory

__all__ = [
    "MemberCategory",
    "MemberOrderAnalyzer",
    "OrderConfig",
    "OrderSession",
    "__version__",
]
