"""Domain exceptions."""

from memberorder.domain.exceptions.base import MemberOrderError
from memberorder.domain.exceptions.configuration import ConfigurationError
from memberorder.domain.exceptions.document import DocumentError

__all__ = [
    "MemberOrderError",
    "ConfigurationError",
    "DocumentError",
]
