"""Configuration exceptions."""

from memberorder.domain.exceptions.base import MemberOrderError


class ConfigurationError(MemberOrderError):
    """Configuration file is malformed or holds a value of the wrong type.

    Unknown or duplicate category names are NOT configuration errors:
    they are resolved by CanonicalOrder and only logged.

    Attributes:
        source: Where the configuration came from (file path or label)
        reason: Why the configuration was rejected
    """

    def __init__(self, source: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not source:
            raise ValueError("source must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration in {source}: {reason}")
