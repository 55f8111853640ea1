"""User configuration for member order checking.

Values are observed, never owned: the host (editor, CLI, config file)
decides where they come from.
"""

from __future__ import annotations

from dataclasses import dataclass

from memberorder.domain.model.canonical_order import CanonicalOrder
from memberorder.domain.model.enums import DEFAULT_MEMBER_ORDER


@dataclass(frozen=True, slots=True)
class OrderConfig:
    """Configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.
    Category names in member_order are not validated here:
    CanonicalOrder resolves unknown and duplicate names.

    Attributes:
        enabled: Analysis switch
        member_order: Category names in canonical order
        debounce_timeout: Delay in ms before re-analysis after an edit
    """

    enabled: bool = True
    member_order: tuple[str, ...] = DEFAULT_MEMBER_ORDER
    debounce_timeout: int = 300

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.enabled, bool):
            raise TypeError(f"enabled must be bool, got {type(self.enabled).__name__}")
        if not isinstance(self.member_order, tuple):
            raise TypeError(
                f"member_order must be tuple, got {type(self.member_order).__name__}"
            )
        if isinstance(self.debounce_timeout, bool) or not isinstance(self.debounce_timeout, int):
            raise TypeError(
                f"debounce_timeout must be int, got {type(self.debounce_timeout).__name__}"
            )
        if self.debounce_timeout < 0:
            raise ValueError(f"debounce_timeout must be >= 0, got {self.debounce_timeout}")

    def canonical_order(self) -> CanonicalOrder:
        """Build CanonicalOrder from member_order."""
        return CanonicalOrder.from_names(self.member_order)

    @property
    def debounce_seconds(self) -> float:
        """debounce_timeout converted to seconds."""
        return self.debounce_timeout / 1000
