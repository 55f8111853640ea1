"""Member order validators."""

from memberorder.application.validators.order_validator import OrderValidator

__all__ = ["OrderValidator"]
