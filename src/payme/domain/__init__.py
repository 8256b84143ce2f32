"""Domain layer for payme."""

from payme.domain.errors import DomainError, ValidationError
from payme.domain.link_builder import LinkBuilder, is_iban_valid

__all__ = [
    "LinkBuilder",
    "is_iban_valid",
    "DomainError",
    "ValidationError",
]
