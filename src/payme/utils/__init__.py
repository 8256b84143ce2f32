"""Utility functions for payme."""

from payme.utils.amount_format import format_amount
from payme.utils.date_parser import parse_due_date

__all__ = ["format_amount", "parse_due_date"]
