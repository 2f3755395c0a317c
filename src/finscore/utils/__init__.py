"""Utility functions for finscore."""

from finscore.utils.date_parser import get_date_range, parse_date
from finscore.utils.amount_parser import parse_amount

__all__ = ["get_date_range", "parse_date", "parse_amount"]
