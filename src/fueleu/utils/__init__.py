"""Utility functions for fueleu."""

from fueleu.utils.amount_parser import parse_amount
from fueleu.utils.member_parser import parse_member

__all__ = ["parse_amount", "parse_member"]
