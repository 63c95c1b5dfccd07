"""Parsing of pool member arguments."""

from fueleu.domain.entities import PoolMemberInput
from fueleu.utils.amount_parser import parse_amount


def parse_member(member_str: str) -> PoolMemberInput:
    """Parse a pool member given as ``SHIP=CB`` (e.g. ``R001=1000``).

    Raises:
        ValueError: If the string has no ship ID or an invalid balance
    """
    ship_id, sep, cb_str = member_str.partition("=")
    ship_id = ship_id.strip()
    if not sep or not ship_id:
        raise ValueError(f"Invalid pool member '{member_str}', expected SHIP=CB")
    return PoolMemberInput(ship_id=ship_id, cb_before=parse_amount(cb_str))
