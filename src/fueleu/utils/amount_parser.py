"""Amount parsing utilities."""

import math
import re


def parse_amount(amount_str: str) -> float:
    """Parse a gCO2eq amount string into a float.

    Handles various formats:
    - "1234.5"
    - "-1234.5"
    - "1,234.5"
    - "1 234.5"
    - "(1234.5)" (negative in parentheses)
    - "1.5e6"
    - "400 gCO2eq"

    Args:
        amount_str: Amount string

    Returns:
        Float amount

    Raises:
        ValueError: If amount string cannot be parsed or is not finite
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove unit suffix
    amount_str = re.sub(r"\s*gco2e(q)?$", "", amount_str, flags=re.IGNORECASE)

    # Remove thousands separators
    amount_str = amount_str.replace(",", "").replace(" ", "")

    try:
        amount = float(amount_str)
    except ValueError as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    if not math.isfinite(amount):
        raise ValueError(f"Amount must be finite, got '{amount_str}'")

    return -amount if is_negative else amount
