"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def _normalize_separators(amount_str: str) -> str:
    """Turn grouped numbers into plain decimal notation.

    The rightmost separator is the decimal mark when both "," and "." appear
    ("1.234,56" and "1,234.56"). A lone separator groups thousands only in
    well formed groups such as "1.200.000" or "250,000"; "0.125" and "12,5"
    are decimals.
    """
    if "," in amount_str and "." in amount_str:
        decimal_mark = "," if amount_str.rfind(",") > amount_str.rfind(".") else "."
        group_mark = "." if decimal_mark == "," else ","
        return amount_str.replace(group_mark, "").replace(decimal_mark, ".")

    for mark in (",", "."):
        if mark not in amount_str:
            continue
        if re.fullmatch(rf"[1-9]\d{{0,2}}(?:{re.escape(mark)}\d{{3}})+", amount_str):
            return amount_str.replace(mark, "")
        return amount_str.replace(mark, ".")

    return amount_str


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56" and "1.234,56"
    - "1.200.000" (thousands groups only)
    - "-50"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    is_negative = amount_str.startswith("-")
    if is_negative:
        amount_str = amount_str[1:]

    # Remove currency symbols and spaces
    amount_str = re.sub(r"[$€£¥\s]", "", amount_str)
    amount_str = _normalize_separators(amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount
