import re

CURRENCY_SYMBOL = "€"

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_amount(raw: str | None) -> float | None:
    """Parse an amount cell into a signed float.

    Every comma is treated as a thousands separator and dropped, so the
    Italian decimal comma is not honoured: "-45,00" parses as -4500.0.
    Only the leading numeric part is read. Returns None when there is none.
    """
    if not raw:
        return None
    cleaned = raw.replace(CURRENCY_SYMBOL, "", 1).replace(",", "").strip()
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return None
    return float(match.group(0))
