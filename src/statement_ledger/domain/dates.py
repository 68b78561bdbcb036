import re

_LOCAL_DATE = re.compile(r"([0-9]+)/([0-9]+)/([0-9]+)")
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def normalize_date(value: str) -> str:
    """Convert a DD/MM/YY or DD/MM/YYYY date to YYYY-MM-DD.

    Anything that does not split into three ASCII-numeric parts is returned
    unchanged so the row can still be kept.
    """
    match = _LOCAL_DATE.fullmatch(value)
    if not match:
        return value
    day, month, year = match.groups()
    if len(year) == 2:
        year = "20" + year
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def is_normalized_date(value: str) -> bool:
    return _ISO_DATE.fullmatch(value) is not None
