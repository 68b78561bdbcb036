import re

# Applied in order. Later whitespace passes tidy the gaps left by removals.
_REMOVAL_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Card references
    re.compile(r"N\.carta:?\s*\*+\d+", re.IGNORECASE),
    re.compile(r"carta\s+\d+", re.IGNORECASE),
    # Embedded dates and times
    re.compile(r"\bdata:?\s*(?:\d{2}/\d{2}/\d{2,4})?", re.IGNORECASE),
    re.compile(r"\bora:?\s*\d{2}[:.]\d{2}", re.IGNORECASE),
    re.compile(r"\d{2}[:.]\d{2}"),
    # Payment channel boilerplate
    re.compile(r"apple\s+pay", re.IGNORECASE),
    re.compile(r"google\s+pay", re.IGNORECASE),
    re.compile(r"pagamento\s+pos", re.IGNORECASE),
    re.compile(r"addebito\s+carta", re.IGNORECASE),
    re.compile(r"bonifico", re.IGNORECASE),
    re.compile(r"pagamento", re.IGNORECASE),
    re.compile(r"prelievo", re.IGNORECASE),
    # Opaque references: uppercase/digit codes that carry at least one digit
    re.compile(r"\b(?=[A-Z]*\d)[A-Z0-9]{6,}\b"),
    re.compile(r"\brif\.\s*\w+", re.IGNORECASE),
    re.compile(r"\bid\s*\w+", re.IGNORECASE),
)

_WHITESPACE = re.compile(r"\s+")
_LIST_PUNCTUATION = re.compile(r"\s*[,;]\s*")
_DASH_PUNCTUATION = re.compile(r"\s*[-:]\s*")


def clean_description(description: str | None) -> str:
    """Strip card numbers, timestamps, payment boilerplate and reference codes."""
    if not description:
        return ""

    cleaned = description
    for pattern in _REMOVAL_PATTERNS:
        cleaned = pattern.sub("", cleaned)

    cleaned = _WHITESPACE.sub(" ", cleaned)
    cleaned = _LIST_PUNCTUATION.sub(", ", cleaned)
    cleaned = _DASH_PUNCTUATION.sub(" ", cleaned)
    return cleaned.strip()
