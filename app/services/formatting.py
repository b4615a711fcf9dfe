"""
Human-readable formatting for catalog values.
"""
import re

# Searched, not anchored: any text containing "PT" matches, possibly with every group empty
DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def format_duration(code: str) -> str:
    """
    Convert an ISO-8601 style duration code (``PT#H#M#S``) to a clock string.

    Returns ``H:MM:SS`` when there are hours, ``M:SS`` otherwise and
    ``0:00`` when the code does not contain the expected grammar at all.
    Day components (``P1DT...``) are not part of the grammar.

    Examples:
        >>> format_duration("PT1H2M3S")
        '1:02:03'
        >>> format_duration("PT5M9S")
        '5:09'
        >>> format_duration("garbage")
        '0:00'
    """
    match = DURATION_PATTERN.search(code or "")
    if not match:
        return "0:00"

    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    seconds = int(match.group(3) or 0)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_count(raw: str) -> str:
    """Abbreviate a raw count string: 1234 -> 1.2K, 2500000 -> 2.5M."""
    try:
        n = int(str(raw).strip())
    except (TypeError, ValueError):
        return "0"

    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return str(n)
