"""
Type converters — tolerant numeric parsing for board column values.
Version: 1.0.0
"""
import json
import re
from typing import Any, Iterable, Optional

# Placeholder the board shows for empty numeric cells
_EMPTY_MARKERS = ("", "—", "-")

_UNIT_SUFFIX = re.compile(r"[^\d.,+\-]+$")


def to_float(value: Any) -> Optional[float]:
    """Convert value to float, returning None if invalid."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def to_int(value: Any) -> Optional[int]:
    """Convert value to int (truncating floats), returning None if invalid."""
    number = to_float(value)
    if number is None:
        return None
    return int(number)


def parse_number_text(text: Optional[str], symbols: Iterable[str] = ("€", "%")) -> Optional[float]:
    """
    Parse a formatted number such as "58,46 €", "25 %", "3,5 h" or "120cm".

    Currency and unit symbols are stripped, a decimal comma becomes a dot.
    Returns None for empty cells and anything still unparseable.
    """
    if text is None:
        return None
    cleaned = str(text).strip()
    if cleaned in _EMPTY_MARKERS:
        return None
    for symbol in symbols:
        cleaned = cleaned.replace(symbol, "")
    cleaned = cleaned.replace(" ", "").replace(" ", "")
    cleaned = _UNIT_SUFFIX.sub("", cleaned)
    if "," in cleaned and "." in cleaned:
        # 1.234,56 -> 1234.56
        cleaned = cleaned.replace(".", "").replace(",", ".")
    else:
        cleaned = cleaned.replace(",", ".")
    return to_float(cleaned)


def parse_raw_number(raw: Any) -> Optional[float]:
    """Parse a column's raw value: a number, or a JSON-encoded number/string."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        try:
            decoded = json.loads(raw)
        except ValueError:
            return parse_number_text(raw)
        if isinstance(decoded, bool):
            return None
        if isinstance(decoded, (int, float)):
            return float(decoded)
        if isinstance(decoded, str):
            return parse_number_text(decoded)
    return None


def parse_board_number(
    text: Optional[str],
    raw: Any = None,
    symbols: Iterable[str] = ("€", "%"),
) -> Optional[float]:
    """Formatted text first, then the raw structured value."""
    value = parse_number_text(text, symbols)
    if value is None:
        value = parse_raw_number(raw)
    return value
