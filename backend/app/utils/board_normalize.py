"""
Board normalization — decode price board rows into price entries and designs.

A row is decoded exactly once: its columns are parsed tolerantly, it is
matched to a logical price key (item id first, display name second) and
turned into a tagged price entry of the kind that key expects. Rows that
carry design fields additionally yield a catalog Design.
Version: 1.0.0
"""
import json
import logging
from typing import Any, Dict, Optional

from app.core.constants import board as cols
from app.core.constants.board import HOURS_ROW_IDS, ITEM_ID_TO_KEY, ITEM_NAME_TO_KEY
from app.core.constants.catalog import DEFAULT_MOCKUP_URL
from app.core.constants.pricing import FALLBACK_PRICES, KIND_HOURS, KIND_PERCENT, KIND_PRICE
from app.schemas.designs import Design
from app.schemas.prices import LaborFactor, Percentage, PriceEntry, UnitPrice
from app.utils.type_converters import parse_board_number, parse_number_text, to_int

logger = logging.getLogger("board_normalize")


def _parse_asset_url(raw: Any) -> Optional[str]:
    """First file URL from a file column's JSON value."""
    if not raw:
        return None
    try:
        value = json.loads(raw) if isinstance(raw, str) else raw
    except ValueError:
        logger.warning("board asset column not parseable value=%s", raw)
        return None
    if not isinstance(value, dict):
        return None
    files = value.get("files") or []
    if files and isinstance(files[0], dict):
        return files[0].get("url")
    return None


def parse_board_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse the columns of one board row into plain fields.

    Missing or unparseable numbers are None; a bad cell never spoils the
    rest of the row.
    """
    row_id = str(row.get("id", ""))
    parsed: Dict[str, Any] = {
        "id": row_id,
        "name": (row.get("name") or "").strip(),
        "unit": "",
        "price": None,
        "percent": None,
        "hours": None,
        "pulse_id": None,
        "width": None,
        "height": None,
        "led_length": None,
        "elements": None,
        "asset_url": None,
    }

    for column in row.get("column_values") or []:
        column_id = column.get("id")
        text = column.get("text")
        raw = column.get("value")

        if column_id == cols.COLUMN_UNIT:
            parsed["unit"] = text or ""
        elif column_id == cols.COLUMN_PRICE:
            parsed["price"] = parse_board_number(text, raw)
        elif column_id == cols.COLUMN_PERCENT:
            parsed["percent"] = parse_board_number(text, raw)
        elif column_id == cols.COLUMN_HOURS:
            if row_id in HOURS_ROW_IDS:
                parsed["hours"] = parse_board_number(text, raw, symbols=("h",))
        elif column_id == cols.COLUMN_PULSE_ID:
            parsed["pulse_id"] = text or None
        elif column_id == cols.COLUMN_WIDTH:
            parsed["width"] = parse_number_text(text, symbols=("cm",))
        elif column_id == cols.COLUMN_HEIGHT:
            parsed["height"] = parse_number_text(text, symbols=("cm",))
        elif column_id == cols.COLUMN_LED_LENGTH:
            parsed["led_length"] = parse_number_text(text, symbols=("m",))
        elif column_id == cols.COLUMN_ELEMENTS:
            parsed["elements"] = to_int(parse_number_text(text, symbols=()))
        elif column_id == cols.COLUMN_ASSET:
            parsed["asset_url"] = _parse_asset_url(raw)

    return parsed


def resolve_price_key(row_id: str, name: str) -> Optional[str]:
    """Logical key for a row: id table is authoritative, name table is the fallback."""
    key = ITEM_ID_TO_KEY.get(row_id)
    if key:
        return key
    return ITEM_NAME_TO_KEY.get(name)


def to_price_entry(key: str, parsed: Dict[str, Any]) -> Optional[PriceEntry]:
    """
    Build the entry of the kind ``key`` expects.

    Returns None when the row lacks the field for that kind, so the
    previous value stays in place.
    """
    fallback = FALLBACK_PRICES.get(key)
    if fallback is not None:
        kind = fallback[0]
    elif parsed.get("percent") is not None:
        kind = KIND_PERCENT
    elif parsed.get("hours") is not None:
        kind = KIND_HOURS
    else:
        kind = KIND_PRICE

    unit = parsed.get("unit") or (fallback[2] if fallback else "")
    source_id = parsed.get("id")

    if kind == KIND_PERCENT:
        if parsed.get("percent") is None:
            return None
        return Percentage(percent=parsed["percent"], unit=unit, source_id=source_id)
    if kind == KIND_HOURS:
        if parsed.get("hours") is None:
            return None
        return LaborFactor(hours=parsed["hours"], unit=unit, source_id=source_id)
    if parsed.get("price") is None:
        return None
    return UnitPrice(price=parsed["price"], unit=unit, source_id=source_id)


def has_design_fields(parsed: Dict[str, Any]) -> bool:
    return any(
        parsed.get(field)
        for field in ("width", "height", "led_length", "elements", "asset_url")
    )


def to_design(parsed: Dict[str, Any]) -> Optional[Design]:
    """Catalog design from a design-shaped row, or None if its reference size is unusable."""
    width = parsed.get("width") or 0
    height = parsed.get("height") or 0
    if width <= 0 or height <= 0:
        logger.info(
            "board design skipped id=%s reason=non-positive reference size width=%s height=%s",
            parsed.get("id"), width, height,
        )
        return None

    asset_url = parsed.get("asset_url")
    return Design(
        id=parsed["id"],
        name=parsed.get("name") or parsed["id"],
        original_width=width,
        original_height=height,
        led_length=max(parsed.get("led_length") or 0, 0),
        elements=max(parsed.get("elements") or 0, 0),
        logo_svg=asset_url,
        mockup_url=asset_url or DEFAULT_MOCKUP_URL,
        description=f"Design from price board: {parsed.get('name') or parsed['id']}",
    )
