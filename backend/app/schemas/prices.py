"""
Price table schemas — tagged price entries, board rows, sync status.

Price entries are decoded once, when a board row is ingested, into one
of three kinds. Read sites never re-interpret raw row fields.
Version: 1.0.0
"""
from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class UnitPrice(BaseModel):
    """Flat amount per unit (m², m, piece, km, hour) or a flat fee."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["price"] = "price"
    price: float
    unit: str = ""
    source_id: Optional[str] = None


class Percentage(BaseModel):
    """Surcharge rate in percent (25 means 25 %)."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["percent"] = "percent"
    percent: float
    unit: str = "%"
    source_id: Optional[str] = None

    @property
    def rate(self) -> float:
        return self.percent / 100


class LaborFactor(BaseModel):
    """Labor time in hours per m² or per element."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["hours"] = "hours"
    hours: float
    unit: str = "h"
    source_id: Optional[str] = None


PriceEntry = Annotated[
    Union[UnitPrice, Percentage, LaborFactor],
    Field(discriminator="kind"),
]


class BoardColumn(BaseModel):
    id: str
    text: Optional[str] = None
    value: Optional[Any] = None


class BoardRow(BaseModel):
    """One item on the price board, as returned by the board API."""
    id: str
    name: str = ""
    column_values: List[BoardColumn] = []


class PriceTableStatus(BaseModel):
    is_connected: bool
    has_token: bool
    last_sync: Optional[datetime] = None
    last_attempt: Optional[datetime] = None
    last_error: Optional[str] = None
    error_count: int = 0
    item_count: int = 0
    design_count: int = 0
    auto_sync_active: bool = False


class PriceTableResponse(BaseModel):
    entries: Dict[str, PriceEntry]
    status: PriceTableStatus


class PriceRefreshResponse(BaseModel):
    refreshed: bool
    status: PriceTableStatus
