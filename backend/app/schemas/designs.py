"""
Design schemas — immutable sign templates.
Version: 1.0.0
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Design(BaseModel):
    """Reference template a sign is scaled from. Never mutated after load."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    original_width: float = Field(..., gt=0, description="Reference width in cm")
    original_height: float = Field(..., gt=0, description="Reference height in cm")
    led_length: float = Field(..., ge=0, description="Reference LED length in m")
    elements: int = Field(0, ge=0)
    mockup_url: Optional[str] = None
    logo_svg: Optional[str] = None
    description: str = ""


class DesignListResponse(BaseModel):
    source: str  # 'board' or 'static'
    designs: List[Design]
