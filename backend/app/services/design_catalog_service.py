"""
Design catalog service — board designs with a static fallback list.
Version: 1.0.0
"""
import logging
from typing import List, Tuple

from app.core.constants.catalog import STATIC_DESIGNS
from app.core.exceptions import DesignNotFoundError
from app.schemas.designs import Design
from app.services.price_table_service import PriceTableService

STATIC_CATALOG: List[Design] = [Design(**design) for design in STATIC_DESIGNS]


class DesignCatalogService:
    def __init__(self, price_table: PriceTableService) -> None:
        self._price_table = price_table
        self._logger = logging.getLogger("design_catalog")

    def list_designs(self) -> Tuple[str, List[Design]]:
        """Designs from the board when it delivered any, else the static list."""
        board_designs = self._price_table.designs()
        if board_designs:
            return "board", board_designs
        return "static", list(STATIC_CATALOG)

    def get_design(self, design_id: str) -> Design:
        for design in self._price_table.designs():
            if design.id == design_id:
                return design
        for design in STATIC_CATALOG:
            if design.id == design_id:
                return design
        self._logger.info("design not found id=%s", design_id)
        raise DesignNotFoundError(f"Design '{design_id}' not found")
