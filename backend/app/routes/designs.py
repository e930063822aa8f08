"""
Design routes — sign design catalog.
Version: 1.0.0
"""
from fastapi import APIRouter, Depends, HTTPException

from app.container import get_design_catalog
from app.core.exceptions import DesignNotFoundError
from app.schemas.designs import Design, DesignListResponse
from app.services.design_catalog_service import DesignCatalogService

router = APIRouter(prefix="/designs", tags=["designs"])


@router.get("", response_model=DesignListResponse)
async def list_designs(catalog: DesignCatalogService = Depends(get_design_catalog)):
    source, designs = catalog.list_designs()
    return DesignListResponse(source=source, designs=designs)


@router.get("/{design_id}", response_model=Design)
async def get_design(design_id: str, catalog: DesignCatalogService = Depends(get_design_catalog)):
    try:
        return catalog.get_design(design_id)
    except DesignNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
