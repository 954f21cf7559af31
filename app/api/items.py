from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from app.api.deps import get_item_service
from app.api.params import blank_to_none, parse_date_param
from app.ports.usecases import ItemUseCases
from app.schemas.item import ItemCreate, ItemRead

router = APIRouter(prefix="/api/items", tags=["items"])


@router.post("", response_model=ItemRead, status_code=201)
@router.post("/", response_model=ItemRead, status_code=201)
def create_item(
    item_data: ItemCreate,
    service: ItemUseCases = Depends(get_item_service),
):
    return service.create_item(item_data.to_item())


@router.get("", response_model=List[ItemRead])
@router.get("/", response_model=List[ItemRead])
def list_items(
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = Query(None),
    service: ItemUseCases = Depends(get_item_service),
):
    """Lista los items por fecha descendente; `from` y `to` (RFC3339) son inclusivos."""
    from_date = parse_date_param(blank_to_none(from_), "from")
    to_date = parse_date_param(blank_to_none(to), "to")
    return service.get_items(from_date, to_date)


@router.get("/{item_id}", response_model=ItemRead)
def get_item(
    item_id: int,
    service: ItemUseCases = Depends(get_item_service),
):
    return service.get_item(item_id)


@router.put("/{item_id}", response_model=ItemRead)
def update_item(
    item_id: int,
    item_data: ItemCreate,
    service: ItemUseCases = Depends(get_item_service),
):
    return service.update_item(item_data.to_item(item_id=item_id))


@router.delete("/{item_id}", status_code=204)
def delete_item(
    item_id: int,
    service: ItemUseCases = Depends(get_item_service),
):
    service.delete_item(item_id)
    return Response(status_code=204)
