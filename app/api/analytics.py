from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_item_service
from app.api.params import blank_to_none, parse_date_param
from app.ports.usecases import ItemUseCases
from app.schemas.analytics import Analytics

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("", response_model=Analytics)
@router.get("/", response_model=Analytics)
def get_analytics(
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = Query(None),
    service: ItemUseCases = Depends(get_item_service),
):
    """Suma, promedio, conteo, mediana y percentil 90 de los montos en [from, to]."""
    from_, to = blank_to_none(from_), blank_to_none(to)
    if from_ is None or to is None:
        raise HTTPException(status_code=400, detail="Both 'from' and 'to' parameters are required")
    return service.get_analytics(parse_date_param(from_, "from"), parse_date_param(to, "to"))
