from datetime import datetime
from typing import Optional

from fastapi import HTTPException

from app.utils.dates import parse_rfc3339


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """`?from=` cuenta como parámetro ausente."""
    return value or None


def parse_date_param(value: Optional[str], name: str) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return parse_rfc3339(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid '{name}' date format")
