import re
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Hora actual en UTC, naive (así se guardan todas las fechas)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convierte un datetime con zona a UTC naive. Los naive se asumen UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


RFC3339_PATTERN = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)


def parse_rfc3339(value: str) -> datetime:
    """
    Interpreta una fecha RFC3339 completa: fecha, hora y zona obligatoria
    (`2024-01-10T00:00:00Z`, `2024-01-10T03:00:00.5+03:00`).

    Raises:
        ValueError: si el texto no es RFC3339 o la fecha no existe
    """
    match = RFC3339_PATTERN.fullmatch(value)
    if not match:
        raise ValueError(f"not an RFC3339 timestamp: {value!r}")

    day, clock, fraction, offset = match.groups()
    # fromisoformat solo acepta 3 o 6 decimales en Python 3.10
    micro = f".{(fraction + '000000')[:6]}" if fraction else ""
    if offset in ("Z", "z"):
        offset = "+00:00"
    return datetime.fromisoformat(f"{day}T{clock}{micro}{offset}")
