import math
from typing import Sequence


def percentile_cont(values: Sequence[float], fraction: float) -> float:
    """
    Percentil continuo (interpolación lineal), igual que PERCENTILE_CONT
    de PostgreSQL. `values` debe venir ordenado de menor a mayor.
    Devuelve 0.0 si no hay valores.
    """
    if not 0 <= fraction <= 1:
        raise ValueError(f"fraction must be between 0 and 1, got {fraction}")
    if not values:
        return 0.0

    rank = fraction * (len(values) - 1)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    low_value = float(values[lower])
    return low_value + (rank - lower) * (float(values[upper]) - low_value)
