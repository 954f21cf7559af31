from pydantic import BaseModel


class Analytics(BaseModel):
    sum: float = 0.0
    avg: float = 0.0
    count: int = 0
    median: float = 0.0
    percentile_90: float = 0.0
