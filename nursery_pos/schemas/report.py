# nursery_pos/schemas/report.py

from pydantic import BaseModel
from typing import List


class ChartBucket(BaseModel):
    label: str
    total: float


class ChartResponse(BaseModel):
    period: str
    buckets: List[ChartBucket]


class IncomeTotalsResponse(BaseModel):
    today: float
    weekly: float
    monthly: float
    yearly: float
    all: float
