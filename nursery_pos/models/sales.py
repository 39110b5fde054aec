# nursery_pos/models/sales.py

import json
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, Text
from sqlalchemy.sql import expression, func

from nursery_pos.database import Base


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)

    customer_name = Column(String, nullable=True)
    customer_phone = Column(String, nullable=True)
    customer_address = Column(String, nullable=True)

    total_amount = Column(Numeric(10, 2), nullable=False)
    discount = Column(Numeric(10, 2), nullable=False, default=0)
    final_amount = Column(Numeric(10, 2), nullable=False)

    # JSON snapshot of the line items at commit time
    items = Column(Text, nullable=False, default="[]")

    manual_override = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )

    created_at = Column(
        DateTime,
        default=datetime.now,
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    @property
    def line_items(self) -> list[dict]:
        return json.loads(self.items or "[]")
