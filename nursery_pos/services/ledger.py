# nursery_pos/services/ledger.py

import json
import logging
from datetime import date, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from nursery_pos.core.errors import NotFoundError, StorageError, ValidationError
from nursery_pos.models.sales import Sale
from nursery_pos.schemas.sale import SaleCreate, SaleItem

logger = logging.getLogger(__name__)


def _snapshot(item: SaleItem) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "price": float(item.price),
        "quantity": item.quantity,
        "discount": float(item.discount),
        "total": float(item.total),
    }


class SalesLedger:
    """Append-only store of committed bills."""

    def __init__(self, db: Session):
        self.db = db

    def record_sale(self, sale_data: SaleCreate) -> Sale:
        if not sale_data.items:
            raise ValidationError("Sale must contain items")
        if sale_data.final_amount < 0:
            raise ValidationError("Total cannot be negative")

        sale = Sale(
            customer_name=sale_data.customer_name,
            customer_phone=sale_data.customer_phone,
            customer_address=sale_data.customer_address,
            total_amount=sale_data.total_amount,
            discount=sale_data.discount,
            final_amount=sale_data.final_amount,
            items=json.dumps([_snapshot(item) for item in sale_data.items]),
            manual_override=sale_data.manual_override,
        )

        try:
            self.db.add(sale)
            self.db.commit()
            self.db.refresh(sale)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Unable to record sale")
            raise StorageError("Unable to complete sale")

        logger.info("Recorded sale %s for %s", sale.id, sale.final_amount)
        return sale

    def _newest_first(self, query):
        return query.order_by(Sale.created_at.desc(), Sale.id.desc())

    def list_sales(self) -> list[Sale]:
        return self._newest_first(self.db.query(Sale)).all()

    def get_sale(self, sale_id: int) -> Sale:
        sale = self.db.get(Sale, sale_id)

        if sale is None:
            raise NotFoundError("Sale not found")

        return sale

    def filter_sales(
        self,
        query: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Sale]:
        # Matched in Python: casefold covers non-ASCII names and
        # "%" or "_" in the query are plain characters
        needle = (query or "").strip().casefold()
        start = datetime.combine(start_date, datetime.min.time()) if start_date else None
        end = datetime.combine(end_date, datetime.max.time()) if end_date else None

        def matches(sale: Sale) -> bool:
            if needle and not any(
                needle in (field or "").casefold()
                for field in (sale.customer_name, sale.customer_phone)
            ):
                return False

            # Both bounds are inclusive whole days
            if start and sale.created_at < start:
                return False
            if end and sale.created_at > end:
                return False

            return True

        return [sale for sale in self.list_sales() if matches(sale)]
