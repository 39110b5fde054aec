# nursery_pos/services/catalog.py

import logging
from decimal import Decimal, InvalidOperation

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from nursery_pos.core.errors import NotFoundError, StorageError, ValidationError
from nursery_pos.models.products import Product

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self, search: str | None = None) -> list[Product]:
        products = (
            self.db.query(Product)
            .order_by(Product.name.asc(), Product.id.asc())
            .all()
        )

        needle = (search or "").strip().casefold()
        if not needle:
            return products

        return [
            product for product in products
            if needle in product.name.casefold()
            or needle in (product.category or "").casefold()
        ]

    def get_product(self, product_id: int) -> Product:
        product = self.db.get(Product, product_id)

        if product is None:
            raise NotFoundError("Product not found")

        return product

    def add_product(self, name: str, price, category: str | None = None) -> Product:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Product name is required")

        try:
            price = Decimal(str(price))
        except (InvalidOperation, ValueError):
            raise ValidationError("Price must be a number")

        if not price.is_finite() or price < 0:
            raise ValidationError("Price must be a non-negative number")

        product = Product(
            name=name,
            price=price,
            category=(category or "").strip() or None,
        )

        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Unable to add product %r", name)
            raise StorageError("Unable to add product")

        logger.info("Added product %s (%s)", product.id, product.name)
        return product

    def delete_product(self, product_id: int) -> None:
        # Sales keep their own item snapshots, so nothing cascades
        product = self.db.get(Product, product_id)

        if product is None:
            return

        try:
            self.db.delete(product)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Unable to delete product %s", product_id)
            raise StorageError("Unable to delete product")

        logger.info("Deleted product %s", product_id)
