# nursery_pos/models/products.py

from sqlalchemy import CheckConstraint, Column, Index, Integer, String, Numeric

from nursery_pos.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String, nullable=True)

    __table_args__ = (
        Index("ix_products_name", "name"),
        CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
    )
