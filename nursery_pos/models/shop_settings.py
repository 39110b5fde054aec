# nursery_pos/models/shop_settings.py

from sqlalchemy import CheckConstraint, Column, Integer, String

from nursery_pos.database import Base

SETTINGS_ROW_ID = 1


class ShopSettings(Base):
    __tablename__ = "settings"

    # Singleton: the check constraint allows exactly one row
    id = Column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    shop_name = Column(String, nullable=False)
    address = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    gst_number = Column(String, nullable=True)

    __table_args__ = (
        CheckConstraint(f"id = {SETTINGS_ROW_ID}", name="ck_settings_singleton"),
    )
