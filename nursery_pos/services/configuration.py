# nursery_pos/services/configuration.py

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from nursery_pos.core.config import settings
from nursery_pos.core.errors import StorageError, ValidationError
from nursery_pos.models.shop_settings import SETTINGS_ROW_ID, ShopSettings

logger = logging.getLogger(__name__)

SETTINGS_FIELDS = ("shop_name", "address", "phone", "email", "gst_number")


class ConfigurationService:
    def __init__(self, db: Session):
        self.db = db

    def seed_settings(self) -> ShopSettings:
        """Insert the default settings row once; rename a legacy default."""
        shop = self.db.get(ShopSettings, SETTINGS_ROW_ID)

        try:
            if shop is None:
                shop = ShopSettings(
                    id=SETTINGS_ROW_ID,
                    shop_name=settings.DEFAULT_SHOP_NAME,
                )
                self.db.add(shop)
                self.db.commit()
                self.db.refresh(shop)
                logger.info("Seeded shop settings for %s", shop.shop_name)

            elif not shop.shop_name or shop.shop_name == settings.LEGACY_SHOP_NAME:
                shop.shop_name = settings.DEFAULT_SHOP_NAME
                self.db.commit()
                logger.info("Reset legacy shop name to %s", shop.shop_name)

        except SQLAlchemyError:
            self.db.rollback()
            raise StorageError("Unable to initialise shop settings")

        return shop

    def get_settings(self) -> ShopSettings:
        shop = self.db.get(ShopSettings, SETTINGS_ROW_ID)

        if shop is None or not shop.shop_name:
            shop = self.seed_settings()

        return shop

    def update_settings(self, fields: dict) -> ShopSettings:
        shop_name = (fields.get("shop_name") or "").strip()
        if not shop_name:
            raise ValidationError("Shop name is required")

        shop = self.get_settings()

        # All five fields are replaced together
        shop.shop_name = shop_name
        for field in SETTINGS_FIELDS[1:]:
            setattr(shop, field, fields.get(field) or "")

        try:
            self.db.commit()
            self.db.refresh(shop)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Unable to update shop settings")
            raise StorageError("Unable to update settings")

        logger.info("Updated shop settings for %s", shop.shop_name)
        return shop
