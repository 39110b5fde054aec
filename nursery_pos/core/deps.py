# nursery_pos/core/deps.py

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from nursery_pos.database import get_db
from nursery_pos.services.billing import Cart
from nursery_pos.services.catalog import CatalogService
from nursery_pos.services.configuration import ConfigurationService
from nursery_pos.services.ledger import SalesLedger


def get_catalog(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


def get_configuration(db: Session = Depends(get_db)) -> ConfigurationService:
    return ConfigurationService(db)


def get_ledger(db: Session = Depends(get_db)) -> SalesLedger:
    return SalesLedger(db)


def get_cart(request: Request) -> Cart:
    # One till, one cart for the lifetime of the process
    return request.app.state.cart
