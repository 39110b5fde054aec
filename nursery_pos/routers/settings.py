# nursery_pos/routers/settings.py

from fastapi import APIRouter, Depends

from nursery_pos.core.deps import get_configuration
from nursery_pos.schemas.settings import (
    SettingsResponse,
    SettingsUpdate,
    SuccessResponse,
)
from nursery_pos.services.configuration import ConfigurationService

router = APIRouter(
    prefix="/settings",
    tags=["Settings"],
)


@router.get("", response_model=SettingsResponse)
def get_settings(
    configuration: ConfigurationService = Depends(get_configuration),
):
    return configuration.get_settings()


@router.post("", response_model=SuccessResponse)
def update_settings(
    settings_data: SettingsUpdate,
    configuration: ConfigurationService = Depends(get_configuration),
):
    configuration.update_settings(settings_data.model_dump())

    return {"success": True}
