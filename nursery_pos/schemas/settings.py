# nursery_pos/schemas/settings.py

from pydantic import BaseModel, Field


class SettingsUpdate(BaseModel):
    shop_name: str = Field(..., min_length=1)
    address: str = ""
    phone: str = ""
    email: str = ""
    gst_number: str = ""


class SettingsResponse(BaseModel):
    shop_name: str
    address: str | None
    phone: str | None
    email: str | None
    gst_number: str | None

    class Config:
        from_attributes = True


class SuccessResponse(BaseModel):
    success: bool = True
