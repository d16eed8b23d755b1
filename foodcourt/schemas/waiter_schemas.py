# foodcourt/schemas/waiter_schemas.py
from typing import Any, Optional

from pydantic import BaseModel, Field

from foodcourt.db.models.waiter import WaiterStatus


class WaiterCreate(BaseModel):
    name: Optional[str] = Field(None, examples=["Asha"])
    phone: Optional[str] = Field(None, examples=["9876543210"])
    # Qualquer valor é aceito; o que não for "engaged" vira "free"
    status: Any = Field(None, examples=["free"])


class WaiterLogin(BaseModel):
    phone: Optional[str] = Field(None, examples=["9876543210"])


class WaiterStatusUpdate(BaseModel):
    status: Any = Field(None, examples=["engaged"])


class Waiter(BaseModel):
    id: int
    name: str
    phone: Optional[str] = None
    status: WaiterStatus

    class Config:
        from_attributes = True
