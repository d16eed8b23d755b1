# foodcourt/schemas/item_schemas.py
from typing import Optional

from pydantic import BaseModel, Field


class ItemBase(BaseModel):
    name: str = Field(..., examples=["Masala Dosa"])
    price_cents: int = Field(..., ge=0, examples=[15000])


class ItemCreate(BaseModel):
    # Validados no endpoint para devolver a mensagem de erro do contrato
    name: Optional[str] = Field(None, examples=["Masala Dosa"])
    price_cents: Optional[int] = Field(None, examples=[15000])


class Item(ItemBase):
    id: int

    class Config:
        from_attributes = True
