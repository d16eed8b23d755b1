# foodcourt/schemas/order_schemas.py
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from foodcourt.db.models.waiter import WaiterStatus


def _as_int(value: Any) -> Optional[int]:
    # Só inteiros de verdade; bool é subclasse de int e "5" não conta
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


# --- Linhas do pedido ---
class OrderLineCreate(BaseModel):
    item_id: Optional[int] = Field(None, examples=[1])
    quantity: Optional[int] = Field(None, examples=[2])

    @field_validator("item_id", "quantity", mode="before")
    @classmethod
    def non_numeric_is_missing(cls, v):
        return _as_int(v)


class OrderLine(BaseModel):
    item_id: int
    name: Optional[str] = None
    quantity: int
    price_cents_at_order: int

    class Config:
        from_attributes = True


# --- Pedido ---
class OrderCustomer(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None


class OrderCreate(BaseModel):
    table_number: Optional[int] = Field(None, examples=[5])
    customer: Optional[OrderCustomer] = None
    waiter_id: Optional[int] = Field(None, examples=[1])
    items: Optional[List[Optional[OrderLineCreate]]] = None

    @field_validator("table_number", mode="before")
    @classmethod
    def table_number_must_be_numeric(cls, v):
        return _as_int(v)

    @field_validator("items", mode="before")
    @classmethod
    def items_must_be_a_list(cls, v):
        if not isinstance(v, list):
            return None
        # Linhas que não são objetos viram None e são rejeitadas pelo serviço
        return [line if isinstance(line, (dict, OrderLineCreate)) else None for line in v]


class OrderCreated(BaseModel):
    id: int
    total_cents: int
    created_at: datetime

    class Config:
        from_attributes = True


class OrderDetail(BaseModel):
    id: int
    table_number: int
    total_cents: int
    created_at: datetime
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    waiter_name: Optional[str] = None
    waiter_phone: Optional[str] = None
    waiter_status: Optional[WaiterStatus] = None
    items: List[OrderLine] = []

    class Config:
        from_attributes = True
