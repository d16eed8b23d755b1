# foodcourt/schemas/customer_schemas.py
from typing import Optional

from pydantic import BaseModel, Field


class CustomerBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Priya"])
    phone: Optional[str] = Field(None, examples=["9800012345"])


class CustomerCreate(CustomerBase):
    pass


class Customer(CustomerBase):
    id: int

    class Config:
        from_attributes = True
