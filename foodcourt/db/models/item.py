# foodcourt/db/models/item.py
from sqlalchemy import CheckConstraint, Column, Integer, String

from foodcourt.db.base_class import Base


class Item(Base):
    name = Column(String, nullable=False, index=True)
    price_cents = Column(Integer, nullable=False)  # Preço em paise, nunca float

    __table_args__ = (
        CheckConstraint("price_cents >= 0", name="ck_items_price_cents_non_negative"),
    )
