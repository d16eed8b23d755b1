# foodcourt/db/models/order.py
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import relationship

from foodcourt.db.base_class import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timestamp stored in UTC and always read back timezone aware.
    SQLite drops the offset, so naive values coming out are UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class Order(Base):
    table_number = Column(Integer, nullable=False)
    customer_id = Column(ForeignKey("customers.id"), nullable=True)  # NULL = walk-in
    waiter_id = Column(ForeignKey("waiters.id"), nullable=True)  # NULL = sem garçom
    # Calculado uma única vez na criação, nunca recalculado a partir das linhas
    total_cents = Column(Integer, nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)

    customer = relationship("Customer", back_populates="orders")
    waiter = relationship("Waiter", back_populates="orders")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    @property
    def customer_name(self) -> Optional[str]:
        return self.customer.name if self.customer else None

    @property
    def customer_phone(self) -> Optional[str]:
        return self.customer.phone if self.customer else None

    @property
    def waiter_name(self) -> Optional[str]:
        return self.waiter.name if self.waiter else None

    @property
    def waiter_phone(self) -> Optional[str]:
        return self.waiter.phone if self.waiter else None

    @property
    def waiter_status(self):
        return self.waiter.status if self.waiter else None


class OrderItem(Base):
    __tablename__ = "order_items"

    order_id = Column(ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    item_id = Column(ForeignKey("items.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    price_cents_at_order = Column(Integer, nullable=False)  # Preço congelado no momento do pedido

    order = relationship("Order", back_populates="items")
    item = relationship("Item")

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_order_items_quantity_positive"),
    )

    @property
    def name(self) -> Optional[str]:
        return self.item.name if self.item else None

    @property
    def line_total_cents(self) -> int:
        return self.quantity * self.price_cents_at_order
