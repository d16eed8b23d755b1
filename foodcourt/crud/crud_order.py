# foodcourt/crud/crud_order.py
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session, selectinload

from foodcourt.db.models.customer import Customer
from foodcourt.db.models.item import Item
from foodcourt.db.models.order import Order, OrderItem


def _with_details(query):
    return query.options(
        selectinload(Order.items).selectinload(OrderItem.item),
        selectinload(Order.customer),
        selectinload(Order.waiter),
    )


class CRUDOrder:
    def get(self, db: Session, id: int) -> Optional[Order]:
        return _with_details(db.query(Order)).filter(Order.id == id).first()

    def get_multi(self, db: Session, *, limit: int = 20, waiter_id: Optional[int] = None) -> List[Order]:
        query = _with_details(db.query(Order))
        if waiter_id is not None:
            query = query.filter(Order.waiter_id == waiter_id)
        return query.order_by(Order.id.desc()).limit(limit).all()

    def get_all_for_export(self, db: Session) -> List[Order]:
        return _with_details(db.query(Order)).order_by(Order.id.asc()).all()

    def count(self, db: Session) -> int:
        return db.query(Order).count()

    def add_with_items(
        self,
        db: Session,
        *,
        table_number: int,
        customer: Optional[Customer],
        waiter_id: Optional[int],
        lines: Sequence[Tuple[Item, int]],
    ) -> Order:
        """
        Stage an order and its lines, freezing each item's current price.
        The total is computed here once and stored. Does not commit.
        """
        db_order = Order(
            table_number=table_number,
            customer=customer,
            waiter_id=waiter_id,
            total_cents=sum(quantity * db_item.price_cents for db_item, quantity in lines),
        )
        for db_item, quantity in lines:
            db_order.items.append(
                OrderItem(item=db_item, quantity=quantity, price_cents_at_order=db_item.price_cents)
            )
        db.add(db_order)
        db.flush()  # Para obter o ID do pedido
        return db_order

    def purge(self, db: Session, *, order_ids: Sequence[int]) -> int:
        """
        Delete the given orders and their lines. Orders committed after
        `order_ids` was read are left alone. Does not commit.
        """
        order_ids = list(order_ids)
        if not order_ids:
            return 0
        db.query(OrderItem).filter(OrderItem.order_id.in_(order_ids)).delete(synchronize_session=False)
        deleted = db.query(Order).filter(Order.id.in_(order_ids)).delete(synchronize_session=False)
        db.expire_all()
        return deleted


order = CRUDOrder()
