# foodcourt/services/order_service.py
import logging
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from foodcourt import crud
from foodcourt.core.exceptions import NotFoundError, OrderValidationError
from foodcourt.database import unit_of_work
from foodcourt.db.models.item import Item
from foodcourt.db.models.order import Order
from foodcourt.schemas.order_schemas import OrderCreate, OrderLineCreate

logger = logging.getLogger(__name__)


class OrderService:
    def price_lines(
        self, db: Session, lines: Sequence[Optional[OrderLineCreate]]
    ) -> Tuple[List[Tuple[Item, int]], int]:
        """
        Resolve each requested line against the catalog.

        Returns the (item, clamped quantity) pairs and the order total in
        minor units. Prices always come from the catalog, never the client.
        Raises OrderValidationError on the first bad line.
        """
        for index, line in enumerate(lines):
            if line is None or line.item_id is None or line.quantity is None:
                raise OrderValidationError(f"invalid item line at index {index}")

        catalog = crud.item.get_many(db, ids=[line.item_id for line in lines])
        priced: List[Tuple[Item, int]] = []
        total = 0
        for line in lines:
            db_item = catalog.get(line.item_id)
            if db_item is None:
                raise OrderValidationError(f"item not found: {line.item_id}")
            quantity = max(line.quantity, 1)
            total += quantity * db_item.price_cents
            priced.append((db_item, quantity))
        return priced, total

    def create_order(self, db: Session, *, order_in: OrderCreate) -> Order:
        """
        Validate an order request and persist customer, order and lines
        together. Nothing is written when any check fails.
        """
        if not order_in.table_number or order_in.table_number < 1:
            raise OrderValidationError("table_number required")
        if not order_in.items:
            raise OrderValidationError("items required")

        waiter_id = None
        if order_in.waiter_id:
            db_waiter = crud.waiter.get(db, id=order_in.waiter_id)
            if not db_waiter:
                raise OrderValidationError("waiter not found")
            waiter_id = db_waiter.id

        lines, total = self.price_lines(db, order_in.items)

        with unit_of_work(db):
            db_customer = None
            if order_in.customer and (order_in.customer.name or order_in.customer.phone):
                db_customer = crud.customer.get_or_add(
                    db, name=order_in.customer.name, phone=order_in.customer.phone
                )
            db_order = crud.order.add_with_items(
                db,
                table_number=order_in.table_number,
                customer=db_customer,
                waiter_id=waiter_id,
                lines=lines,
            )
        db.refresh(db_order)

        logger.info(
            "Pedido %s criado: mesa %s, %s linhas, total %s",
            db_order.id, db_order.table_number, len(lines), total,
        )
        return db_order

    def get_order(self, db: Session, *, order_id: int) -> Order:
        db_order = crud.order.get(db, id=order_id)
        if not db_order:
            raise NotFoundError("order", order_id, message="not found")
        return db_order

    def list_orders(self, db: Session, *, limit: int) -> List[Order]:
        return crud.order.get_multi(db, limit=limit)


order_service = OrderService()
