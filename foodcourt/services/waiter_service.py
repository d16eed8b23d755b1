# foodcourt/services/waiter_service.py
import logging
from typing import Any, List

from sqlalchemy.orm import Session

from foodcourt import crud
from foodcourt.core.exceptions import NotFoundError, WaiterAuthenticationError
from foodcourt.db.models.order import Order
from foodcourt.db.models.waiter import Waiter

logger = logging.getLogger(__name__)


class WaiterService:
    """Free/engaged presence of waiters and their phone-only login."""

    def get_waiter(self, db: Session, *, waiter_id: int) -> Waiter:
        db_waiter = crud.waiter.get(db, id=waiter_id)
        if not db_waiter:
            raise NotFoundError("waiter", waiter_id)
        return db_waiter

    def login(self, db: Session, *, phone: str) -> Waiter:
        # Sem senha: o telefone é a única verificação de identidade
        db_waiter = crud.waiter.get_by_phone(db, phone=phone)
        if not db_waiter:
            raise WaiterAuthenticationError(phone)
        return db_waiter

    def set_status(self, db: Session, *, waiter_id: int, status: Any) -> Waiter:
        db_waiter = self.get_waiter(db, waiter_id=waiter_id)
        db_waiter = crud.waiter.update_status(db, db_obj=db_waiter, status=status)
        logger.info("Garçom %s agora está %s", db_waiter.id, db_waiter.status.value)
        return db_waiter

    def list_orders(self, db: Session, *, waiter_id: int, limit: int) -> List[Order]:
        self.get_waiter(db, waiter_id=waiter_id)
        return crud.order.get_multi(db, limit=limit, waiter_id=waiter_id)


waiter_service = WaiterService()
