# foodcourt/crud/crud_waiter.py
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from foodcourt.db.models.waiter import Waiter, WaiterStatus
from foodcourt.schemas.waiter_schemas import WaiterCreate


class CRUDWaiter:
    def get(self, db: Session, id: int) -> Optional[Waiter]:
        return db.query(Waiter).filter(Waiter.id == id).first()

    def get_by_phone(self, db: Session, *, phone: str) -> Optional[Waiter]:
        return db.query(Waiter).filter(Waiter.phone == phone).order_by(Waiter.id.asc()).first()

    def get_multi(self, db: Session) -> List[Waiter]:
        return db.query(Waiter).order_by(Waiter.name.asc(), Waiter.id.asc()).all()

    def create(self, db: Session, *, obj_in: WaiterCreate) -> Waiter:
        db_obj = Waiter(
            name=obj_in.name,
            phone=obj_in.phone,
            status=WaiterStatus.normalize(obj_in.status),
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update_status(self, db: Session, *, db_obj: Waiter, status: Any) -> Waiter:
        db_obj.status = WaiterStatus.normalize(status)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


waiter = CRUDWaiter()
