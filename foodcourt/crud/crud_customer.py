# foodcourt/crud/crud_customer.py
from typing import List, Optional

from sqlalchemy.orm import Session

from foodcourt.db.models.customer import Customer
from foodcourt.schemas.customer_schemas import CustomerCreate


class CRUDCustomer:
    def get(self, db: Session, id: int) -> Optional[Customer]:
        return db.query(Customer).filter(Customer.id == id).first()

    def get_by_phone(self, db: Session, *, phone: str) -> Optional[Customer]:
        # Telefone não é unique: o primeiro cadastrado vence
        return db.query(Customer).filter(Customer.phone == phone).order_by(Customer.id.asc()).first()

    def get_multi(self, db: Session, *, limit: int = 100) -> List[Customer]:
        return db.query(Customer).order_by(Customer.id.desc()).limit(limit).all()

    def create(self, db: Session, *, obj_in: CustomerCreate) -> Customer:
        db_obj = Customer(name=obj_in.name, phone=obj_in.phone)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get_or_add(self, db: Session, *, name: Optional[str], phone: Optional[str]) -> Customer:
        """
        Reuse the customer registered under `phone` or stage a new one.
        Does not commit; the caller's unit of work does.
        """
        if phone:
            existing = self.get_by_phone(db, phone=phone)
            if existing:
                return existing
        db_obj = Customer(name=name, phone=phone)
        db.add(db_obj)
        return db_obj


customer = CRUDCustomer()
