# foodcourt/crud/crud_item.py
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from foodcourt.db.models.item import Item
from foodcourt.schemas.item_schemas import ItemCreate


class CRUDItem:
    def get(self, db: Session, id: int) -> Optional[Item]:
        return db.query(Item).filter(Item.id == id).first()

    def get_many(self, db: Session, *, ids: Iterable[int]) -> Dict[int, Item]:
        ids = set(ids)
        if not ids:
            return {}
        return {item.id: item for item in db.query(Item).filter(Item.id.in_(ids)).all()}

    def get_multi(self, db: Session) -> List[Item]:
        return db.query(Item).order_by(Item.name.asc(), Item.id.asc()).all()

    def create(self, db: Session, *, obj_in: ItemCreate) -> Item:
        db_obj = Item(name=obj_in.name, price_cents=obj_in.price_cents)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


item = CRUDItem()
