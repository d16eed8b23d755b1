# foodcourt/api/endpoints/items.py
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from foodcourt import crud, schemas
from foodcourt.api import deps

router = APIRouter()


@router.get("", response_model=List[schemas.Item])
def read_items(db: Session = Depends(deps.get_db)) -> Any:
    """
    Lista o cardápio ordenado por nome.
    """
    return crud.item.get_multi(db)


@router.post("", response_model=schemas.Item, status_code=status.HTTP_201_CREATED)
def create_item(
    *,
    db: Session = Depends(deps.get_db),
    item_in: schemas.ItemCreate,
) -> Any:
    """
    Cadastra um item no cardápio. O preço é em centavos (paise).
    """
    if not item_in.name or item_in.price_cents is None or item_in.price_cents < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="name and positive price_cents required",
        )
    return crud.item.create(db=db, obj_in=item_in)


@router.get("/{item_id}", response_model=schemas.Item)
def read_item_by_id(item_id: int, db: Session = Depends(deps.get_db)) -> Any:
    db_item = crud.item.get(db=db, id=item_id)
    if not db_item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="item not found")
    return db_item
