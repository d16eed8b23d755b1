# foodcourt/api/endpoints/customers.py
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from foodcourt import crud, schemas
from foodcourt.api import deps
from foodcourt.core.config import settings

router = APIRouter()


@router.get("", response_model=List[schemas.Customer])
def read_customers(db: Session = Depends(deps.get_db)) -> Any:
    """
    Recupera os clientes mais recentes.
    """
    return crud.customer.get_multi(db, limit=settings.CUSTOMERS_LIST_LIMIT)


@router.post("", response_model=schemas.Customer, status_code=status.HTTP_201_CREATED)
def create_customer(
    *,
    db: Session = Depends(deps.get_db),
    customer_in: schemas.CustomerCreate,
) -> Any:
    if not customer_in.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="name required")
    return crud.customer.create(db=db, obj_in=customer_in)
