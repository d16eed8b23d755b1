# foodcourt/api/endpoints/orders.py
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from foodcourt import schemas
from foodcourt.api import deps
from foodcourt.core.exceptions import NotFoundError, OrderValidationError
from foodcourt.services.order_service import order_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=schemas.OrderCreated, status_code=status.HTTP_201_CREATED)
def create_order(
    *,
    db: Session = Depends(deps.get_db),
    order_in: schemas.OrderCreate,
) -> Any:
    """
    Cria um pedido com seus itens.
    Os preços vêm do cardápio atual; o total é calculado e gravado uma única vez.
    """
    try:
        return order_service.create_order(db, order_in=order_in)
    except OrderValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=List[schemas.OrderDetail])
def list_orders(
    db: Session = Depends(deps.get_db),
    limit: int = Depends(deps.order_limit),
) -> Any:
    """
    Lista os pedidos mais recentes primeiro, com os itens de cada um.
    """
    return order_service.list_orders(db, limit=limit)


@router.get("/{order_id}", response_model=schemas.OrderDetail)
def get_order(order_id: int, db: Session = Depends(deps.get_db)) -> Any:
    try:
        return order_service.get_order(db, order_id=order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
