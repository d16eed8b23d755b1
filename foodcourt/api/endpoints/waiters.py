# foodcourt/api/endpoints/waiters.py
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from foodcourt import crud, schemas
from foodcourt.api import deps
from foodcourt.core.exceptions import NotFoundError, WaiterAuthenticationError
from foodcourt.services.waiter_service import waiter_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.Waiter])
def read_waiters(db: Session = Depends(deps.get_db)) -> Any:
    """
    Lista todos os garçons com o status atual (free/engaged).
    """
    return crud.waiter.get_multi(db)


@router.post("", response_model=schemas.Waiter, status_code=status.HTTP_201_CREATED)
def create_waiter(
    *,
    db: Session = Depends(deps.get_db),
    waiter_in: schemas.WaiterCreate,
) -> Any:
    """
    Cadastra um garçom. Status desconhecido vira "free".
    """
    if not waiter_in.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="name required")
    return crud.waiter.create(db=db, obj_in=waiter_in)


@router.post("/login", response_model=schemas.Waiter)
def login_waiter(
    *,
    db: Session = Depends(deps.get_db),
    login_in: schemas.WaiterLogin,
) -> Any:
    """
    Login do app do garçom apenas pelo telefone.
    """
    if not login_in.phone:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="phone required")
    try:
        return waiter_service.login(db, phone=login_in.phone)
    except WaiterAuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


@router.get("/{waiter_id}", response_model=schemas.Waiter)
def read_waiter_by_id(waiter_id: int, db: Session = Depends(deps.get_db)) -> Any:
    try:
        return waiter_service.get_waiter(db, waiter_id=waiter_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{waiter_id}/status", response_model=schemas.Waiter)
def update_waiter_status(
    *,
    db: Session = Depends(deps.get_db),
    waiter_id: int,
    status_in: schemas.WaiterStatusUpdate,
) -> Any:
    """
    Atualiza o status do garçom. Qualquer valor diferente de "engaged" vira "free".
    """
    try:
        return waiter_service.set_status(db, waiter_id=waiter_id, status=status_in.status)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{waiter_id}/orders", response_model=List[schemas.OrderDetail])
def read_waiter_orders(
    waiter_id: int,
    db: Session = Depends(deps.get_db),
    limit: int = Depends(deps.order_limit),
) -> Any:
    """
    Pedidos mais recentes do garçom, com os itens de cada um.
    """
    try:
        return waiter_service.list_orders(db, waiter_id=waiter_id, limit=limit)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
