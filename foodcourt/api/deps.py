# foodcourt/api/deps.py
from typing import Optional

from fastapi import Query

from foodcourt.core.config import settings
from foodcourt.database import get_db  # noqa: F401  Reexportado para os endpoints


def order_limit(limit: Optional[str] = Query(None, description="Máximo de pedidos (até 100)")) -> int:
    """
    Parse the `?limit=` of order listings.
    Missing, non-numeric or non-positive values fall back to the default;
    anything above the maximum is capped.
    """
    try:
        value = int(limit) if limit is not None else settings.ORDERS_DEFAULT_LIMIT
    except ValueError:
        value = settings.ORDERS_DEFAULT_LIMIT
    if value < 1:
        value = settings.ORDERS_DEFAULT_LIMIT
    return min(value, settings.ORDERS_MAX_LIMIT)
