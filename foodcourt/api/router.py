from fastapi import APIRouter

from foodcourt.api.endpoints import (
    items,
    customers,
    waiters,
    orders,
    day_end,
)

api_router = APIRouter()

api_router.include_router(items.router, prefix="/items", tags=["Items"])
api_router.include_router(customers.router, prefix="/customers", tags=["Customers"])
api_router.include_router(waiters.router, prefix="/waiters", tags=["Waiters"])
api_router.include_router(orders.router, prefix="/orders", tags=["Orders"])
api_router.include_router(day_end.router, prefix="/day-end", tags=["Day End"])
