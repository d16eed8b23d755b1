# foodcourt/schemas/__init__.py
from .item_schemas import Item, ItemCreate
from .customer_schemas import Customer, CustomerCreate
from .waiter_schemas import Waiter, WaiterCreate, WaiterLogin, WaiterStatusUpdate
from .order_schemas import (
    OrderCreate,
    OrderCreated,
    OrderCustomer,
    OrderDetail,
    OrderLine,
    OrderLineCreate,
)
from .day_end_schemas import DayEndReportFile, DayEndReportList
