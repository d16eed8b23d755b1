from .crud_item import item
from .crud_customer import customer
from .crud_waiter import waiter
from .crud_order import order
