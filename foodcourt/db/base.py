# Importa todos os modelos para que Base.metadata conheça todas as tabelas
from foodcourt.db.base_class import Base  # noqa: F401
from foodcourt.db.models.item import Item  # noqa: F401
from foodcourt.db.models.customer import Customer  # noqa: F401
from foodcourt.db.models.waiter import Waiter  # noqa: F401
from foodcourt.db.models.order import Order, OrderItem  # noqa: F401
