# foodcourt/db/models/customer.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from foodcourt.db.base_class import Base


class Customer(Base):
    name = Column(String, nullable=True)
    # Telefone identifica o cliente para reaproveitamento, mas não é unique no schema
    phone = Column(String, nullable=True, index=True)

    orders = relationship("Order", back_populates="customer")
