# foodcourt/db/models/waiter.py
import enum
from typing import Any

from sqlalchemy import Column, Enum as SAEnum, String
from sqlalchemy.orm import relationship

from foodcourt.db.base_class import Base


class WaiterStatus(str, enum.Enum):
    FREE = "free"
    ENGAGED = "engaged"

    @classmethod
    def normalize(cls, value: Any) -> "WaiterStatus":
        """Anything other than "engaged" becomes FREE; there is no third state."""
        if value == cls.ENGAGED.value:
            return cls.ENGAGED
        return cls.FREE


class Waiter(Base):
    name = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=True, index=True)  # Usado como login do garçom
    status = Column(
        SAEnum(
            WaiterStatus,
            name="waiter_status",
            native_enum=False,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=WaiterStatus.FREE,
        nullable=False,
    )

    orders = relationship("Order", back_populates="waiter")
