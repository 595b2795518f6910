from sqlalchemy import Column, DateTime, Integer, Numeric, String
from sqlalchemy.sql import func

from phone_inventory.db.database import Base

# Поля, которые можно задать из тела запроса (create / update)
FILLABLE = ("company", "model", "quantity", "price")


class Phone(Base):
    __tablename__ = "phones"
    __table_args__ = {"sqlite_autoincrement": True}  # id не переиспользуется после delete
    id = Column(Integer, primary_key=True, autoincrement=True)
    company = Column(String(255), nullable=False)
    model = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<Phone id={self.id} {self.company!r} {self.model!r}>"
