import uuid
from sqlalchemy import Column, String, DateTime, func, Uuid
from sqlalchemy.orm import relationship
from repairshop.db.session import Base

class Store(Base):
    __tablename__ = "stores"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    currency = Column(String(3), nullable=False, default="EUR")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    users = relationship("User", back_populates="store")
    customers = relationship("Customer", back_populates="store")
    tickets = relationship("RepairTicket", back_populates="store")
    inventory_items = relationship("InventoryItem", back_populates="store")
