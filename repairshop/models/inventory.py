import uuid
from sqlalchemy import Column, String, DateTime, func, DECIMAL, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship
from repairshop.db.session import Base

class InventoryItem(Base):
    __tablename__ = "inventory_items"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    store_id = Column(Uuid(as_uuid=True), ForeignKey("stores.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    sku = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    current_quantity = Column(DECIMAL(10, 2), nullable=False, default=0)
    min_quantity = Column(DECIMAL(10, 2), nullable=False, default=0)
    unit_price = Column(DECIMAL(10, 2), nullable=True)
    cost_price = Column(DECIMAL(10, 2), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    store = relationship("Store", back_populates="inventory_items")
