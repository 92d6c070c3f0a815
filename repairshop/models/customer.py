import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Text, func, Uuid
from sqlalchemy.orm import relationship
from repairshop.db.session import Base

class Customer(Base):
    __tablename__ = "customers"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    store_id = Column(Uuid(as_uuid=True), ForeignKey("stores.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(30), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    store = relationship("Store", back_populates="customers")
    tickets = relationship("RepairTicket", back_populates="customer")
