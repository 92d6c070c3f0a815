import uuid
from sqlalchemy import Column, String, DateTime, func, DECIMAL, ForeignKey, Text, Enum as SAEnum, Uuid
from sqlalchemy.orm import relationship
from repairshop.db.session import Base
from repairshop.domain.records import TicketStatus, TicketPriority

class RepairTicket(Base):
    __tablename__ = "repair_tickets"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    store_id = Column(Uuid(as_uuid=True), ForeignKey("stores.id"), nullable=False, index=True)
    customer_id = Column(Uuid(as_uuid=True), ForeignKey("customers.id"), nullable=True, index=True)
    ticket_number = Column(String(20), unique=True, nullable=False, index=True)
    device_type = Column(String(100), nullable=False)
    issue_description = Column(Text, nullable=False)
    status = Column(
        SAEnum(TicketStatus, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=TicketStatus.PENDING,
        index=True,
    )
    priority = Column(
        SAEnum(TicketPriority, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=TicketPriority.MEDIUM,
    )
    estimated_cost = Column(DECIMAL(10, 2), nullable=True)
    actual_cost = Column(DECIMAL(10, 2), nullable=True)
    estimated_completion_date = Column(DateTime(timezone=True), nullable=True)
    actual_completion_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    # Relationships
    store = relationship("Store", back_populates="tickets")
    customer = relationship("Customer", back_populates="tickets")
    expenses = relationship("Expense", back_populates="ticket", cascade="all, delete-orphan")

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    ticket_id = Column(Uuid(as_uuid=True), ForeignKey("repair_tickets.id"), nullable=False, index=True)
    inventory_item_id = Column(Uuid(as_uuid=True), ForeignKey("inventory_items.id"), nullable=True)
    name = Column(String(255), nullable=False)
    quantity = Column(DECIMAL(10, 2), nullable=False, default=1)
    price = Column(DECIMAL(10, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    ticket = relationship("RepairTicket", back_populates="expenses")
    inventory_item = relationship("InventoryItem")
