from repairshop.models.store import Store
from repairshop.models.user import User
from repairshop.models.customer import Customer
from repairshop.models.ticket import RepairTicket, Expense, TicketStatus, TicketPriority
from repairshop.models.inventory import InventoryItem
