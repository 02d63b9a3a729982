from app.models.driver import Driver
from app.models.manufacturer import Manufacturer
from app.models.yard import Yard
from app.models.client import Client, DeliveryLocation
from app.models.vehicle import Vehicle
from app.models.collect import Collect
from app.models.transport import Transport
from app.models.request_counter import RequestCounter
from app.models.driver_notification import DriverNotification
from app.models.driver_evaluation import DriverEvaluation
from app.models.expense_settlement import ExpenseSettlement, ExpenseSettlementItem
from app.models.user import User
from app.models.role_permission import RolePermission

__all__ = [
    "Driver", "Manufacturer", "Yard", "Client", "DeliveryLocation", "Vehicle",
    "Collect", "Transport", "RequestCounter", "DriverNotification",
    "DriverEvaluation", "ExpenseSettlement", "ExpenseSettlementItem", "User",
    "RolePermission",
]
