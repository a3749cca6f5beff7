from .rental_manager import RentalManager
from .report_service import ReportService

__all__ = [
    "RentalManager",
    "ReportService",
]
