"""Report module exports"""

from .models import ClientPayments, ProfessionEarnings
from .service import InvalidReportRangeError, ReportService

__all__ = [
    "ClientPayments",
    "InvalidReportRangeError",
    "ProfessionEarnings",
    "ReportService",
]
