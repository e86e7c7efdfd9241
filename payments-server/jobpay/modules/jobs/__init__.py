"""Job module exports"""

from .models import Job
from .service import JobService

__all__ = [
    "Job",
    "JobService",
]
