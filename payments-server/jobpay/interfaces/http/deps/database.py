"""Database session dependency.

Re-exports the infrastructure session generator under the name routers and
tests depend on, so one request shares one session across dependencies.
"""

from jobpay.infrastructure.database.session import get_session as get_db_session

__all__ = ["get_db_session"]
