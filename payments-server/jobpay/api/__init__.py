from fastapi import APIRouter

from jobpay.interfaces.http.routers import admin, balances, contracts, jobs


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(contracts.router, prefix="/contracts", tags=["contracts"])
    router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
    router.include_router(balances.router, prefix="/balances", tags=["balances"])
    router.include_router(admin.router, prefix="/admin", tags=["admin"])
    return router


__all__ = [
    "create_api_router",
]
