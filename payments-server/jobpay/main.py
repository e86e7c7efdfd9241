from contextlib import asynccontextmanager

from fastapi import FastAPI

from jobpay import __version__
from jobpay.api import create_api_router
from jobpay.core.config import get_settings
from jobpay.core.container import get_container
from jobpay.infrastructure.database.session import dispose_engine, init_db

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_container()
    await init_db()
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Contract job payments and client balance deposits",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "jobpay.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
