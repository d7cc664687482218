from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clients import router as clients_router
from core import config, db
from core.logging_config import setup_logging
from products import router as products_router

SERVICE_ROUTERS: dict[str, APIRouter] = {
    "clients": clients_router.router,
    "products": products_router.router,
}


def create_app(services: list[str] | None = None) -> FastAPI:
    setup_logging(config.log_level())
    mounted = list(services) if services is not None else config.enabled_services()
    unknown = [name for name in mounted if name not in SERVICE_ROUTERS]
    if unknown:
        raise RuntimeError(f"Unknown service(s): {', '.join(unknown)}")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One pool per mounted service, opened once per process.
        await db.open_databases(app, mounted)
        try:
            yield
        finally:
            await db.close_databases(app)

    app = FastAPI(lifespan=lifespan)

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for name in mounted:
        app.include_router(SERVICE_ROUTERS[name], tags=[name])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "clients-products api", "services": mounted}

    return app


app = create_app()
