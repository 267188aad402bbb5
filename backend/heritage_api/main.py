import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from sqlmodel import Session

from heritage_api.api.accounts import router as accounts_router
from heritage_api.api.likes import router as likes_router
from heritage_api.api.sites import router as sites_router
from heritage_api.config import settings
from heritage_api.database import create_db_engine, init_db
from heritage_api.errors import register_exception_handlers
from heritage_api.services.site_seed import seed_sites

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = create_db_engine(settings.database_url)
    try:
        init_db(engine)
        if settings.sites_seed_file:
            with Session(engine) as session:
                seed_sites(session, settings.sites_seed_file)
    except Exception:
        engine.dispose()
        raise
    app.state.engine = engine
    logger.info("Store connection opened")
    yield
    engine.dispose()
    logger.info("Store connection closed")


app = FastAPI(title="Heritage API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    allow_methods=["*"],
    allow_headers=["Authorization", "Content-Type"],
)

register_exception_handlers(app)

app.include_router(accounts_router)
app.include_router(likes_router)
app.include_router(sites_router)


@app.get("/")
async def list_endpoints(request: Request):
    """List every API route and the methods it accepts."""
    endpoints = [
        {"path": route.path, "methods": sorted(route.methods)}
        for route in request.app.routes
        if isinstance(route, APIRoute)
    ]
    return sorted(endpoints, key=lambda e: e["path"])


@app.get("/health")
async def health():
    return {"status": "ok"}


def run() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
