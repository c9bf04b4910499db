from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from loguru import logger

from nudger.app.core import SERVICE_NAME
from nudger.app.routers.health import health_router
from nudger.app.routers.nudge import nudge_router


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


@asynccontextmanager
async def lifespan(app: FastAPI):
    _log("nudger_starting")
    try:
        yield
    finally:
        _log("nudger_stopping")


app = FastAPI(
    title="Database Nudger",
    description="Keeps a database session alive by running a lightweight query on request.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(nudge_router)
