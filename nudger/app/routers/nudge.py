"""HTTP endpoint for database nudges: connect, nudge, always disconnect."""
from __future__ import annotations

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from nudger.app.composition import build_nudge_config, get_connection_factory
from nudger.app.config.settings import Settings
from nudger.app.core.log_policy import PolicyLogger
from nudger.app.services.nudger import nudge

nudge_router = APIRouter(tags=["Nudge"])

NUDGE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def _error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc)})


@nudge_router.api_route(
    "/",
    methods=NUDGE_METHODS,
    summary="Nudge the database",
    description=(
        "Connects with DSN/USER/PASSWORD from the environment, runs one liveness "
        "query and disconnects. A failed query is logged and still answers 200; "
        "only connect failures and errors escaping the nudge answer 500."
    ),
    responses={
        200: {"description": "Nudge cycle completed."},
        500: {"description": "Connect failed or the nudge raised; body is {\"error\": \"...\"}."},
    },
)
async def nudge_database(request: Request) -> Response:
    settings = Settings()
    config = build_nudge_config(settings)
    log = PolicyLogger(config.log_policy, component="handler", event="nudge_request")

    try:
        database = get_connection_factory(request)(settings)
        await database.connect(config.database_user, config.database_password)
    except Exception as exc:
        log.critical("Couldn't connect to the database: {}.", exc)
        return _error_response(exc)

    log.info("Connected to the database.")

    try:
        await nudge(database, config)
    except Exception as exc:
        log.critical("Nudger couldn't nudge the database.")
        return _error_response(exc)
    finally:
        await database.disconnect()

    log.info("Nudged the database.")
    return Response(status_code=200)
