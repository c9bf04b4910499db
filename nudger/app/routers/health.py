"""Process liveness for the nudger; the database is only touched by the nudge route."""
from fastapi import APIRouter

health_router = APIRouter(tags=["Health"])


@health_router.get(
    "/health/live",
    summary="Nudger liveness",
    description="Answers 200 while the nudger process is up. Opens no database connection.",
    responses={200: {"description": "Nudger process is up."}},
)
async def live() -> dict:
    return {"status": "ok"}
