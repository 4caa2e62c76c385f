from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from shared.config.settings import SERVICE_NAME

GREETING = "Welcome to Telusko"

router = APIRouter(tags=["home"])


async def greet():
    return GREETING


async def health_check():
    return {"service": SERVICE_NAME, "status": "running"}


# --- ROUTE TABLE ---
router.add_api_route("/hello", greet, methods=["GET"], response_class=PlainTextResponse)
router.add_api_route("/health", health_check, methods=["GET"], include_in_schema=False)
