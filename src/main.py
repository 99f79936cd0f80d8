"""Entry point for the browser softphone signaling service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import router as api_router
from api.routes import voice_router
from api.schemas import FailureResponse
from calls.errors import CallControlError, ValidationError
from config.settings import get_settings

LOGGER = logging.getLogger(__name__)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(
    title="Softphone Signaling",
    description="Bridges a browser softphone with Twilio Voice.",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(CallControlError)
async def call_control_error_handler(request: Request, exc: CallControlError) -> JSONResponse:
    LOGGER.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=FailureResponse(error=exc.detail).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    messages = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    detail = "; ".join(messages) or "Invalid request"
    LOGGER.error("%s %s rejected: %s", request.method, request.url.path, detail)
    return JSONResponse(
        status_code=ValidationError.status_code,
        content=FailureResponse(error=detail).model_dump(),
    )


app.include_router(api_router, prefix="/api")
app.include_router(voice_router)


def run() -> None:
    import uvicorn

    LOGGER.info("Server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
