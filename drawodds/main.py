import logging
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from drawodds.api import calculate_router, cards_router, health_router
from drawodds.config import settings
from drawodds.models.failure import InputValidationError, KnownError, create_unknown_failure

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("drawodds"),
)

app.include_router(calculate_router)
app.include_router(cards_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _field_key(loc: tuple[int | str, ...]) -> str:
    """("body", "in_hand", 0) -> "in_hand[0]"."""
    key = ""
    for part in loc:
        if part == "body":
            continue
        if isinstance(part, int):
            key += f"[{part}]"
        else:
            key = f"{key}.{part}" if key else str(part)
    return key or "body"


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(mode="json"),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Non-numeric or missing form values never reach the calculator
    error = InputValidationError(
        {_field_key(tuple(err["loc"])): err["msg"] for err in exc.errors()}
    )
    return await known_error_handler(request, error)


@app.exception_handler(Exception)
async def unknown_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=create_unknown_failure(exc).model_dump(mode="json"),
    )
