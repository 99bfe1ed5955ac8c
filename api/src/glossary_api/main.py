import logging
import os
import time
import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from glossary_api.errors import (
    AggregateNotFoundError,
    GlossaryConflictError,
    GlossaryError,
    GlossaryValidationError,
    TranslationApiError,
)
from glossary_api.logging_config import configure_logging
from glossary_api.routers.glossary import router as glossary_router

configure_logging(
    service_name=os.getenv("LOG_SERVICE_NAME", "glossary-api"),
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Glossary API")


class ErrorLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        start = time.perf_counter()
        try:
            response = await call_next(request)
            # Log 5xx responses too (even if handled downstream)
            if 500 <= response.status_code < 600:
                duration_ms = int((time.perf_counter() - start) * 1000)
                logger.error(
                    "HTTP 5xx response",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "status_code": response.status_code,
                        "client": request.client.host if request.client else None,
                        "duration_ms": duration_ms,
                    },
                )
            return response
        except Exception as exc:  # noqa: BLE001 - we want to log all unhandled exceptions
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.error(
                "Unhandled exception during request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "client": request.client.host if request.client else None,
                    "duration_ms": duration_ms,
                    "exception_type": type(exc).__name__,
                    "exception_message": str(exc),
                    "traceback": traceback.format_exc(),
                },
            )
            raise


app.add_middleware(ErrorLoggingMiddleware)


_ERROR_STATUS = (
    (GlossaryValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (AggregateNotFoundError, status.HTTP_404_NOT_FOUND),
    (GlossaryConflictError, status.HTTP_409_CONFLICT),
    (TranslationApiError, status.HTTP_502_BAD_GATEWAY),
)


@app.exception_handler(GlossaryError)
async def glossary_error_handler(request: Request, exc: GlossaryError) -> JSONResponse:
    status_code = status.HTTP_400_BAD_REQUEST
    for exc_type, code in _ERROR_STATUS:
        if isinstance(exc, exc_type):
            status_code = code
            break
    logger.warning(
        "Glossary request failed",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
        },
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.get("/health")
def healthcheck() -> dict:
    return {"status": "ok"}


app.include_router(glossary_router)
