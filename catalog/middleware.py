"""
Request interceptors and error formatting.

Pre-routing interceptors run in list order for every request. Each one
either returns ``None`` to let the request continue or a response that ends
it there. Errors raised past routing are turned into ``{"error": message}``.
"""
from datetime import datetime, timezone
from typing import Callable, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .errors import ApiError, InternalError, RouteNotFound, Unauthorized
from .logger import get_logger

logger = get_logger("http")

Interceptor = Callable[[Request, Settings], Optional[Response]]

API_PREFIX = "/api"
API_KEY_HEADER = "x-api-key"


def error_response(err: ApiError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content={"error": err.message})


def _original_url(request: Request) -> str:
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


def log_request(request: Request, settings: Settings) -> Optional[Response]:
    timestamp = datetime.now(timezone.utc).isoformat()
    logger.info("[%s] %s %s", timestamp, request.method, _original_url(request))
    return None


def require_api_key(request: Request, settings: Settings) -> Optional[Response]:
    if not request.url.path.startswith(API_PREFIX):
        return None
    supplied = request.headers.get(API_KEY_HEADER)
    if settings.api_key is None or supplied != settings.api_key:
        return error_response(Unauthorized())
    return None


REQUEST_INTERCEPTORS: List[Interceptor] = [log_request, require_api_key]


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning("%s %s -> %d %s", request.method, _original_url(request), exc.status_code, exc.message)
    return error_response(exc)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # unknown path or unsupported method on a known one
    if exc.status_code in (404, 405):
        return await handle_api_error(request, RouteNotFound())
    return await handle_api_error(request, ApiError(str(exc.detail), exc.status_code))


def install_middleware(app: FastAPI, settings: Settings,
                       interceptors: Optional[List[Interceptor]] = None) -> None:
    chain = list(REQUEST_INTERCEPTORS if interceptors is None else interceptors)

    @app.middleware("http")
    async def run_interceptors(request: Request, call_next):
        for interceptor in chain:
            response = interceptor(request, settings)
            if response is not None:
                return response
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, _original_url(request))
            return error_response(InternalError())

    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
