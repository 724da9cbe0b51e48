"""HTTP transport for the route service.

Endpoints (JSON in, JSON out):
- POST /route/add       {"origin", "destiny", "cost"}
- POST /route/shortest  {"origin", "destiny"}

The route graph is not thread-safe, so every service call runs under
one lock owned by the application.

Usage:
    tour-web --port 8080 routes.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from typing import Any, Callable, List, Optional, Sequence, Type, TypeVar

import uvicorn
from fastapi import APIRouter, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.concurrency import run_in_threadpool

from .config import configure_logging, get_config
from .container import Container
from .services import RouteService
from .services.schemas import AddRouteRequest, ShortestRouteRequest

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)

router = APIRouter(prefix="/route", tags=["route"])


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";")[0].strip().lower()


async def _dispatch(
    request: Request,
    model: Type[RequestT],
    call: Callable[[RouteService, RequestT], Any],
) -> Response:
    if _media_type(request) != "application/json":
        return Response(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)

    body = await request.body()
    try:
        payload = model.model_validate_json(body)
    except ValidationError as e:
        logger.warning(
            "Cannot decode request body",
            extra={"path": request.url.path, "error": str(e)},
        )
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    service: RouteService = request.app.state.service
    lock: threading.Lock = request.app.state.lock

    def locked_call() -> Any:
        with lock:
            return call(service, payload)

    result = await run_in_threadpool(locked_call)
    return JSONResponse(result.to_wire())


@router.post("/add")
async def add_route(request: Request) -> Response:
    return await _dispatch(request, AddRouteRequest, RouteService.add_route)


@router.post("/shortest")
async def shortest_route(request: Request) -> Response:
    return await _dispatch(request, ShortestRouteRequest, RouteService.shortest_route)


def create_app(service: RouteService) -> FastAPI:
    """Build the FastAPI application serving ``service``."""
    app = FastAPI(title="Tour", summary="Cheapest routes between cities")
    app.state.service = service
    app.state.lock = threading.Lock()

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        logger.info(
            "Request",
            extra={"method": request.method, "path": request.url.path},
        )
        return await call_next(request)

    app.include_router(router)
    return app


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    config = get_config()
    parser = argparse.ArgumentParser(
        prog="tour-web",
        description="Serve the route service over HTTP.",
    )
    parser.add_argument("--host", default=config.http.host, help="bind address")
    parser.add_argument(
        "--port", type=int, default=config.http.port, help="server port"
    )
    parser.add_argument(
        "csv_files",
        nargs="*",
        metavar="CSV",
        help="route files with one 'origin,destiny,cost' record per line",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    config = get_config()
    configure_logging(config.observability)

    container = Container.create_default(
        config,
        extra_paths=args.csv_files,
        skip_invalid_files=True,
    )
    app = create_app(container.resolve(RouteService))

    logger.info("Starting server", extra={"host": args.host, "port": args.port})
    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level=config.observability.level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
