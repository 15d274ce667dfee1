# backend/order_lookup_service/order_lookup/main.py

import logging
import sys
import time
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI, Query, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import generate_latest
from starlette.responses import PlainTextResponse # Required for text bodies and /metrics

from . import config
from .metrics import (
    ORDER_LOOKUP_TOTAL,
    REQUEST_COUNT,
    REQUEST_DURATION,
    REQUESTS_IN_PROGRESS,
    registry,
)
from .schemas import HealthResponse, MessageResponse, OrderRequest
from .service import OrderLookupService, classify_result

# --- Standard Logging Configuration ---
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Suppress noisy logs from third-party libraries for cleaner output
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)

UNMATCHED_ENDPOINT = "unmatched"


class OrderEndpoint:
    """HTTP binding for order lookups: ``id`` from the path, ``page`` from the query."""

    def __init__(self, lookup_service: OrderLookupService):
        self.lookup_service = lookup_service
        self.router = APIRouter(prefix="/orders", tags=["orders"])
        self.router.add_api_route(
            "/{order_id}",
            self.get_order,
            methods=["GET"],
            response_class=PlainTextResponse,
            summary="Look up a single order by ID",
        )

    def get_order(
        self,
        order_id: str,
        page: Optional[int] = Query(None, description="Page number; values above 10 are rejected."),
    ):
        order_request = OrderRequest(id=order_id, page=page)
        logger.info(
            f"Order Lookup Service: Looking up order '{order_request.id}' (page={order_request.page})"
        )
        result = self.lookup_service.get_order(order_request.id, order_request.page)

        outcome = classify_result(result)
        ORDER_LOOKUP_TOTAL.labels(app_name=config.APP_NAME, outcome=outcome.value).inc()
        logger.info(
            f"Order Lookup Service: Lookup of order '{order_request.id}' finished with outcome '{outcome.value}'."
        )

        if result is None:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return PlainTextResponse(result)


def create_app(lookup_service: Optional[OrderLookupService] = None) -> FastAPI:
    # --- FastAPI Application Setup ---
    app = FastAPI(
        title="Order Lookup Service API",
        description="Looks up order details by identifier with a page bound check.",
        version="1.0.0",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Middleware for Prometheus Metrics ---
    @app.middleware("http")
    async def track_request_metrics(request: Request, call_next):
        # Exclude the /metrics endpoint itself from being tracked
        if request.url.path == "/metrics":
            return await call_next(request)

        method = request.method
        REQUESTS_IN_PROGRESS.labels(app_name=config.APP_NAME, method=method).inc()
        start_time = time.time()
        try:
            response = await call_next(request)
        finally:
            REQUESTS_IN_PROGRESS.labels(app_name=config.APP_NAME, method=method).dec()

        process_time = time.time() - start_time
        status_code = response.status_code

        # Label by route template so client paths never become label values
        route = request.scope.get("route")
        endpoint = getattr(route, "path", UNMATCHED_ENDPOINT)

        REQUEST_COUNT.labels(app_name=config.APP_NAME, method=method, endpoint=endpoint, status_code=status_code).inc()
        REQUEST_DURATION.labels(app_name=config.APP_NAME, method=method, endpoint=endpoint, status_code=status_code).observe(process_time)

        return response

    # --- Prometheus Metrics Endpoint ---
    @app.get("/metrics", response_class=PlainTextResponse, summary="Prometheus metrics endpoint")
    async def metrics():
        return PlainTextResponse(generate_latest(registry))

    # --- Root Endpoint ---
    @app.get("/", response_model=MessageResponse, status_code=status.HTTP_200_OK, summary="Root endpoint")
    async def read_root():
        return {"message": "Welcome to the Order Lookup Service!"}

    # --- Health Check Endpoint ---
    @app.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK, summary="Health check endpoint")
    async def health_check():
        return {"status": "ok", "service": config.SERVICE_NAME}

    order_endpoint = OrderEndpoint(
        lookup_service if lookup_service is not None else OrderLookupService()
    )
    app.include_router(order_endpoint.router)

    logger.info(
        f"Order Lookup Service: Application created using {type(order_endpoint.lookup_service).__name__}."
    )
    return app


app = create_app()


def run():
    uvicorn.run(
        "order_lookup.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
