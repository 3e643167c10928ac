"""FastAPI server — JSON access to the freight estimators.

Run with:
    uvicorn freight_estimator.api.server:app --reload --port 8000

Or:
    freight-estimator-api

Endpoints:
    GET  /context                 — self-describing manifest (config sections + endpoints)
    GET  /config                  — active configuration as JSON
    GET  /schema                  — JSON Schema for the configuration
    GET  /cities                  — known city codes and labels
    POST /estimate/load-capacity  — shipment utilization + vehicle class
    POST /estimate/trip-cost      — cost, selling price, profit, trip reference
    POST /estimate/route          — distance, duration, fuel, tolls
    POST /plan/trip               — route + costing in one call
    POST /compliance/document     — document / licence expiry status
    POST /compliance/rest         — driver rest status

Invalid request bodies are rejected with HTTP 422.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from freight_estimator.api.context import build_context, get_config_schema
from freight_estimator.config.settings import EstimatorConfig, load_config
from freight_estimator.engine.compliance import document_status, rest_status
from freight_estimator.engine.load_capacity import compute_load_capacity
from freight_estimator.engine.planner import plan_trip
from freight_estimator.engine.references import (
    RandomTripReferenceAllocator,
    TripReferenceAllocator,
)
from freight_estimator.engine.route import estimate_route
from freight_estimator.engine.trip_cost import compute_trip_cost
from freight_estimator.log import configure_logging
from freight_estimator.models.inputs import (
    DocumentCheck,
    RestCheck,
    ShipmentLoad,
    TripCostInput,
    TripRequest,
)
from freight_estimator.models.results import (
    DocumentStatus,
    LoadCapacityResult,
    RestStatus,
    RouteEstimate,
    TripCostResult,
    TripPlan,
)

logger = logging.getLogger(__name__)

API_VERSION = "1.0"


# ═══════════════════════════════════════════════════════════════════════════
# Request models
# ═══════════════════════════════════════════════════════════════════════════

class RouteRequest(BaseModel):
    """Request body for /estimate/route."""
    origin: str = Field(min_length=1, description="Origin city code, e.g. 'dubai'")
    destination: str = Field(min_length=1, description="Destination city code, e.g. 'riyadh'")


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _config(request: Request) -> EstimatorConfig:
    return request.app.state.config


def _allocator(request: Request) -> TripReferenceAllocator:
    return request.app.state.allocator


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

router = APIRouter()


@router.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@router.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "Freight Estimator API",
        "version": API_VERSION,
        "start_here": "GET /context",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@router.get("/context")
def get_context():
    """Every configurable constant with defaults and constraints."""
    return build_context(API_VERSION)


@router.get("/config")
def get_config(request: Request):
    """The configuration this server is running with."""
    return _config(request).model_dump()


@router.get("/schema")
def get_schema():
    """Full JSON Schema for EstimatorConfig."""
    return get_config_schema()


@router.get("/cities")
def get_cities(request: Request):
    """Known city codes mapped to display labels."""
    return _config(request).route.cities


@router.post("/estimate/load-capacity", response_model=LoadCapacityResult)
def estimate_load_capacity_endpoint(load: ShipmentLoad, request: Request):
    """Utilization of one shipment against a standard truck.

    Example request:
    ```json
    {"weight_kg": 2500, "volume_cbm": 15.5, "pallet_count": 10}
    ```
    """
    return compute_load_capacity(load, _config(request).capacity)


@router.post("/estimate/trip-cost", response_model=TripCostResult)
def estimate_trip_cost_endpoint(cost_input: TripCostInput, request: Request):
    """Total cost, selling price, profit, and a fresh trip reference."""
    return compute_trip_cost(cost_input, _config(request).pricing, _allocator(request))


@router.post("/estimate/route", response_model=RouteEstimate)
def estimate_route_endpoint(req: RouteRequest, request: Request):
    """Distance lookup with derived duration, fuel cost, and tolls."""
    return estimate_route(req.origin, req.destination, _config(request).route)


@router.post("/plan/trip", response_model=TripPlan)
def plan_trip_endpoint(trip: TripRequest, request: Request):
    """Route and cost a trip in one call."""
    return plan_trip(trip, _config(request), _allocator(request))


@router.post("/compliance/document", response_model=DocumentStatus)
def document_status_endpoint(check: DocumentCheck, request: Request):
    """Expired / Expiring Soon / Valid for a document or licence."""
    return document_status(check.expiry_date, check.today, _config(request).compliance)


@router.post("/compliance/rest", response_model=RestStatus)
def rest_status_endpoint(check: RestCheck, request: Request):
    """Ready / Resting / Available for a driver."""
    return rest_status(check.resting_hours, _config(request).compliance)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

def create_app(
    config: EstimatorConfig | None = None,
    allocator: TripReferenceAllocator | None = None,
) -> FastAPI:
    """Build the API.  ``config`` defaults to :func:`load_config`.

    Logging is configured first so config loading is reported, including in
    the worker process uvicorn spawns with ``reload=True``.
    """
    configure_logging()
    config = config or load_config()
    if allocator is None:
        allocator = RandomTripReferenceAllocator(prefix=config.pricing.reference_prefix)
    elif allocator.prefix != config.pricing.reference_prefix:
        logger.warning(
            "Allocator prefix %r overrides configured reference_prefix %r",
            allocator.prefix, config.pricing.reference_prefix,
        )

    application = FastAPI(
        title="Freight Estimator API",
        version=API_VERSION,
        description=(
            "Load-capacity, route, and trip-cost estimates for freight trips. "
            "Start by calling GET /context to see every tunable constant."
        ),
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.state.config = config
    application.state.allocator = allocator
    application.include_router(router)
    return application


app = create_app()


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    configure_logging()
    logger.info("Starting Freight Estimator API %s", API_VERSION)
    uvicorn.run(
        "freight_estimator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
