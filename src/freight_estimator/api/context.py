"""Context manifest — makes the estimator self-describing.

Lists every tunable constant with its type, default, description, and
constraints, plus the endpoints that use them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from freight_estimator.config import (
    CapacityConfig,
    ComplianceConfig,
    EstimatorConfig,
    PricingConfig,
    RouteConfig,
)


class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one configuration section (e.g. capacity, pricing)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str


class EstimatorContext(BaseModel):
    """Full self-describing context."""
    name: str
    version: str
    description: str
    config_sections: list[SectionSchema]
    endpoints: list[EndpointInfo]


def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt", "min_length"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        if field_info.default_factory is not None:
            default_val = field_info.default_factory()
        else:
            default_val = field_info.default

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=default_val,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    for m in getattr(field_info, "metadata", []):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


_SECTIONS: list[tuple[str, type[BaseModel], str]] = [
    ("capacity", CapacityConfig, "Standard truck limits and vehicle-class thresholds"),
    ("pricing", PricingConfig, "Base overhead, markup, and trip reference format"),
    ("route", RouteConfig, "Mock distance table and per-km rates"),
    ("compliance", ComplianceConfig, "Document expiry and driver rest rules"),
]

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/health", description="Liveness check"),
    EndpointInfo(method="GET", path="/", description="Welcome message and pointer to /context"),
    EndpointInfo(method="GET", path="/context", description="This manifest"),
    EndpointInfo(method="GET", path="/config", description="Active configuration"),
    EndpointInfo(method="GET", path="/schema", description="JSON Schema of the configuration"),
    EndpointInfo(method="GET", path="/cities", description="Known city codes and labels"),
    EndpointInfo(method="POST", path="/estimate/load-capacity", description="Shipment utilization and vehicle class"),
    EndpointInfo(method="POST", path="/estimate/trip-cost", description="Trip cost, selling price, profit, TCN"),
    EndpointInfo(method="POST", path="/estimate/route", description="Distance, duration, fuel, tolls"),
    EndpointInfo(method="POST", path="/plan/trip", description="Route + costing in one call"),
    EndpointInfo(method="POST", path="/compliance/document", description="Document or licence expiry status"),
    EndpointInfo(method="POST", path="/compliance/rest", description="Driver rest status"),
]


def build_context(version: str) -> EstimatorContext:
    return EstimatorContext(
        name="Freight Estimator",
        version=version,
        description=(
            "Load-capacity, route, and trip-cost estimates for GCC freight trips. "
            "All constants are configurable; see config_sections."
        ),
        config_sections=[
            SectionSchema(section=name, description=desc, parameters=_extract_params(cls))
            for name, cls, desc in _SECTIONS
        ],
        endpoints=_ENDPOINTS,
    )


def get_config_schema() -> dict[str, Any]:
    """Full JSON Schema for EstimatorConfig."""
    return EstimatorConfig.model_json_schema()
