"""Compliance checks — document expiry and driver rest."""

from __future__ import annotations

import datetime as dt

from freight_estimator.config.compliance import ComplianceConfig
from freight_estimator.models.results import DocumentStatus, RestStatus


def document_status(
    expiry_date: dt.date,
    today: dt.date | None = None,
    compliance: ComplianceConfig | None = None,
) -> DocumentStatus:
    """Classify a registration, insurance, or licence expiry date."""
    compliance = compliance or ComplianceConfig()
    days = (expiry_date - (today or dt.date.today())).days

    if days < 0:
        status = "Expired"
    elif days <= compliance.expiry_warning_days:
        status = "Expiring Soon"
    else:
        status = "Valid"
    return DocumentStatus(status=status, days_until_expiry=days)


def rest_status(
    resting_hours: float,
    compliance: ComplianceConfig | None = None,
) -> RestStatus:
    """Rest progress toward the required break between trips.

    A driver with no recorded rest is not mid-break, so reads as Available.
    """
    compliance = compliance or ComplianceConfig()
    required = compliance.required_rest_hours

    if resting_hours >= required:
        return RestStatus(status="Ready", progress_pct=100.0)
    if resting_hours > 0:
        return RestStatus(status="Resting", progress_pct=min(resting_hours / required * 100.0, 100.0))
    return RestStatus(status="Available", progress_pct=100.0)
