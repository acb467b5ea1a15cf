"""Health-check payload."""

from epf_projection.config import AppSettings
from epf_projection.schemas.ping import PingResponse


def get_ping_response(settings: AppSettings) -> PingResponse:
    """Report liveness plus the limits this instance runs with."""
    return PingResponse(
        message="pong",
        service=settings.service_name,
        maxYears=settings.max_years,
    )
