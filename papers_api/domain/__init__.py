"""Domain models used across application layer boundaries."""

from .models import HealthStatus, ServiceState, domain_build_health_status

__all__ = ["HealthStatus", "ServiceState", "domain_build_health_status"]
