"""Health check utilities for the HTTP server."""

from dataclasses import dataclass, field
from typing import Any

from serper_mcp.config import settings


@dataclass
class HealthStatus:
    """Health status of a component."""

    name: str
    healthy: bool
    message: str = ""
    latency_ms: float = 0.0
    details: dict[str, Any] = field(default_factory=dict)


class HealthChecker:
    """
    Health checker for the application.

    Checks configuration and returns overall status.
    """

    async def check_api_key_configured(self) -> HealthStatus:
        """Check that SERPER_API_KEY is set."""
        configured = settings.is_api_key_configured()
        return HealthStatus(
            name="api_key",
            healthy=configured,
            message="Serper API key configured" if configured else "SERPER_API_KEY is not set",
            details={"base_url": settings.base_url},
        )

    async def check_all(self) -> dict[str, Any]:
        """
        Run all health checks and return overall status.

        Returns:
            Dictionary with health status information
        """
        checks = [
            await self.check_api_key_configured(),
        ]

        all_healthy = all(check.healthy for check in checks)

        return {
            "healthy": all_healthy,
            "status": "healthy" if all_healthy else "unhealthy",
            "checks": {
                check.name: {
                    "healthy": check.healthy,
                    "message": check.message,
                    "latency_ms": check.latency_ms,
                    "details": check.details,
                }
                for check in checks
            },
            "version": "0.1.0",
        }

    async def check_readiness(self) -> dict[str, Any]:
        """Lightweight readiness check: the server can only serve with an API key."""
        api_key_check = await self.check_api_key_configured()

        return {
            "ready": api_key_check.healthy,
            "status": "ready" if api_key_check.healthy else "not_ready",
        }

    async def check_liveness(self) -> dict[str, Any]:
        """Minimal liveness check."""
        return {
            "alive": True,
            "status": "alive",
        }
