"""Node API clients."""

from .health import HealthClient, HealthReply, CheckResult

__all__ = [
    "HealthClient",
    "HealthReply",
    "CheckResult",
]
