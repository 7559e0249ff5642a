from __future__ import annotations

from enum import Enum


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    NEEDS_ATTENTION = "needs attention"
