"""
Monitoring module.

Limitations:
- Liveness probe only; no metrics or readiness checks
"""

from credcore.monitoring.health import setup_health_endpoint

__all__ = ["setup_health_endpoint"]
