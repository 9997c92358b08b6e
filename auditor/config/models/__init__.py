"""Configuration model exports.

    from auditor.config.models import APIConfig, AuditConfig
"""

from auditor.config.models.api import APIConfig
from auditor.config.models.audit import AuditConfig
from auditor.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)

__all__ = [
    "APIConfig",
    "AuditConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
]
