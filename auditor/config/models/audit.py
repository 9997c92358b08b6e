"""Audit engine configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

FailurePolicy = Literal["raise", "ignore"]


class AuditConfig(BaseModel):
    """Event validation and emission settings."""

    max_length: int = Field(
        default=32,
        ge=0,
        description="Maximum length of event names and attribute keys, 0 for unbounded",
    )
    failure_policy: FailurePolicy = Field(
        default="raise",
        description="Default handling of sink failures: raise an AuditSinkError or ignore",
    )
    strict_constraints: bool = Field(
        default=False,
        description="Report constraint types without a registered validator as errors",
    )
    sink: Literal["logging", "memory"] = Field(
        default="logging",
        description="Sink receiving validated messages",
    )
