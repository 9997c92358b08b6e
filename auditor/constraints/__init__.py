"""Pluggable constraint validators."""

from auditor.constraints.registry import ConstraintRegistry, ConstraintValidator

__all__ = ["ConstraintRegistry", "ConstraintValidator"]
