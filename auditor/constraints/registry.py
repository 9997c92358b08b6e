"""Constraint registry: dispatches constraint evaluation by type identifier.

Constraint algorithms are supplied by the deployment. A validator is any
callable taking ``(is_request_context, attribute_name, value, argument)``
and returning a list of human readable errors, empty when the value is
acceptable.
"""

from collections.abc import Callable
from typing import Protocol

from auditor.observability.logging import get_logger

logger = get_logger(__name__)


class ConstraintValidator(Protocol):
    """Callable validating one value against one constraint argument."""

    def __call__(
        self,
        is_request_context: bool,
        attribute_name: str,
        value: str,
        argument: str,
    ) -> list[str]: ...


class ConstraintRegistry:
    """Open registry mapping constraint type identifiers to validators.

    Type identifiers are matched case-insensitively. Catalogs are authored
    externally and may reference constraint types this process does not
    know; those are skipped with a warning unless ``strict`` is set, in
    which case they are reported as validation errors.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._validators: dict[str, ConstraintValidator] = {}

    def register(self, constraint_type: str, validator: ConstraintValidator) -> None:
        """Register a validator, replacing any previous one for the type."""
        key = constraint_type.lower()
        if key in self._validators:
            logger.info("constraint_type_replaced", constraint_type=constraint_type)
        self._validators[key] = validator

    def constraint(
        self, constraint_type: str
    ) -> Callable[[ConstraintValidator], ConstraintValidator]:
        """Decorator form of register.

        Example:
            @registry.constraint("maxLength")
            def max_length(is_request_context, name, value, argument):
                ...
        """

        def decorator(validator: ConstraintValidator) -> ConstraintValidator:
            self.register(constraint_type, validator)
            return validator

        return decorator

    def unregister(self, constraint_type: str) -> None:
        self._validators.pop(constraint_type.lower(), None)

    def is_registered(self, constraint_type: str) -> bool:
        return constraint_type.lower() in self._validators

    @property
    def constraint_types(self) -> list[str]:
        return sorted(self._validators)

    def evaluate(
        self,
        is_request_context: bool,
        constraint_type: str,
        attribute_name: str,
        value: str,
        argument: str,
    ) -> list[str]:
        """Evaluate one constraint against a value.

        Args:
            is_request_context: Whether the value came from the request context
            constraint_type: Registered constraint type identifier
            attribute_name: Attribute the value belongs to
            value: Value to check
            argument: Constraint argument from the catalog

        Returns:
            Error strings, empty when the constraint is satisfied
        """
        validator = self._validators.get(constraint_type.lower())
        if validator is None:
            logger.warning(
                "constraint_type_unknown",
                constraint_type=constraint_type,
                attribute=attribute_name,
                strict=self.strict,
            )
            if self.strict:
                return [
                    f"Unknown constraint type {constraint_type} for attribute {attribute_name}"
                ]
            return []
        return list(validator(is_request_context, attribute_name, value, argument))
