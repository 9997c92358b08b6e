"""Event validation against the catalog and the request context.

Validation runs in a fixed order of stages:

1. Resolve the event schema (fails immediately when unknown)
2. Check required attributes are present and satisfy their constraints
3. Reject attributes the event does not define
4. Report all missing required attributes in one line
5. Fail with every attribute error collected by stages 2-4
6. Check supplied names against the event's attribute name list
7. Check required request context values are present
8. Check request context values against their constraints
9. Build the AuditMessage

Attribute problems and request context problems are raised as separate
exception types so callers can tell bad input from a bad environment.
"""

from collections.abc import Mapping, Sequence

from auditor import context as request_context
from auditor.audit.models import (
    COMPLETION_STATUS,
    DEFAULT_MAX_LENGTH,
    AuditMessage,
    AuditMessageId,
    structured_data_errors,
)
from auditor.catalog.models import Constraint
from auditor.catalog.store import CatalogStore
from auditor.constraints.registry import ConstraintRegistry
from auditor.errors import (
    InvalidAttributesError,
    InvalidContextError,
    MessageFormatError,
    MissingContextError,
    UnknownEventError,
)


class EventValidator:
    """Validates audit events and builds their messages.

    Holds read-only references to the catalog and constraint registry and
    keeps no per-call state, so one instance may serve concurrent callers.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        constraints: ConstraintRegistry,
        *,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        self._catalog = catalog
        self._constraints = constraints
        self._max_length = max_length

    @property
    def max_length(self) -> int:
        return self._max_length

    def validate(
        self,
        event_name: str,
        attributes: Mapping[str, str],
        *,
        catalog_id: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> AuditMessage:
        """Validate an event and build its message.

        Args:
            event_name: Name of the catalog event
            attributes: Caller supplied attribute values
            catalog_id: Catalog to resolve the event in, default catalog if None
            context: Request context snapshot; the ambient context if None

        Returns:
            The emission-ready AuditMessage

        Raises:
            UnknownEventError: The catalog has no such event
            InvalidAttributesError: Attributes are missing, undefined or invalid
            MissingContextError: Required request context values are absent
            InvalidContextError: Request context values violate constraints
            MessageFormatError: Name or keys break structured data rules
        """
        event = self._catalog.get_event(event_name, catalog_id)
        if event is None:
            raise UnknownEventError(event_name, catalog_id)

        errors: list[str] = []
        missing: list[str] = []

        for ref in event.attributes:
            definition = self._catalog.get_attribute(ref.name, event.catalog_id)
            if definition is not None and definition.request_context:
                continue
            if not (ref.required or (definition is not None and definition.required)):
                continue
            if ref.name not in attributes:
                missing.append(ref.name)
            elif definition is not None and definition.constraints:
                errors.extend(
                    self._check_constraints(
                        False, definition.constraints, ref.name, attributes[ref.name]
                    )
                )

        defined = self._catalog.get_attributes(event_name, event.catalog_id)
        for name in attributes:
            if name not in defined and name != COMPLETION_STATUS:
                errors.append(f"Attribute {name} is not defined for {event_name}")

        if missing:
            errors.append(
                f"Event {event_name} is missing required attribute(s) {', '.join(missing)}"
            )

        if errors:
            raise InvalidAttributesError("\n".join(errors), errors)

        # Only reachable when a store's name list omits an attribute its
        # definition map includes.
        names = set(self._catalog.get_attribute_names(event_name, event.catalog_id))
        invalid = [n for n in attributes if n not in names and n != COMPLETION_STATUS]
        if invalid:
            raise InvalidAttributesError(
                f"Event {event_name} contains invalid attribute(s) {', '.join(invalid)}"
            )

        snapshot = (
            context if context is not None else request_context.get_immutable_snapshot()
        )

        required_context = self._catalog.get_required_context_attributes(
            event_name, event.catalog_id
        )
        absent = [name for name in required_context if name not in snapshot]
        if absent:
            raise MissingContextError(event_name, absent)

        context_definitions = self._catalog.get_request_context_attributes()
        context_errors: list[str] = []
        for key, value in snapshot.items():
            definition = context_definitions.get(key)
            if definition is None or not definition.constraints:
                continue
            context_errors.extend(
                self._check_constraints(True, definition.constraints, key, value)
            )
        if context_errors:
            raise InvalidContextError(
                f"Event {event_name} has incorrect data in the Thread Context: "
                + "\n".join(context_errors),
                context_errors,
            )

        return self.build_message(event_name, attributes)

    def build_message(self, event_name: str, attributes: Mapping[str, str]) -> AuditMessage:
        """Assemble the message from already validated input."""
        format_errors = structured_data_errors(event_name, attributes, self._max_length)
        if format_errors:
            raise MessageFormatError("\n".join(format_errors), format_errors)
        return AuditMessage(
            id=AuditMessageId(name=event_name),
            data=dict(attributes),
            max_length=self._max_length,
        )

    def _check_constraints(
        self,
        is_request_context: bool,
        constraints: Sequence[Constraint],
        name: str,
        value: str,
    ) -> list[str]:
        errors: list[str] = []
        for constraint in constraints:
            errors.extend(
                self._constraints.evaluate(
                    is_request_context,
                    constraint.constraint_type,
                    name,
                    value,
                    constraint.value,
                )
            )
        return errors
