"""Ambient request context for audit events.

Values describing the current logical request (request id, user, client
address, ...) live in a ContextVar. Each thread and each asyncio task
sees its own copy; updates replace the stored mapping instead of
mutating it, so a snapshot taken earlier never changes.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType

_EMPTY: Mapping[str, str] = MappingProxyType({})

_request_context: ContextVar[Mapping[str, str]] = ContextVar(
    "audit_request_context", default=_EMPTY
)


def get_immutable_snapshot() -> Mapping[str, str]:
    """Get a read-only view of the current request context."""
    return _request_context.get()


def contains_key(name: str) -> bool:
    return name in _request_context.get()


def get(name: str, default: str | None = None) -> str | None:
    return _request_context.get().get(name, default)


def put(name: str, value: str) -> None:
    """Set one request context value."""
    put_all({name: value})


def put_all(values: Mapping[str, str]) -> None:
    """Set several request context values at once."""
    merged = dict(_request_context.get())
    merged.update(values)
    _request_context.set(MappingProxyType(merged))


def remove(name: str) -> None:
    current = _request_context.get()
    if name in current:
        _request_context.set(MappingProxyType({k: v for k, v in current.items() if k != name}))


def clear() -> None:
    _request_context.set(_EMPTY)


@contextmanager
def request_context(values: Mapping[str, str] | None = None, **kwargs: str) -> Iterator[Mapping[str, str]]:
    """Bind request context values for the duration of a block.

    The previous context is restored on exit, including on error.

    Example:
        with request_context({"requestId": "r-1"}, userId="alice"):
            logger.log_event("UserLogin", {...})
    """
    merged = dict(_request_context.get())
    if values:
        merged.update(values)
    merged.update(kwargs)
    token = _request_context.set(MappingProxyType(merged))
    try:
        yield _request_context.get()
    finally:
        _request_context.reset(token)
