"""Tests for ConstraintRegistry."""

from auditor.constraints.registry import ConstraintRegistry


def not_empty(is_request_context: bool, name: str, value: str, argument: str) -> list[str]:  # noqa: ARG001
    return [] if value else [f"{name} must not be empty"]


class TestRegistration:
    """Tests for registering validators."""

    def test_register_and_evaluate(self) -> None:
        registry = ConstraintRegistry()
        registry.register("notEmpty", not_empty)

        assert registry.evaluate(False, "notEmpty", "userId", "", "") == ["userId must not be empty"]
        assert registry.evaluate(False, "notEmpty", "userId", "alice", "") == []

    def test_type_is_case_insensitive(self) -> None:
        registry = ConstraintRegistry()
        registry.register("notEmpty", not_empty)

        assert registry.is_registered("NOTEMPTY")
        assert registry.evaluate(False, "notempty", "userId", "", "") == ["userId must not be empty"]

    def test_decorator(self) -> None:
        registry = ConstraintRegistry()

        @registry.constraint("minLength")
        def min_length(is_request_context, name, value, argument):
            return [] if len(value) >= int(argument) else [f"{name} is too short"]

        assert registry.constraint_types == ["minlength"]
        assert registry.evaluate(False, "minLength", "userId", "ab", "3") == ["userId is too short"]

    def test_replace_and_unregister(self) -> None:
        registry = ConstraintRegistry()
        registry.register("check", not_empty)
        registry.register("check", lambda *args: ["always"])

        assert registry.evaluate(False, "check", "userId", "alice", "") == ["always"]

        registry.unregister("check")
        assert not registry.is_registered("check")

    def test_request_context_flag_passed(self) -> None:
        calls = []
        registry = ConstraintRegistry()
        registry.register(
            "spy", lambda ctx, name, value, arg: calls.append((ctx, name, value, arg)) or []
        )

        registry.evaluate(True, "spy", "requestId", "r-1", "arg")

        assert calls == [(True, "requestId", "r-1", "arg")]


class TestUnknownTypes:
    """Tests for constraint types without a validator."""

    def test_ignored_by_default(self) -> None:
        assert ConstraintRegistry().evaluate(False, "retired", "userId", "alice", "") == []

    def test_error_in_strict_mode(self) -> None:
        registry = ConstraintRegistry(strict=True)

        assert registry.evaluate(False, "retired", "userId", "alice", "") == [
            "Unknown constraint type retired for attribute userId"
        ]
