"""Tests for peck.log — check(), Rule, and ValidationLog."""

import logging

import pytest

from peck.log import Rule, ValidationLog, check
from peck.result import ValidationResult

# ---------------------------------------------------------------------------
# check() — single-check append style
# ---------------------------------------------------------------------------


class TestCheck:
    def test_none_becomes_dict(self) -> None:
        errors = check(None, "name", True, "should not appear")
        assert errors == {}

    def test_pass_fail_fail(self) -> None:
        errors = None
        errors = check(errors, "name", True, "should not appear")
        errors = check(errors, "name", False, "required")
        errors = check(errors, "name", False, "too short")

        assert list(errors) == ["name"]
        assert errors["name"] == ["required", "too short"]

    def test_empty_message_recorded(self) -> None:
        errors = check(None, "name", False, "should appear")
        errors = check(errors, "name", False, "")
        assert errors["name"] == ["should appear", ""]

    def test_returns_same_dict(self) -> None:
        errors: dict[str, list[str]] = {}
        assert check(errors, "x", False, "bad") is errors
        assert errors == {"x": ["bad"]}

    def test_pass_leaves_dict_unchanged(self) -> None:
        errors = {"x": ["bad"]}
        check(errors, "y", True, "ignored")
        assert errors == {"x": ["bad"]}

    def test_fields_kept_separate(self) -> None:
        errors = check(None, "a", False, "one")
        errors = check(errors, "b", False, "two")
        assert errors == {"a": ["one"], "b": ["two"]}

    def test_logs_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="peck.log")
        check(None, "email", False, "Must be a valid email")
        assert "email" in caplog.text
        assert "Must be a valid email" in caplog.text


# ---------------------------------------------------------------------------
# Rule
# ---------------------------------------------------------------------------


class TestRule:
    def test_fields(self) -> None:
        rule = Rule(False, "bad")
        assert rule.ok is False
        assert rule.message == "bad"

    def test_frozen(self) -> None:
        rule = Rule(True, "")
        with pytest.raises(AttributeError):
            rule.ok = False  # type: ignore[misc]


# ---------------------------------------------------------------------------
# ValidationLog — batch-rule style
# ---------------------------------------------------------------------------


class TestValidationLog:
    def test_fresh_log_is_valid(self) -> None:
        log = ValidationLog()
        assert log.ok is True
        assert log.is_valid is True
        assert bool(log) is True
        assert len(log) == 0

    def test_failing_rules_in_order(self) -> None:
        log = ValidationLog()
        log.check(
            "name",
            Rule(True, "skipped"),
            Rule(False, "required"),
            Rule(False, "too short"),
        )
        assert log.messages("name") == ["required", "too short"]
        assert log.ok is False

    def test_passing_rules_add_nothing(self) -> None:
        log = ValidationLog()
        log.check("name", Rule(True, "a"), Rule(True, "b"))
        assert log.ok is True
        assert "name" not in log

    def test_no_rules(self) -> None:
        log = ValidationLog()
        log.check("name")
        assert log.ok is True

    def test_repeated_calls_append(self) -> None:
        log = ValidationLog()
        log.check("name", Rule(False, "first"))
        log.check("name", Rule(False, "second"))
        assert log.messages("name") == ["first", "second"]

    def test_never_valid_again(self) -> None:
        log = ValidationLog()
        log.check("name", Rule(False, "bad"))
        log.check("name", Rule(True, "fine"))
        log.check("other", Rule(True, "fine"))
        assert log.ok is False

    def test_empty_message_recorded(self) -> None:
        log = ValidationLog()
        log.check("name", Rule(False, ""))
        assert log.messages("name") == [""]
        assert log.ok is False

    def test_add(self) -> None:
        log = ValidationLog()
        log.add("email", "Already taken")
        assert log.errors == {"email": ["Already taken"]}

    def test_messages_for_unknown_field(self) -> None:
        assert ValidationLog().messages("nope") == []

    def test_messages_is_copy(self) -> None:
        log = ValidationLog()
        log.add("a", "x")
        log.messages("a").append("y")
        assert log.messages("a") == ["x"]

    def test_errors_view_is_read_only(self) -> None:
        log = ValidationLog()
        log.add("a", "x")
        with pytest.raises(TypeError):
            log.errors["b"] = ["y"]  # type: ignore[index]

    def test_container_protocol(self) -> None:
        log = ValidationLog()
        log.add("a", "x")
        log.add("b", "y")
        log.add("a", "z")
        assert "a" in log
        assert "c" not in log
        assert sorted(log) == ["a", "b"]
        assert len(log) == 2

    def test_repr(self) -> None:
        log = ValidationLog()
        log.add("a", "x")
        assert repr(log) == "ValidationLog({'a': ['x']})"


class TestMerge:
    def test_merge_log(self) -> None:
        log = ValidationLog()
        log.add("name", "first")

        other = ValidationLog()
        other.add("name", "second")
        other.add("email", "bad")

        log.merge(other)
        assert log.messages("name") == ["first", "second"]
        assert log.messages("email") == ["bad"]

    def test_merge_check_dict(self) -> None:
        errors = check(None, "age", False, "Must be a number")
        errors = check(errors, "age", False, "Must be positive")

        log = ValidationLog()
        log.merge(errors)
        assert log.messages("age") == ["Must be a number", "Must be positive"]

    def test_merge_empty_lists_adds_no_field(self) -> None:
        log = ValidationLog()
        log.merge({"name": []})
        assert log.ok is True
        assert "name" not in log

    def test_merge_self_duplicates_once(self) -> None:
        log = ValidationLog()
        log.add("a", "x")
        log.merge(log)
        assert log.messages("a") == ["x", "x"]

    def test_merge_valid_log(self) -> None:
        log = ValidationLog()
        log.merge(ValidationLog())
        assert log.ok is True


class TestResult:
    def test_result_from_log(self) -> None:
        log = ValidationLog()
        log.add("age", "Must be a number")
        result = log.result({"name": "alice", "age": "x"})

        assert isinstance(result, ValidationResult)
        assert result.is_valid is False
        assert result.data == {"name": "alice"}
        assert result.errors == {"age": ["Must be a number"]}

    def test_result_without_data(self) -> None:
        result = ValidationLog().result()
        assert result.is_valid is True
        assert result.data == {}

    def test_result_detached_from_log(self) -> None:
        log = ValidationLog()
        log.add("a", "x")
        result = log.result()
        log.add("a", "y")
        assert result.errors == {"a": ["x"]}


class TestBothStylesAgree:
    def test_same_messages_same_order(self) -> None:
        outcomes = [(True, "p"), (False, "f1"), (False, "f2")]

        errors = None
        for ok, message in outcomes:
            errors = check(errors, "field", ok, message)

        log = ValidationLog()
        log.check("field", *(Rule(ok, message) for ok, message in outcomes))

        assert dict(log.errors) == errors
