#!/usr/bin/env python3
"""
Tests for the expression evaluator and the default executor.
"""

import pytest

from stellar_shell.core import EvaluationError, ParseError
from stellar_shell.engine import Evaluator, Executor, StellarExecutor


@pytest.fixture
def evaluator(registry):
    return Evaluator(registry)


# ============================================================================
# Evaluator Tests
# ============================================================================

class TestEvaluator:
    """Tests for Evaluator.evaluate()."""

    @pytest.mark.parametrize("expression,expected", [
        ("1 + 2", 3),
        ("7 // 2", 3),
        ("7 % 4", 3),
        ("10 / 4", 2.5),
        ("-3", -3),
        ("'a' + 'b'", "ab"),
        ("[1, 2, 3]", [1, 2, 3]),
        ("{'a': 1}", {"a": 1}),
        ("(1, 2)", (1, 2)),
        ("[10, 20][1]", 20),
        ("{'k': 'v'}['k']", "v"),
        ("1 < 2 < 3", True),
        ("2 in [1, 2]", True),
        ("3 not in [1, 2]", True),
        ("not true", False),
        ("true and false", False),
        ("false or 'x'", "x"),
        ("'yes' if 1 == 1 else 'no'", "yes"),
    ])
    def test_expressions(self, evaluator, expression, expected):
        assert evaluator.evaluate(expression, {}) == expected

    @pytest.mark.parametrize("name,expected", [
        ("true", True), ("TRUE", True), ("False", False), ("null", None), ("NULL", None),
    ])
    def test_constants_any_case(self, evaluator, name, expected):
        assert evaluator.evaluate(name, {}) is expected

    def test_variables(self, evaluator):
        assert evaluator.evaluate("x + y", {"x": 1, "y": 2}) == 3

    def test_variable_shadows_constant(self, evaluator):
        assert evaluator.evaluate("null", {"null": 5}) == 5

    def test_unknown_variable_is_null(self, evaluator):
        assert evaluator.evaluate("missing", {}) is None

    def test_blank_is_null(self, evaluator):
        assert evaluator.evaluate("", {}) is None
        assert evaluator.evaluate("   ", {}) is None

    def test_function_call(self, evaluator):
        assert evaluator.evaluate("TO_UPPER(TO_LOWER('AbC'))", {}) == "ABC"

    def test_dotted_function_name(self, registry, evaluator):
        registry.register(lambda values: sum(values) / len(values), name="STATS.MEAN")
        assert evaluator.evaluate("STATS.MEAN([1, 2, 3])", {}) == 2

    def test_unknown_function(self, evaluator):
        with pytest.raises(EvaluationError, match="Unable to resolve function NOPE"):
            evaluator.evaluate("NOPE()", {})

    def test_function_failure(self, evaluator):
        with pytest.raises(EvaluationError, match="Unable to execute FAIL: boom"):
            evaluator.evaluate("FAIL()", {})

    def test_keyword_arguments_rejected(self, evaluator):
        with pytest.raises(ParseError):
            evaluator.evaluate("TO_UPPER(value='a')", {})

    def test_syntax_error(self, evaluator):
        with pytest.raises(ParseError, match="Unable to parse"):
            evaluator.evaluate("1 +", {})

    @pytest.mark.parametrize("expression", [
        "lambda: 1",
        "[x for x in y]",
        "x.attr",
        "__import__('os')",
    ])
    def test_unsupported_syntax(self, evaluator, expression):
        with pytest.raises((ParseError, EvaluationError)):
            evaluator.evaluate(expression, {})

    def test_type_error_becomes_evaluation_error(self, evaluator):
        with pytest.raises(EvaluationError):
            evaluator.evaluate("1 + 'a'", {})

    def test_bad_index(self, evaluator):
        with pytest.raises(EvaluationError, match="Unable to index list"):
            evaluator.evaluate("[1][5]", {})

    def test_division_by_zero(self, evaluator):
        with pytest.raises(EvaluationError):
            evaluator.evaluate("1 / 0", {})


# ============================================================================
# Executor Tests
# ============================================================================

class TestStellarExecutor:
    """Tests for StellarExecutor."""

    def test_satisfies_protocol(self, executor):
        assert isinstance(executor, Executor)

    def test_execute_uses_variables(self, executor):
        executor.assign("name", None, "casey")
        assert executor.execute("TO_UPPER(name)") == "CASEY"

    def test_parse_error_is_evaluation_error(self, executor):
        with pytest.raises(EvaluationError):
            executor.execute("(")

    def test_assign_keeps_order(self, executor):
        executor.assign("b", "1", 1)
        executor.assign("a", "2", 2)
        executor.assign("b", "3", 3)
        assert list(executor.get_variables()) == ["b", "a"]
        assert executor.get_variables()["b"] == 3

    def test_assign_none(self, executor):
        executor.assign("x", "null", None)
        assert executor.get_variables() == {"x": None}
        assert executor.variables["x"].expression == "null"

    def test_get_variables_is_a_copy(self, executor):
        executor.get_variables()["x"] = 1
        assert executor.get_variables() == {}

    def test_defaults(self):
        executor = StellarExecutor()
        assert len(executor.function_registry) == 0
        assert executor.global_config is None
        assert executor.properties == {}

    def test_properties_and_global_config(self, registry):
        executor = StellarExecutor(
            registry,
            properties={"a": "1"},
            global_config={"es.ip": "localhost"},
        )
        assert executor.properties == {"a": "1"}
        assert executor.global_config == {"es.ip": "localhost"}
        assert executor.function_registry is registry


# ============================================================================
# Executor Context Tests
# ============================================================================

class TestExecutorContext:
    """Functions can reach the evaluating executor."""

    def test_current_executor_during_call(self, registry):
        from stellar_shell.engine import get_current_executor

        seen = []
        registry.register(lambda: seen.append(get_current_executor()), name="CAPTURE")
        executor = StellarExecutor(registry)
        executor.execute("CAPTURE()")

        assert seen == [executor]
        assert get_current_executor() is None

    def test_context_reset_after_failure(self, executor):
        from stellar_shell.engine import get_current_executor

        with pytest.raises(EvaluationError):
            executor.execute("FAIL()")
        assert get_current_executor() is None

    def test_properties_outside_evaluation(self):
        from stellar_shell.engine import get_properties
        assert get_properties() == {}
