"""Count checks over a ScanResult. Failures carry expected vs. actual values."""

from __future__ import annotations

from typing import NoReturn

from axe_harness.core.errors import AssertionFailure
from axe_harness.reporter import ResultReporter
from axe_harness.results import RuleResult, ScanResult


def _fail(message: str, expected, actual, result: ScanResult) -> NoReturn:
    raise AssertionFailure(
        f"{message}: expected {expected}, got {actual}\n{ResultReporter.summarize(result)}",
        expected=expected,
        actual=actual,
    )


def assert_violation_count(result: ScanResult, expected: int, message: str = "Violation count mismatch") -> None:
    actual = result.violation_count
    if actual != expected:
        _fail(message, expected, actual, result)


def assert_no_violations(result: ScanResult) -> None:
    assert_violation_count(result, 0, "Expected no violations")


def _pick(result: ScanResult, index: int | None, rule_id: str | None) -> RuleResult:
    if (index is None) == (rule_id is None):
        raise ValueError("Pass exactly one of index or rule_id")
    if rule_id is not None:
        violation = result.violation(rule_id)
        if violation is None:
            _fail(f"No violation for rule '{rule_id}'", rule_id, result.violation_ids(), result)
        return violation
    if not 0 <= index < result.violation_count:
        _fail(f"No violation at position {index}", f"index < {result.violation_count}", index, result)
    return result.violations[index]


def assert_node_count(
    result: ScanResult, expected: int, index: int | None = None, rule_id: str | None = None
) -> None:
    violation = _pick(result, index, rule_id)
    actual = violation.node_count
    if actual != expected:
        _fail(f"Node count mismatch for '{violation.rule_id}'", expected, actual, result)
