"""
Accessibility Testing Harness

Selenium + axe-core glue for scanning local HTML fixtures: fixture lookup,
per-test browser sessions, immutable scan requests, JSON result artifacts
and count assertions.
"""

from axe_harness.assertions import assert_no_violations, assert_node_count, assert_violation_count
from axe_harness.executor import ScanExecutor
from axe_harness.fixtures import Fixture, FixtureRegistry, default_registry
from axe_harness.pipeline import scan_and_report
from axe_harness.reporter import ResultReporter
from axe_harness.request import ScanRequest
from axe_harness.results import NodeResult, RuleResult, ScanResult
from axe_harness.session import BrowserSession, SessionManager

__version__ = "1.0.0"

__all__ = [
    "BrowserSession",
    "Fixture",
    "FixtureRegistry",
    "NodeResult",
    "ResultReporter",
    "RuleResult",
    "ScanExecutor",
    "ScanRequest",
    "ScanResult",
    "SessionManager",
    "assert_no_violations",
    "assert_node_count",
    "assert_violation_count",
    "default_registry",
    "scan_and_report",
]
