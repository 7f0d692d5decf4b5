import logging

from axe_harness.executor import ScanExecutor
from axe_harness.reporter import ResultReporter
from axe_harness.request import ScanRequest
from axe_harness.results import ScanResult

logger = logging.getLogger(__name__)


def scan_and_report(
    executor: ScanExecutor, reporter: ResultReporter, request: ScanRequest, test_name: str
) -> ScanResult:
    """Run the scan and persist its result before anyone asserts on it.

    A failed scan propagates unchanged; there is no result to persist.
    """
    try:
        result = executor.analyze(request)
    except Exception:
        logger.error("Scan failed for %s; no artifact written", test_name, extra={"test_name": test_name})
        raise
    reporter.report(test_name, result)
    return result
