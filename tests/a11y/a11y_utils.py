"""Browser Fixtures for axe-core Scans"""

import shutil
from pathlib import Path

import pytest

from axe_harness.core.config import settings
from axe_harness.executor import ScanExecutor
from axe_harness.fixtures import default_registry
from axe_harness.pipeline import scan_and_report
from axe_harness.reporter import ResultReporter
from axe_harness.session import SessionManager

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources" / "html"

_BROWSERS = ("google-chrome", "google-chrome-stable", "chromium", "chromium-browser", "chrome")


def check_browser_available():
    """Check if a Chrome/Chromium binary can be found."""
    if settings.chrome_binary:
        return Path(settings.chrome_binary).exists()
    return any(shutil.which(name) for name in _BROWSERS)


@pytest.fixture(scope="session")
def fixture_registry():
    """Registry for the bundled HTML fixtures."""
    return default_registry(RESOURCES_DIR)


@pytest.fixture(scope="session")
def session_manager():
    return SessionManager(settings)


@pytest.fixture
def a11y_session(session_manager):
    """One browser per test, closed whatever the test outcome."""
    with session_manager.session() as session:
        yield session


@pytest.fixture(scope="session")
def scan_executor():
    return ScanExecutor(settings)


@pytest.fixture(scope="session")
def reporter():
    return ResultReporter(settings.artifacts_dir)


@pytest.fixture
def scan(request, scan_executor, reporter):
    """Run a ScanRequest and persist the result under the current test's node id."""

    def _scan(scan_request):
        return scan_and_report(scan_executor, reporter, scan_request, request.node.nodeid)

    return _scan
