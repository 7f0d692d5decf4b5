"""Conftest file for a11y tests to import fixtures"""

from axe_harness.core.config import settings
from axe_harness.core.log_config import configure_logging

# Import all fixtures from a11y_utils to make them available to test files
from .a11y_utils import a11y_session, fixture_registry, reporter, scan, scan_executor, session_manager


def pytest_configure(config):
    """Apply LOG_LEVEL / LOG_FILE before any browser is opened."""
    configure_logging(settings)
