"""
Shared pytest fixtures and configuration for the accessibility harness.

This file contains common fixtures used across the unit test modules:
temporary directories, mocked WebDriver sessions and sample axe-core results.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Generator
from unittest.mock import MagicMock

import pytest

from axe_harness.core.config import Settings
from axe_harness.core.log_config import HARNESS_LOGGER
from axe_harness.results import ScanResult
from axe_harness.session import BrowserSession

RESOURCES_DIR = Path(__file__).resolve().parent / "resources" / "html"


# ==================== DIRECTORY AND FILE FIXTURES ====================

@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield tmp_dir


@pytest.fixture
def resources_dir() -> Path:
    """Directory holding the HTML fixtures."""
    return RESOURCES_DIR


# ==================== SETTINGS FIXTURES ====================

@pytest.fixture
def test_settings(temp_dir: str) -> Settings:
    """Settings isolated from the developer's environment."""
    return Settings(
        headless=True,
        use_driver_manager=False,
        fixtures_dir=RESOURCES_DIR,
        artifacts_dir=Path(temp_dir) / "artifacts",
        log_level="0",
        log_file=None,
    )


@pytest.fixture
def clean_env():
    """Provide a clean environment for testing."""
    original_env = os.environ.copy()
    for var in list(os.environ):
        if var.startswith("A11Y_") or var in ("LOG_FILE", "LOG_LEVEL"):
            os.environ.pop(var, None)

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def restore_harness_logger():
    """configure_logging mutates the shared `axe_harness` logger; put it back afterwards."""
    logger = logging.getLogger(HARNESS_LOGGER)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


# ==================== WEBDRIVER FIXTURES ====================

@pytest.fixture
def mock_driver():
    """Mock Selenium WebDriver for session and executor tests."""
    driver = MagicMock()
    driver.find_elements.return_value = []
    driver.execute_async_script.return_value = '{"violations": [], "passes": []}'
    return driver


@pytest.fixture
def mock_session(mock_driver) -> BrowserSession:
    """An open BrowserSession around the mock driver."""
    return BrowserSession(mock_driver, label="mock-session")


# ==================== RESULT FIXTURES ====================

@pytest.fixture
def sample_axe_payload() -> Dict[str, Any]:
    """A trimmed axe-core result with one violation on three frames."""
    return {
        "testEngine": {"name": "axe-core", "version": "4.8.2"},
        "url": "file:///tmp/nested-iframes.html",
        "timestamp": "2024-01-01T00:00:00.000Z",
        "toolOptions": {"runOnly": {"type": "rule", "values": ["frame-title"]}},
        "violations": [
            {
                "id": "frame-title",
                "impact": "serious",
                "tags": ["cat.text-alternatives", "wcag2a", "wcag412"],
                "description": "Ensures <iframe> and <frame> elements have an accessible name",
                "help": "Frames must have an accessible name",
                "helpUrl": "https://dequeuniversity.com/rules/axe/4.8/frame-title",
                "nodes": [
                    {
                        "html": '<iframe src="frames/level-1.html">',
                        "target": ["iframe"],
                        "impact": "serious",
                        "failureSummary": "Fix any of the following:\n  Element has no title attribute",
                        "any": [{"id": "frame-title", "message": "Element has no title attribute"}],
                        "all": [],
                        "none": [],
                    },
                    {"html": '<iframe src="level-2.html">', "target": [["iframe", "iframe"]], "impact": "serious"},
                    {"html": '<iframe src="level-3.html">', "target": [["iframe", "iframe", "iframe"]]},
                ],
            }
        ],
        "passes": [],
        "incomplete": [],
        "inapplicable": [{"id": "frame-title-unique", "tags": ["best-practice"], "nodes": []}],
    }


@pytest.fixture
def sample_result(sample_axe_payload) -> ScanResult:
    return ScanResult.model_validate(sample_axe_payload)


# ==================== PYTEST MARKERS ====================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "a11y: axe-core accessibility scans")
    config.addinivalue_line("markers", "browser: needs a real Chrome/Chromium browser")
