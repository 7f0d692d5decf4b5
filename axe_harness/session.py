"""Per-test browser sessions.

Each test owns exactly one ``BrowserSession``. ``SessionManager.session()``
opens it on entry and always closes it on exit, whatever the test did.
"""

from __future__ import annotations

import itertools
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from webdriver_manager.chrome import ChromeDriverManager

from axe_harness.core.config import Settings, settings as default_settings
from axe_harness.core.errors import NavigationError, SessionClosedError, SessionStartError

logger = logging.getLogger(__name__)

_session_ids = itertools.count(1)


class BrowserSession:
    """One live WebDriver connection."""

    def __init__(self, driver: Any, label: str | None = None) -> None:
        self._driver = driver
        self._closed = False
        self.label = label or f"session-{next(_session_ids)}"

    @property
    def driver(self) -> Any:
        return self._driver

    @property
    def closed(self) -> bool:
        return self._closed

    def ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError(f"{self.label} is closed")

    def mark_closed(self) -> None:
        self._closed = True

    def navigate(self, uri: str) -> None:
        self.ensure_open()
        logger.debug("%s navigating to %s", self.label, uri, extra={"uri": uri})
        try:
            self._driver.get(uri)
        except WebDriverException as exc:
            raise NavigationError(f"Failed to load {uri}: {exc.msg or exc}") from exc

    def find_element(self, by: str, value: str) -> Any:
        self.ensure_open()
        return self._driver.find_element(by, value)

    def find_elements(self, by: str, value: str) -> list[Any]:
        self.ensure_open()
        return self._driver.find_elements(by, value)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<BrowserSession {self.label} {state}>"


class SessionManager:
    def __init__(self, settings: Settings | None = None, driver_factory: Callable[[], Any] | None = None) -> None:
        self.settings = settings or default_settings
        self._driver_factory = driver_factory or self._build_driver

    def _chrome_options(self) -> Options:
        options = Options()
        if self.settings.headless:
            options.add_argument("--headless=new")
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        # file:// fixtures load their frames from disk
        options.add_argument("--allow-file-access-from-files")
        if self.settings.chrome_binary:
            options.binary_location = self.settings.chrome_binary
        return options

    def _build_driver(self) -> Any:
        options = self._chrome_options()
        if self.settings.use_driver_manager:
            service = Service(ChromeDriverManager().install())
        else:
            service = Service()
        return webdriver.Chrome(service=service, options=options)

    def open(self) -> BrowserSession:
        try:
            driver = self._driver_factory()
        except Exception as exc:
            raise SessionStartError(f"Could not launch browser: {exc}") from exc

        session = BrowserSession(driver)
        try:
            driver.set_window_size(self.settings.window_width, self.settings.window_height)
            driver.set_page_load_timeout(self.settings.page_load_timeout_s)
            driver.set_script_timeout(self.settings.script_timeout_s)
        except WebDriverException as exc:
            self.close(session)
            raise SessionStartError(f"Could not configure browser: {exc.msg or exc}") from exc

        logger.info("Opened %s", session.label)
        return session

    def close(self, session: BrowserSession) -> None:
        """Quit the browser. Never raises."""
        if session.closed:
            logger.debug("%s already closed; skipping quit", session.label)
            return
        session.mark_closed()
        try:
            session.driver.quit()
        except Exception:
            logger.warning("Failed to quit %s cleanly", session.label, exc_info=True)
        else:
            logger.info("Closed %s", session.label)

    @contextmanager
    def session(self) -> Iterator[BrowserSession]:
        session = self.open()
        try:
            yield session
        finally:
            self.close(session)
