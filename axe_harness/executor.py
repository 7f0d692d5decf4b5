"""Run axe-core inside a live browser session."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from axe_selenium_python import Axe
from pydantic import ValidationError
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By

from axe_harness.core.config import Settings, settings as default_settings
from axe_harness.core.errors import ScanExecutionError, SessionClosedError
from axe_harness.request import ScanRequest
from axe_harness.results import ScanResult

logger = logging.getLogger(__name__)

# The result is stringified in the page so nothing but plain JSON crosses the wire.
RUN_SCRIPT = """
var callback = arguments[arguments.length - 1];
var context = arguments[0];
var options = arguments[1] || {};
if (typeof axe === 'undefined') {
    callback(JSON.stringify({error: 'axe-core is not loaded in this page'}));
    return;
}
axe.run(context || document, options).then(function (results) {
    callback(JSON.stringify(results));
}, function (err) {
    callback(JSON.stringify({error: String((err && err.message) || err)}));
});
"""


class ScanExecutor:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    def _axe(self, driver: Any) -> Axe:
        if self.settings.axe_script:
            return Axe(driver, script_url=str(self.settings.axe_script))
        return Axe(driver)

    def _inject(self, driver: Any, depth: int = 0) -> None:
        self._axe(driver).inject()
        if not self.settings.inject_frames or depth >= self.settings.max_frame_depth:
            return

        frames = driver.find_elements(By.TAG_NAME, "iframe") + driver.find_elements(By.TAG_NAME, "frame")
        for frame in frames:
            try:
                driver.switch_to.frame(frame)
            except WebDriverException:
                logger.debug("Skipping frame at depth %d; could not switch into it", depth + 1)
                continue
            try:
                self._inject(driver, depth + 1)
            finally:
                driver.switch_to.parent_frame()

    def analyze(self, request: ScanRequest) -> ScanResult:
        session = request.session
        try:
            session.ensure_open()
        except SessionClosedError as exc:
            raise ScanExecutionError(f"Cannot scan: {exc}") from exc

        driver = session.driver
        started = time.time()
        try:
            try:
                self._inject(driver)
            finally:
                driver.switch_to.default_content()
            raw = driver.execute_async_script(RUN_SCRIPT, request.axe_context(), request.axe_options())
        except OSError as exc:
            raise ScanExecutionError(f"Could not read axe-core script: {exc}") from exc
        except WebDriverException as exc:
            raise ScanExecutionError(f"axe-core run failed in {session.label}: {exc.msg or exc}") from exc

        result = self._parse(raw)
        logger.info(
            "Scan finished in %s: %d violation(s)",
            session.label,
            result.violation_count,
            extra={"violations": result.violation_ids(), "duration_ms": int((time.time() - started) * 1000)},
        )
        return result

    @staticmethod
    def _parse(raw: Any) -> ScanResult:
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise ScanExecutionError(f"axe-core returned invalid JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise ScanExecutionError(f"axe-core returned {type(raw).__name__}, expected an object")
        if "error" in raw:
            raise ScanExecutionError(f"axe-core reported an error: {raw['error']}")
        try:
            return ScanResult.model_validate(raw)
        except ValidationError as exc:
            raise ScanExecutionError(f"Unexpected axe-core result shape: {exc}") from exc
