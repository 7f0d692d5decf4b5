"""
Persist scan results as JSON artifacts.

Files are named after the test (``<artifacts_dir>/<test name>.json``) and
written whether or not the test's assertions later pass. Persistence is
best-effort: a failed write is logged and never fails the test.
"""

from __future__ import annotations

import hashlib
import logging
import os
import re
import tempfile
from pathlib import Path

from axe_harness.core.config import settings
from axe_harness.results import ScanResult

logger = logging.getLogger(__name__)

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]+")


def artifact_name(test_name: str) -> str:
    """File name for a test's artifact.

    Names that are already filesystem-safe are used as is. Anything that had
    to be rewritten gets a short digest of the original appended, so two
    distinct test ids never share a file.
    """
    raw = test_name.strip()
    name = _UNSAFE.sub("_", raw).strip("._")
    if not name:
        raise ValueError(f"Cannot derive an artifact name from {test_name!r}")
    if name != raw:
        name = f"{name}-{hashlib.sha1(raw.encode('utf-8')).hexdigest()[:8]}"
    return f"{name}.json"


class ResultReporter:
    def __init__(self, output_dir: str | Path | None = None) -> None:
        self.output_dir = Path(output_dir) if output_dir is not None else settings.artifacts_dir

    def path_for(self, test_name: str) -> Path:
        return self.output_dir / artifact_name(test_name)

    def report(self, test_name: str, result: ScanResult) -> Path | None:
        try:
            target = self.path_for(test_name)
            self.output_dir.mkdir(parents=True, exist_ok=True)
            payload = result.to_json()
            # write then rename so parallel readers never see half a file
            fd, tmp = tempfile.mkstemp(dir=self.output_dir, prefix=".", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp, target)
            except BaseException:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise
        except Exception:
            logger.exception("Failed to persist scan result for %s", test_name, extra={"test_name": test_name})
            return None

        logger.info("Wrote %s", target, extra={"test_name": test_name, "artifact": str(target)})
        return target

    @staticmethod
    def load(path: str | Path) -> ScanResult:
        return ScanResult.from_json(Path(path).read_text(encoding="utf-8"))

    @staticmethod
    def summarize(result: ScanResult) -> str:
        """Readable listing of violations and the nodes behind them."""
        if not result.violations:
            return "No violations found"
        lines = []
        for i, violation in enumerate(result.violations, start=1):
            lines.append(f"Violation {i}: {violation.rule_id} ({violation.impact or 'unknown impact'})")
            if violation.help:
                lines.append(f"  {violation.help}")
            if violation.help_url:
                lines.append(f"  {violation.help_url}")
            for node in violation.nodes:
                lines.append(f"  - Selector: {list(node.target)}")
                if node.html:
                    lines.append(f"    HTML: {node.html}")
                if node.failure_summary:
                    summary = " ".join(node.failure_summary.split())
                    lines.append(f"    Fix: {summary}")
        return "\n".join(lines)
