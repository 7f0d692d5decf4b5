"""Accessibility Test Runner"""

import argparse
import logging
import os
import subprocess
import sys

from axe_harness.core.config import Settings
from axe_harness.core.log_config import configure_logging

logger = logging.getLogger(__name__)

SUITES = {
    "all": ["tests"],
    "scans": ["tests/a11y"],
    "unit": ["tests", "--ignore=tests/a11y"],
}


def build_env(artifacts_dir=None, headed=False, log_level=None, log_file=None):
    env = os.environ.copy()
    if artifacts_dir:
        env["A11Y_ARTIFACTS_DIR"] = str(artifacts_dir)
    if headed:
        env["A11Y_HEADLESS"] = "false"
    if log_level is not None:
        env["A11Y_LOG_LEVEL"] = log_level
    if log_file:
        env["A11Y_LOG_FILE"] = str(log_file)
    return env


def run_tests(suite="all", artifacts_dir=None, headed=False, extra_args=None, log_level=None, log_file=None):
    """Run a pytest suite in a subprocess; True when it passes."""
    env = build_env(artifacts_dir, headed, log_level, log_file)

    print(f"Running accessibility suite: {suite}")

    cmd = [sys.executable, "-m", "pytest", *SUITES[suite], "-v", "--tb=short", *(extra_args or [])]
    logger.info("Running %s", " ".join(cmd))
    result = subprocess.run(cmd, env=env)
    logger.info("Suite %s finished with exit code %s", suite, result.returncode)
    return result.returncode == 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the axe-core accessibility suite")
    parser.add_argument("--type", choices=sorted(SUITES), default="all", help="Which tests to run")
    parser.add_argument("--artifacts-dir", default=None, help="Where scan results are written")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--log-level", choices=["0", "1", "2"], default=None, help="0 silent, 1 info, 2 debug")
    parser.add_argument("--log-file", default=None, help="Write harness logs to this file")

    args, extra = parser.parse_known_args(argv)

    overrides = {}
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.log_file:
        overrides["log_file"] = args.log_file
    configure_logging(Settings(**overrides))

    success = run_tests(args.type, args.artifacts_dir, args.headed, extra, args.log_level, args.log_file)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
