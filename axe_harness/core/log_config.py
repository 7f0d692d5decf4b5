import json
import logging
from typing import Any

from axe_harness.core.config import Settings, settings as default_settings
from axe_harness.core.errors import InvalidConfigurationError

HARNESS_LOGGER = "axe_harness"

_LEVELS = {"1": logging.INFO, "2": logging.DEBUG}

# attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with `extra` fields flattened in."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key in entry:
                continue
            entry[key] = value
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(cfg: Settings | None = None) -> logging.Logger:
    """
    Configure the `axe_harness` logger from settings.

    Behavior:
      - log_level in {"0","1","2"}; anything else raises InvalidConfigurationError.
      - "0" adds no output of its own; if log_file is set it is truncated to a blank file.
      - "1"/"2" log at INFO/DEBUG, to log_file when set (append) or to stderr otherwise.
      - log_json switches the formatter to one JSON object per line.
      - Records still propagate, so pytest's capture sees them at every level.

    Calling it again replaces the handlers installed by the previous call.
    """
    cfg = cfg or default_settings
    logger = logging.getLogger(HARNESS_LOGGER)

    level_str = str(cfg.log_level).strip()
    if level_str not in {"0", "1", "2"}:
        raise InvalidConfigurationError(f"Invalid LOG_LEVEL '{level_str}'. Use 0, 1, or 2.")

    if cfg.log_file:
        try:
            # append check (does not add bytes)
            with open(cfg.log_file, "a"):
                pass
        except OSError as e:
            raise InvalidConfigurationError(f"Invalid log file path: {e}") from e

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if level_str == "0":
        if cfg.log_file:
            with open(cfg.log_file, "w"):
                pass  # truncate to zero bytes
        # keeps the last-resort stderr handler quiet
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)
        return logger

    level = _LEVELS[level_str]
    handler: logging.Handler
    if cfg.log_file:
        handler = logging.FileHandler(cfg.log_file, mode="a")
    else:
        handler = logging.StreamHandler()
    handler.setLevel(level)
    if cfg.log_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)

    logger.info("LOG_START level=%s", level_str)
    if level_str == "2":
        logger.debug("LOG_DEBUG_ENABLED level=%s", level_str)
    return logger
