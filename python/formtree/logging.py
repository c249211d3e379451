from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Any, Dict, Optional, Tuple, cast

NOTICE = (logging.WARNING + logging.INFO) // 2

# configuration name -> (level, name printed in records)
_LEVELS: Dict[str, Tuple[int, str]] = {
    "critical": (logging.CRITICAL, "CRIT"),
    "error": (logging.ERROR, "ERRO"),
    "warning": (logging.WARNING, "WARN"),
    "notice": (NOTICE, "NOTI"),
    "info": (logging.INFO, "INFO"),
    "debug": (logging.DEBUG, "DEBG"),
}

LOG_LEVELS = tuple(_LEVELS)

for _level, _short_name in _LEVELS.values():
    logging.addLevelName(_level, _short_name)


class FormTreeLogger(logging.Logger):
    """Logger with an extra 'notice' level, formtreectl reports the outcome of its commands with it."""

    def notice(self, message: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(NOTICE):
            self._log(NOTICE, message, args, **kwargs)


logging.setLoggerClass(FormTreeLogger)


def get_logger(name: str) -> FormTreeLogger:
    return cast(FormTreeLogger, logging.getLogger(name))


class LogTarget(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


NO_PREFIX_FORMAT_ENV_VAR = "FORMTREE_LOGGING_NO_PREFIX_FORMAT"
NO_PREFIX_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def get_formatter(service: str, target: LogTarget) -> logging.Formatter:
    if os.environ.get(NO_PREFIX_FORMAT_ENV_VAR) == "true":
        return logging.Formatter(NO_PREFIX_FORMAT)

    stream = "(stderr)" if target is LogTarget.STDERR else ""
    return logging.Formatter(f"%(asctime)s {service}[%(process)d]{stream}: {NO_PREFIX_FORMAT}")


_handler: Optional[logging.Handler] = None


def start_logging(service: str, loglevel: str, logtarget: str = "stderr") -> None:
    """
    Send the records of all loggers to the target stream.

    A handler installed by a previous call is replaced, the records are never printed twice.
    """

    global _handler

    if loglevel not in _LEVELS:
        raise ValueError(f"unknown logging level '{loglevel}', expected one of {LOG_LEVELS}")
    target = LogTarget(logtarget)

    handler = logging.StreamHandler(sys.stderr if target is LogTarget.STDERR else sys.stdout)
    handler.setFormatter(get_formatter(service, target))

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.setLevel(_LEVELS[loglevel][0])
    root.addHandler(handler)
    _handler = handler
