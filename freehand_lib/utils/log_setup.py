"""Logging setup for applications using freehand_lib.

The library only emits records through module loggers under the
``freehand_lib`` namespace and never installs handlers on import. An
application entry point (the ``freehand`` command does) calls
``configure_logging`` once to see them.

Records still propagate to the root logger, so applications that
configure logging themselves do not need this module at all.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

PACKAGE_LOGGER = 'freehand_lib'

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Attribute marking handlers installed here; repeated calls replace only these
_HANDLER_MARK = '_freehand_handler'

_logger = logging.getLogger(__name__)


def resolve_level(level: Union[int, str]) -> int:
    """Numeric log level for a level name or number.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: Union[int, str] = 'INFO', log_file: Optional[str] = None,
                      logger_name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Args:
        level: Level name ('DEBUG', 'info', ...) or number.
        log_file: Optional path of a log file, in addition to stderr.
        logger_name: Logger to configure; the package logger by default.

    Returns:
        The configured logger.

    Example:
        Configure at startup::

            from freehand_lib.utils.log_setup import configure_logging
            configure_logging(level='DEBUG', log_file='freehand.log')
    """
    log_level = resolve_level(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    target = logging.getLogger(logger_name)
    target.setLevel(log_level)

    for handler in [h for h in target.handlers if getattr(h, _HANDLER_MARK, False)]:
        target.removeHandler(handler)
        handler.close()

    handlers: list = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        target.addHandler(handler)

    # Pillow logs PNG chunk details at DEBUG
    logging.getLogger('PIL').setLevel(logging.WARNING)

    _logger.debug("Logging configured: level=%s, file=%s",
                  logging.getLevelName(log_level), log_file or 'stderr')
    return target
