"""Loggers for the `flist` hierarchy.

Library modules log under `flist.<area>` (`flist.algo.registry`,
`flist.core.construction`, `flist.cli`); levels follow `FLIST_LOG_LEVEL`
through `RuntimeConfig.log_level`. The handler itself is attached once to the
`flist` root by `flist.config`.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import config as fl_config

_ROOT_LOGGER = "flist"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return `flist` or `flist.<name>` at the configured runtime level."""

    logger_name = _ROOT_LOGGER if name is None else f"{_ROOT_LOGGER}.{name}"
    logger = logging.getLogger(logger_name)
    logger.setLevel(fl_config.runtime_config().log_level)
    return logger
