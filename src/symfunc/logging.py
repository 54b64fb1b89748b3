from __future__ import annotations

import copy
import logging
import logging.config
from logging import LogRecord
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class ModuleStemFilter(logging.Filter):
    """
    Adds the stem of the emitting file to the record as ``filenameStem``.
    """

    def filter(self, record: LogRecord) -> bool:
        record.filenameStem = Path(record.filename).stem
        return True


def rich_handler_factory() -> RichHandler:
    return RichHandler(
        console=Console(stderr=True, width=160),
        rich_tracebacks=True,
        tracebacks_suppress=["pydantic"],
        markup=True,
    )


LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "stem": {
            "()": ModuleStemFilter,
        }
    },
    "formatters": {
        "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        "pretty": {"format": "[[yellow]%(filenameStem)s[/]] %(message)s"},
    },
    "handlers": {
        "plain": {
            "formatter": "standard",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
        "rich": {
            "()": rich_handler_factory,
            "formatter": "pretty",
            "filters": ["stem"],
        },
    },
    "loggers": {
        "": {
            "handlers": ["rich"],
            "level": "WARNING",
            "propagate": False,
        },
        "symfunc": {
            "handlers": [],
            "level": "INFO",
            "propagate": True,
        },
    },
}


def setup(level: int | str | None = None, *, rich: bool = True) -> None:
    """
    Initialize logging based on the configuration dictionary in this file.

    Args:
        level: Level for the ``symfunc`` loggers, ``INFO`` when not given.
        rich: Render records with rich; use a plain stderr stream otherwise.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["loggers"][""]["handlers"] = ["rich" if rich else "plain"]
    if level is not None:
        config["loggers"]["symfunc"]["level"] = (
            logging.getLevelName(level) if isinstance(level, int) else level.upper()
        )
    logging.config.dictConfig(config)


__all__ = ("LOGGING_CONFIG", "setup")
