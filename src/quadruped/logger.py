"""
Logging for the quadruped runtime.

Every module asks the shared ``Logger`` for a named logger; all of them write to one
file under ``constants.LOGS_FOLDER`` and can optionally echo to the console.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

from quadruped import constants

QUADRUPED = 'Quadruped'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class _LoggerMeta(type):
    """Keeps one ``Logger`` per process; later calls return it and ignore their arguments."""

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


class Logger(metaclass=_LoggerMeta):
    """Factory for the named loggers of the configuration, driver and controller modules.

    Args:
        logs_folder: Folder of the shared log file, created when missing.
        level: Level given to every logger handed out, a name such as ``'DEBUG'`` or a number.
    """

    def __init__(self, logs_folder: Union[str, Path] = constants.LOGS_FOLDER,
                 level: Union[str, int] = constants.LOG_LEVEL):
        self.log_file = Path(logs_folder) / constants.LOG_FILE_NAME
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.level = level
        self._loggers: Dict[str, logging.Logger] = {}

        formatter = logging.Formatter(LOG_FORMAT)
        self.logging_file_handler = logging.FileHandler(str(self.log_file), encoding='utf-8')
        self.logging_file_handler.setFormatter(formatter)
        self.logging_stream_handler = logging.StreamHandler()
        self.logging_stream_handler.setFormatter(formatter)

    def setup_logger(self, logger_name=None, enable_stream_handler=False) -> logging.Logger:
        """Return the logger for ``logger_name``, attached to the shared handlers.

        Names are prefixed with ``Quadruped`` and padded so the log columns line up.

        Args:
            logger_name (str, optional): Short module name, e.g. ``'IK driver'``.
            enable_stream_handler (bool): Also print the records to the console.
        """
        full_name = QUADRUPED if not logger_name else f"{QUADRUPED} {logger_name}"

        logger = logging.getLogger(f"{full_name:<32}")
        logger.setLevel(self.level)

        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if enable_stream_handler and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)

        self._loggers[full_name] = logger
        return logger

    def set_level(self, level: Union[str, int]) -> None:
        """Change the level of every logger handed out so far and of the ones to come."""
        self.level = level
        for logger in self._loggers.values():
            logger.setLevel(level)


__all__ = ['Logger', 'QUADRUPED']
