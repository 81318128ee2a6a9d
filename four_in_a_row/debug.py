"""
debug.py - Logging facade for the four-in-a-row engine

Wraps the standard logging module behind a small manager with named
levels, per-component filtering, optional file output and timers, so the
engine, environment and CLI all log the same way.
"""

import logging
import os
import sys
import time
from enum import Enum
from typing import Dict, List, Optional, Set

LOGGER_NAME = "four_in_a_row"
ENV_LEVEL_VAR = "FOUR_IN_A_ROW_DEBUG"


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 1,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,
}


def parse_level(level_str: str) -> Optional[DebugLevel]:
    """Look up a DebugLevel by case-insensitive name, None if unknown."""
    try:
        return DebugLevel[level_str.strip().upper()]
    except KeyError:
        return None


# Shared by every DebugManager so the console only gets each message once
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(logging.Formatter(
    '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
))


class DebugManager:
    """Routes engine log messages to a shared logger."""

    def __init__(self, level: DebugLevel = DebugLevel.INFO):
        self._level = level
        self._enabled = True
        self._log_file: Optional[str] = None
        self._enabled_components: Set[str] = set()  # empty means all
        self._logger = self._setup_logger()
        self._performance_markers: Dict[str, float] = {}

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(LEVEL_MAP[self._level])

        if console_handler not in logger.handlers:
            logger.addHandler(console_handler)

        return logger

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def configure(self, level: DebugLevel = None,
                  enabled: bool = None,
                  log_file: str = None,
                  components: List[str] = None):
        """
        Configure the debug manager settings.

        Args:
            level: Debug level to set
            enabled: Whether logging is enabled at all
            log_file: Path to an additional log file ("" removes it)
            components: Components to log for (empty list for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            self._log_file = log_file or None
            if self._log_file:
                file_handler = logging.FileHandler(self._log_file)
                file_handler.setFormatter(logging.Formatter(
                    '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                    datefmt='%Y-%m-%d %H:%M:%S'
                ))
                self._logger.addHandler(file_handler)

        if components is not None:
            self._enabled_components = set(components)

    def should_log(self, level: DebugLevel, component: str = None) -> bool:
        if not self._enabled or level == DebugLevel.NONE:
            return False

        if level.value > self._level.value:
            return False

        if component and self._enabled_components and component not in self._enabled_components:
            return False

        return True

    def log(self, level: DebugLevel, message: str, component: str = None):
        """
        Log a message at the given level.

        Args:
            level: Level of the message
            message: Text to log
            component: Optional component tag used for filtering
        """
        if not self.should_log(level, component):
            return

        if component:
            message = f"[{component}] {message}"

        if level == DebugLevel.ERROR:
            self._logger.error(message)
        elif level == DebugLevel.WARNING:
            self._logger.warning(message)
        elif level == DebugLevel.INFO:
            self._logger.info(message)
        elif level == DebugLevel.DEBUG:
            self._logger.debug(message)
        elif level == DebugLevel.TRACE:
            self._logger.debug(f"TRACE: {message}")

    def error(self, message: str, component: str = None):
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: str = None):
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: str = None):
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: str = None):
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: str = None):
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str):
        self._performance_markers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: str = None) -> Optional[float]:
        """
        Stop a named timer and log the elapsed time at trace level.

        Returns:
            Elapsed seconds, or None if the timer was never started
        """
        started = self._performance_markers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.trace(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str) -> bool:
        """Set the level from a name such as "debug"; False if unknown."""
        level = parse_level(level_str)
        if level is None:
            self.warning(f"Unknown debug level: {level_str}")
            return False

        self.configure(level=level)
        self.debug(f"Debug level set to {level.name}")
        return True


def _initial_level() -> DebugLevel:
    level = parse_level(os.environ.get(ENV_LEVEL_VAR, ""))
    return level if level is not None else DebugLevel.INFO


debug = DebugManager(_initial_level())
