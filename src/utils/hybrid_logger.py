"""
Game logging - one shared logger with per-component names and levels
"""

import logging
import sys
import traceback
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] [%(class_name)s] %(message)s'


class ColoredFormatter(logging.Formatter):
    """Bracketed formatter; colors the whole line by level for terminal output"""

    COLORS = {
        'DEBUG': '\033[94m',    # Blue
        'INFO': '\033[92m',     # Green
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'CRITICAL': '\033[95m', # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors: bool = False):
        self.use_colors = use_colors
        super().__init__(LOG_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        # Records from plain logging calls have no component name
        if not hasattr(record, 'class_name'):
            record.class_name = 'Main'

        line = super().format(record)
        if not self.use_colors:
            return line
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        return f"{color}{line}{self.COLORS['RESET']}"


class ClassLogger:
    """
    Named view on the shared game logger.

    Each game component (manager, states, scheduler, renderer) gets its own
    ClassLogger so log lines carry the component name and can be filtered
    per component without touching the handlers.
    """

    def __init__(self, main_logger: logging.Logger, class_name: str, level: int):
        self.main_logger = main_logger
        self.class_name = class_name
        self.level = level

    def _log(self, level: int, message: str, exc_info: bool = False) -> None:
        if level < self.level:
            return
        self.main_logger.log(
            level, message,
            exc_info=exc_info,
            extra={'class_name': self.class_name}
        )

    def create_class_logger(self, class_name: str, level: Optional[int] = None) -> 'ClassLogger':
        """
        Create a logger for another component on the same handlers.

        Args:
            class_name: Component name shown in log lines
            level: Minimum level (defaults to this logger's level)
        """
        return ClassLogger(self.main_logger, class_name, self.level if level is None else level)

    def debug(self, message: str) -> None:
        self._log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._log(logging.WARNING, message)

    def error(self, message: str, exception: Optional[Exception] = None) -> None:
        """Log an error; with an exception, add its type and origin plus the traceback"""
        if exception is None:
            self._log(logging.ERROR, message)
            return

        frames = traceback.extract_tb(exception.__traceback__)
        origin = frames[-1] if frames else None
        where = f"{origin.filename} | Line: {origin.lineno}" if origin else "unknown | Line: 0"
        self._log(
            logging.ERROR,
            f"{message} | Type: {type(exception).__name__} | File: {where}",
            exc_info=True
        )

    def critical(self, message: str) -> None:
        self._log(logging.CRITICAL, message)

    def flush(self) -> None:
        """Flush pending output, e.g. before the process is terminated"""
        for handler in self.main_logger.handlers:
            with suppress(OSError, ValueError):
                handler.flush()


class HybridLogger:
    """
    Owns the game's logging.Logger: colored stdout plus a timestamped log file.

    Example:
        main_logger = HybridLogger("TileMemory")
        game_logger = main_logger.get_class_logger("TileMemory")
        ...
        main_logger.cleanup()
    """

    def __init__(self, name: str = "app", log_dir: str = "logs"):
        self.name = name
        self.class_loggers: Dict[str, ClassLogger] = {}

        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
        self.log_filename: Path = directory / f"{name}_{stamp}.log"

        self.main_logger = logging.getLogger(name)
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        # A previous HybridLogger with the same name must not double the output
        self.main_logger.handlers.clear()
        self._add_handler(logging.StreamHandler(sys.stdout), use_colors=True)
        self._add_handler(logging.FileHandler(self.log_filename, encoding="utf-8"), use_colors=False)

    def _add_handler(self, handler: logging.Handler, use_colors: bool) -> None:
        handler.setFormatter(ColoredFormatter(use_colors=use_colors))
        self.main_logger.addHandler(handler)

    def get_class_logger(self, class_name: str, level: int = logging.INFO) -> ClassLogger:
        """
        Get the (cached) logger for a component.

        The level only applies the first time a name is requested.
        """
        if class_name not in self.class_loggers:
            self.class_loggers[class_name] = ClassLogger(self.main_logger, class_name, level)
        return self.class_loggers[class_name]

    def cleanup(self) -> None:
        """Flush and close all handlers"""
        for handler in self.main_logger.handlers:
            with suppress(OSError, ValueError):
                handler.flush()
                handler.close()
        self.main_logger.handlers.clear()
