"""
Utilities package - Common utilities for the tile memory game
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter
from .once_in_ms import OnceInMs
from .deferred_task_queue import DeferredTaskQueue, ScheduledTask

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'OnceInMs',
    'DeferredTaskQueue',
    'ScheduledTask'
]
