"""
Abstract interfaces for input reading systems
"""

from abc import ABC, abstractmethod
from typing import List

from .input_event import InputEvent


class IInputReader(ABC):
    """
    Abstract interface for reading player input.

    Implementations can use pygame, a scripted event list, a network
    connection or any other source.
    """

    @abstractmethod
    def read_events(self) -> List[InputEvent]:
        """
        Collect the input events that arrived since the last call.

        Returns:
            Events in arrival order (empty list when nothing happened)
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release any resources held by the reader"""
        pass
