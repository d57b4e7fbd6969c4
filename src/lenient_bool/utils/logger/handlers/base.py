"""Base class for logger output handlers."""

from abc import ABC, abstractmethod
from typing import List, Optional

from lenient_bool.utils.logger.config import LogEvent, LoggerConfig


class BaseLogHandler(ABC):
    """Receives batches of :class:`LogEvent` flushed by the logger."""

    def __init__(self) -> None:
        self._primary_config: Optional[LoggerConfig] = None

    def add_primary_config(self, config: LoggerConfig) -> None:
        """Share the owning logger's configuration with this handler.

        :param config: Configuration of the logger this handler is attached to.
        """
        self._primary_config = config

    @abstractmethod
    async def push(self, records: List[LogEvent]) -> None:
        """Persist or forward a batch of events."""
