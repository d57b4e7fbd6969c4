"""Logger settings and the event record passed to handlers."""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5


@dataclass
class LogEvent:
    """One rendered line and the level it was logged at."""

    text: str
    level: LogLevel


@dataclass
class LoggerConfig:
    """Settings for :class:`lenient_bool.utils.logger.logger.Logger`.

    ``max_pending`` bounds the events held while no ingestor is running; the
    oldest are discarded past that. ``batch_size`` events, or any event at
    ``flush_level`` or above, trigger a handler flush.
    """

    base_level: LogLevel = LogLevel.INFO
    do_stdout: bool = True
    str_format: str = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    batch_size: int = 50
    max_pending: int = 1000
    flush_level: LogLevel = LogLevel.WARNING

    def __post_init__(self):
        for field_name in ("batch_size", "max_pending"):
            limit = getattr(self, field_name)
            if not isinstance(limit, int) or limit < 1:
                raise ValueError(f"{field_name} must be a positive int, got {limit!r}")
        if "%(message)s" not in self.str_format:
            raise ValueError("Format string must contain '%(message)s' placeholder")
