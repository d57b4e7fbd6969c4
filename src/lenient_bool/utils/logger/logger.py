"""Queue-backed logger that mirrors to stdout and batches events to handlers."""

import asyncio
import sys
import traceback
from typing import Optional

from colorama import Fore, Style, init as colorama_init

from lenient_bool.utils.logger.config import LogEvent, LogLevel, LoggerConfig
from lenient_bool.utils.logger.handlers.base import BaseLogHandler
from lenient_bool.utils.misc import time_iso8601

colorama_init(autoreset=True)


LOG_COLORS = {
    LogLevel.TRACE: Fore.LIGHTBLACK_EX,
    LogLevel.DEBUG: Fore.LIGHTBLACK_EX,
    LogLevel.INFO: Fore.GREEN,
    LogLevel.WARNING: Fore.YELLOW,
    LogLevel.ERROR: Fore.RED + Style.BRIGHT,
    LogLevel.CRITICAL: Fore.RED + Style.BRIGHT,
}


class Logger:
    """Logger usable from synchronous code, delivered asynchronously.

    Logging calls only render and enqueue. :meth:`start` spawns the task that
    prints and hands events to the handlers; :meth:`shutdown` delivers
    whatever is still pending, whether or not :meth:`start` was ever called.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        name: str = "",
        handlers: Optional[list[BaseLogHandler]] = None,
    ):
        """Attach ``handlers`` and prepare the pending queue.

        :param config: Logger settings; defaults to :class:`LoggerConfig`.
        :param name: Name rendered into each line.
        :param handlers: :class:`BaseLogHandler` instances receiving batches.
        :raises TypeError: If a handler does not extend :class:`BaseLogHandler`.
        """
        self._config = config or LoggerConfig()
        self._name = name
        self._handlers = list(handlers or [])

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(f"Invalid handler type; expected BaseLogHandler but got {type(handler)}")
            handler.add_primary_config(self._config)

        self._pending: asyncio.Queue = asyncio.Queue(maxsize=self._config.max_pending)
        self._batch: list[LogEvent] = []
        self._ingestor: Optional[asyncio.Task] = None
        self._accepting = True
        self.dropped = 0

    def _enqueue(self, level: LogLevel, msg: str) -> None:
        if not self._accepting or level < self._config.base_level:
            return
        text = self._config.str_format % {
            "asctime": time_iso8601(),
            "name": self._name,
            "levelname": level.name,
            "message": msg,
        }
        if self._pending.full():
            self._pending.get_nowait()
            self._pending.task_done()
            self.dropped += 1
        self._pending.put_nowait(LogEvent(text=text, level=level))

    async def _deliver(self, event: LogEvent) -> None:
        if self._config.do_stdout:
            print(LOG_COLORS.get(event.level, "") + event.text + Style.RESET_ALL)
        self._batch.append(event)
        if event.level >= self._config.flush_level or len(self._batch) >= self._config.batch_size:
            await self._flush()

    async def _flush(self) -> None:
        if not self._batch:
            return
        batch, self._batch = self._batch, []
        for handler in self._handlers:
            await handler.push(batch)

    async def _run(self) -> None:
        while True:
            event = await self._pending.get()
            try:
                await self._deliver(event)
            except Exception:
                traceback.print_exc(file=sys.stderr)
            finally:
                self._pending.task_done()

    def set_log_level(self, level: LogLevel) -> None:
        self._config.base_level = level

    def trace(self, msg: str) -> None:
        self._enqueue(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        self._enqueue(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        self._enqueue(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        self._enqueue(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        self._enqueue(LogLevel.ERROR, msg)

    def critical(self, msg: str) -> None:
        self._enqueue(LogLevel.CRITICAL, msg)

    async def start(self) -> None:
        """Begin delivering queued and future events."""
        self._accepting = True
        if self._ingestor is None:
            self._ingestor = asyncio.create_task(self._run())

    async def shutdown(self, timeout: float = 2.0) -> None:
        """Stop accepting events, deliver everything pending, flush handlers.

        :param timeout: Seconds to let a running ingestor catch up before it is cancelled.
        """
        self._accepting = False

        if self._ingestor is not None:
            try:
                await asyncio.wait_for(self._pending.join(), timeout=timeout)
            except asyncio.TimeoutError:
                print("[Logger] drain timeout; delivering the rest inline", file=sys.stderr)
            self._ingestor.cancel()
            try:
                await self._ingestor
            except asyncio.CancelledError:
                pass
            self._ingestor = None

        while not self._pending.empty():
            event = self._pending.get_nowait()
            try:
                await self._deliver(event)
            finally:
                self._pending.task_done()

        await self._flush()

    def is_running(self) -> bool:
        """Return whether the logger accepts new messages."""
        return self._accepting

    def get_name(self) -> str:
        return self._name

    def get_config(self) -> LoggerConfig:
        return self._config
