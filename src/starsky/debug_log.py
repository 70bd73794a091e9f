"""Debug logging routed to Textual's devtools console.

Messages are formatted once (positional args joined, keyword args appended as
``key=value``), capped in length, then handed to the matching level of
``textual.log``. Nothing is written while no devtools console is attached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from starsky.constants import MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from textual import Logger

LEVELS = ("debug", "info", "warning", "error")


def format_message(*args: object, **kwargs: Any) -> str:
    """Join ``args`` and ``kwargs`` into one line, truncating oversized output."""
    output = " ".join(str(arg) for arg in args)
    if kwargs:
        key_values = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
        output = f"{output} {key_values}" if output else key_values

    if len(output) > MAX_LOG_MESSAGE_LENGTH:
        output = output[:MAX_LOG_MESSAGE_LENGTH] + "... [truncated]"
    return output


class StarskyLogger:
    """Level-aware front end for Textual's logger.

    ``sink`` defaults to ``textual.log``; tests pass their own recorder.
    """

    def __init__(self, sink: Logger | None = None) -> None:
        self._sink = sink

    def __call__(self, *args: object, **kwargs: Any) -> None:
        self.info(*args, **kwargs)

    def _target(self) -> Logger:
        if self._sink is not None:
            return self._sink
        from textual import log as textual_log

        return textual_log

    def _log(self, level: str, *args: object, **kwargs: Any) -> None:
        getattr(self._target(), level)(format_message(*args, **kwargs))

    def debug(self, *args: object, **kwargs: Any) -> None:
        self._log("debug", *args, **kwargs)

    def info(self, *args: object, **kwargs: Any) -> None:
        self._log("info", *args, **kwargs)

    def warning(self, *args: object, **kwargs: Any) -> None:
        self._log("warning", *args, **kwargs)

    def error(self, *args: object, **kwargs: Any) -> None:
        self._log("error", *args, **kwargs)


log = StarskyLogger()
