"""API call logging for the jolpica client."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from collections.abc import Sized
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "jolpica.api"
LOG_FILE_ENV_VAR = "JOLPICA_LOG_FILE"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def get_logger() -> logging.Logger:
    """Return the API logger, attaching its handler on first use.

    If ``$JOLPICA_LOG_FILE`` is set, records go to that file only. Otherwise they
    propagate to the application's logging configuration.
    """
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger(LOGGER_NAME)
        log_file = os.environ.get(LOG_FILE_ENV_VAR)

        if not logger.handlers:
            if log_file:
                log_dir = os.path.dirname(log_file)
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
                handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
                handler.setFormatter(
                    logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
                )
                logger.setLevel(logging.DEBUG)
                logger.propagate = False
            else:
                handler = logging.NullHandler()
            logger.addHandler(handler)

        _logger = logger

    return _logger


def _reset_logger() -> None:
    """Forget the cached logger and its handlers, so the next call re-reads the environment."""
    global _logger
    with _logger_lock:
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
        _logger = None


class _CallLog:
    """CALL/OK/FAIL records for one decorated call, with the elapsed time."""

    def __init__(self, fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self._logger = get_logger()
        self._name = fn.__qualname__
        # 'self' is left out of the summary
        self._args = ", ".join(
            [repr(a) for a in args[1:]] + [f"{k}={v!r}" for k, v in kwargs.items()]
        )
        self._logger.info("CALL: %s(%s)", self._name, self._args)
        self._start = time.monotonic()

    def ok(self, result: Any) -> None:
        count = len(result) if isinstance(result, Sized) and not isinstance(result, str) else 1
        self._logger.info(
            "OK: %s(%s) -> %d items (%.3fs)",
            self._name, self._args, count, time.monotonic() - self._start,
        )

    def fail(self, exc: Exception) -> None:
        self._logger.error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            self._name, self._args, type(exc).__name__, exc, time.monotonic() - self._start,
        )


def log_api_call(fn: F) -> F:
    """Decorator that logs client method calls, for both plain and ``async`` methods."""

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            call = _CallLog(fn, args, kwargs)
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                call.fail(exc)
                raise
            call.ok(result)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        call = _CallLog(fn, args, kwargs)
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            call.fail(exc)
            raise
        call.ok(result)
        return result

    return wrapper  # type: ignore[return-value]
