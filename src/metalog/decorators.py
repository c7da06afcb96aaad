"""
Composition helpers attaching facility loggers to classes and tracing method calls.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional, Type, TypeVar

from .core import get_default_logger
from .facility import LoggerFacility
from .levels import LevelLike, LogLevel
from .logger import Logger, capture_stack_trace

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])


def with_logging(
    facility: Optional[str] = None,
    *,
    logger: Optional[Logger] = None,
    level: Optional[LevelLike] = None,
) -> Callable[[Type[T]], Type[T]]:
    """Return a class decorator giving every instance a ``log`` facility.

    The facility is named ``facility`` or, when omitted, after the class, and
    belongs to ``logger`` or the default logger.

    Usage:
        @with_logging("billing", logger=app_logger)
        class Invoices:
            def pay(self):
                self.log.info("paid")
    """

    def decorate(cls: Type[T]) -> Type[T]:
        name = facility or cls.__name__

        class Logged(cls):  # type: ignore[misc, valid-type]
            def __init__(self, *args: Any, **kwargs: Any) -> None:
                super().__init__(*args, **kwargs)
                self.log = (logger or get_default_logger()).facility(name, level=level)

        Logged.__name__ = cls.__name__
        Logged.__qualname__ = cls.__qualname__
        Logged.__module__ = cls.__module__
        Logged.__doc__ = cls.__doc__
        return Logged

    return decorate


def log_method_call(
    level: LevelLike = LogLevel.DEBUG,
    capture_args: bool = True,
    prefix: str = "",
) -> Callable[[F], F]:
    """Log every call of the decorated method before running it.

    The record goes through ``self.log`` when it is a LoggerFacility (see
    ``with_logging``), otherwise through the default logger. Its metadata holds
    the class and method names.
    """

    def decorate(method: F) -> F:
        @functools.wraps(method)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            class_name = type(self).__name__
            meta = {"class": class_name, "method": method.__name__}

            target = getattr(self, "log", None)
            if not isinstance(target, LoggerFacility):
                target = get_default_logger()

            log_args: list[Any] = [meta]
            if prefix:
                log_args.append(prefix)
            log_args.append(f"Method {class_name}.{method.__name__} called")
            if capture_args:
                log_args.extend(["with arguments", list(args)])
                if kwargs:
                    log_args.append(kwargs)
            log_args.append("\n" + capture_stack_trace(""))

            target.log(level, *log_args)
            return method(self, *args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorate
