"""
Logging helpers and decorators.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def log_performance(
    log_level: int = logging.INFO,
    threshold_ms: Optional[float] = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator to log function execution time.

    Args:
        log_level: Logging level to use
        threshold_ms: Only log if execution time exceeds this threshold (milliseconds)

    Returns:
        Decorated function with performance logging

    Example:
        @log_performance(log_level=logging.DEBUG)
        def parse(text: str) -> Optional[CoordinatePair]:
            ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            func_name = f"{func.__module__}.{func.__qualname__}"
            start_time = time.perf_counter()

            try:
                return func(*args, **kwargs)
            finally:
                duration_ms = (time.perf_counter() - start_time) * 1000

                if threshold_ms is None or duration_ms >= threshold_ms:
                    logger.log(
                        log_level,
                        f"{func_name} executed in {duration_ms:.2f}ms",
                        extra={"duration_ms": duration_ms, "function": func_name},
                    )

        return wrapper

    return decorator


def log_with_context(
    log_level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with additional contextual information.

    Args:
        log_level: Logging level
        message: Log message
        **context: Additional context attached to the record

    Example:
        log_with_context(
            logging.DEBUG,
            "Pattern matched but extraction failed",
            pattern="metric",
            text="2'600'000 1'2",
        )
    """
    logger.log(log_level, message, extra=context)
