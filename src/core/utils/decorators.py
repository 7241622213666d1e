"""
Utility decorators for calculation logging.
"""

import functools
import time
import uuid
from collections.abc import Callable
from typing import Any

from loguru import logger


def _describe_outcome(result: Any) -> dict[str, Any]:
    """Summarize a calculation outcome for logging."""
    context: dict[str, Any] = {"result_type": type(result).__name__}

    reason = getattr(result, "reason", None)
    if reason is not None:
        context["reason"] = str(reason)

    return context


def _execute_with_logging(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Any:
    """Execute function with correlation id and timing attached to its log lines."""
    func_name = func.__name__
    bound = logger.bind(correlation_id=str(uuid.uuid4())[:8], operation=func_name)

    bound.debug(f"Calculation started: {func_name}")
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        bound.bind(
            execution_time_ms=round(execution_time_ms, 2),
            error_type=type(e).__name__,
        ).error(f"Calculation failed: {func_name}: {e}")
        raise

    execution_time_ms = (time.perf_counter() - start_time) * 1000
    outcome = _describe_outcome(result)
    bound.bind(execution_time_ms=round(execution_time_ms, 2), **outcome).debug(
        f"Calculation completed: {func_name} -> {outcome['result_type']}"
    )
    return result


def log_calculation[F: Callable[..., Any]](func: F) -> F:
    """Decorator to log calculations with correlation IDs and timing."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return _execute_with_logging(func, args, kwargs)

    return wrapper  # type: ignore
