# backend/carwash/services/base.py
"""
Base Service Pattern for the car wash platform

Every service gets:
- a database session and a class-named logger
- ``transaction()`` to commit or roll back a unit of work
- ``@BaseService.measure_operation`` timing, exported to Prometheus and kept
  in-process per service class for ``get_metrics()``
"""

from contextlib import contextmanager
from dataclasses import dataclass
from functools import wraps
import logging
import time
from typing import Any, Callable, Dict, Iterator, Optional, TypeVar, cast

from sqlalchemy.orm import Session

from ..monitoring.prometheus_metrics import prometheus_metrics

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

SLOW_OPERATION_SECONDS = 1.0


@dataclass
class OperationStats:
    """Running timings for one measured operation."""

    count: int = 0
    success_count: int = 0
    total_time: float = 0.0
    min_time: float = float("inf")
    max_time: float = 0.0

    @property
    def failure_count(self) -> int:
        return self.count - self.success_count

    def add(self, elapsed: float, success: bool) -> None:
        self.count += 1
        self.total_time += elapsed
        self.min_time = min(self.min_time, elapsed)
        self.max_time = max(self.max_time, elapsed)
        if success:
            self.success_count += 1

    def summary(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "avg_time": self.total_time / self.count,
            "min_time": self.min_time,
            "max_time": self.max_time,
            "total_time": self.total_time,
            "success_rate": self.success_count / self.count,
            "success_count": self.success_count,
            "failure_count": self.failure_count,
        }


class BaseService:
    """
    Base class for all service layer components.

    Services own the unit of work: repositories flush, services commit.
    """

    # Stats per service class name, then per operation name
    _class_metrics: Dict[str, Dict[str, OperationStats]] = {}

    def __init__(self, db: Session):
        self.db = db
        self.logger = logging.getLogger(self.__class__.__name__)

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Commit the session when the block succeeds, roll back otherwise.

        Errors are re-raised as-is; callers decide how to translate them.

        Usage:
            with self.transaction():
                self.repository.create(...)
        """
        try:
            yield self.db
            self.db.commit()
        except Exception as exc:
            self.logger.error("Rolling back transaction: %s", exc)
            self.db.rollback()
            raise

    @staticmethod
    def measure_operation(operation_name: str) -> Callable[[F], F]:
        """
        Time a service method and record its outcome.

        Usage:
            @BaseService.measure_operation("create_booking")
            def create_booking(self, request):
                ...
        """

        def decorator(func: F) -> F:
            @wraps(func)
            def wrapper(self: "BaseService", *args: Any, **kwargs: Any) -> Any:
                started = time.time()
                error_type: Optional[str] = None
                try:
                    return func(self, *args, **kwargs)
                except Exception as exc:
                    error_type = type(exc).__name__
                    raise
                finally:
                    self._finish_measurement(operation_name, time.time() - started, error_type)

            return cast(F, wrapper)

        return decorator

    def _finish_measurement(
        self, operation: str, elapsed: float, error_type: Optional[str]
    ) -> None:
        success = error_type is None
        self._record_metric(operation, elapsed, success)

        if elapsed > SLOW_OPERATION_SECONDS:
            self.logger.warning(f"Slow operation detected: {operation} took {elapsed:.2f}s")

        prometheus_metrics.record_service_operation(
            service=self.__class__.__name__,
            operation=operation,
            duration=elapsed,
            status="success" if success else "error",
            error_type=error_type,
        )

    def log_operation(self, operation: str, **context: Any) -> None:
        """Log an operation with structured context."""
        self.logger.info(f"Operation: {operation}", extra={"operation": operation, **context})

    def _record_metric(self, operation: str, elapsed: float, success: bool) -> None:
        per_class = BaseService._class_metrics.setdefault(self.__class__.__name__, {})
        per_class.setdefault(operation, OperationStats()).add(elapsed, success)

    def get_metrics(self) -> Dict[str, Any]:
        """Summaries of every measured operation of this service class."""
        per_class = BaseService._class_metrics.get(self.__class__.__name__, {})
        return {name: stats.summary() for name, stats in per_class.items() if stats.count}

    def reset_metrics(self) -> None:
        BaseService._class_metrics.pop(self.__class__.__name__, None)
        self.logger.info(f"Metrics reset for {self.__class__.__name__}")
