"""
Prometheus metrics for the car wash platform.

Everything lives in a private registry exposed by GET /metrics. Service
timings are fed by @BaseService.measure_operation; booking outcomes by
BookingService.create_booking.
"""

from typing import Optional, cast

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()

BOOKING_OUTCOMES = (
    "created",
    "customer_not_found",
    "service_not_available",
    "slot_unavailable",
)

operation_seconds = Histogram(
    "carwash_service_operation_duration_seconds",
    "Time spent in measured service operations",
    ["service", "operation"],
    registry=REGISTRY,
    buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

operations_total = Counter(
    "carwash_service_operations_total",
    "Measured service operations by result",
    ["service", "operation", "status"],
    registry=REGISTRY,
)

operation_errors_total = Counter(
    "carwash_errors_total",
    "Failed service operations by exception class",
    ["service", "operation", "error_type"],
    registry=REGISTRY,
)

bookings_total = Counter(
    "carwash_bookings_total",
    "Booking creation attempts by outcome",
    ["outcome"],
    registry=REGISTRY,
)

# Pre-create every outcome series so dashboards see zeros before the first booking
for _outcome in BOOKING_OUTCOMES:
    bookings_total.labels(outcome=_outcome)


class PrometheusMetrics:
    """Thin facade over the module-level collectors."""

    @staticmethod
    def record_service_operation(
        service: str,
        operation: str,
        duration: float,
        status: str = "success",
        error_type: Optional[str] = None,
    ) -> None:
        """
        Record one measured call.

        Args:
            service: Service class name, e.g. 'BookingService'
            operation: Name given to measure_operation, e.g. 'create_booking'
            duration: Wall time in seconds
            status: 'success' or 'error'
            error_type: Exception class name for failed calls
        """
        operation_seconds.labels(service, operation).observe(duration)
        operations_total.labels(service, operation, status).inc()
        if status == "error" and error_type:
            operation_errors_total.labels(service, operation, error_type).inc()

    @staticmethod
    def inc_booking_outcome(outcome: str) -> None:
        if outcome not in BOOKING_OUTCOMES:
            raise ValueError(f"Unknown booking outcome: {outcome}")
        bookings_total.labels(outcome=outcome).inc()

    @staticmethod
    def get_metrics() -> bytes:
        return cast(bytes, generate_latest(REGISTRY))

    @staticmethod
    def get_content_type() -> str:
        return cast(str, CONTENT_TYPE_LATEST)


prometheus_metrics = PrometheusMetrics()
