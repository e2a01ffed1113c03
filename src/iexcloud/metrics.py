"""Prometheus instrumentation for outbound API requests.

Metrics are registered on a dedicated registry rather than the global
``prometheus_client.REGISTRY`` so that several clients can coexist in one
process and applications decide whether to expose them.
"""

from prometheus_client import CollectorRegistry, Counter, Histogram

ERROR_STATUS = "error"


class RequestMetrics:
    """Request counter and latency histogram for the IEX Cloud client.

    Labels carry only the URL path (e.g. ``/stable/deep``) and the status
    code, never the query string, so access tokens are not exported.
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        """Create metrics on ``registry`` (a fresh one if omitted)."""
        self.registry = registry if registry is not None else CollectorRegistry()
        self.requests = Counter(
            "iexcloud_requests",
            "IEX Cloud API requests by path and response status",
            ["path", "status"],
            registry=self.registry,
        )
        self.duration = Histogram(
            "iexcloud_request_duration_seconds",
            "IEX Cloud API request duration in seconds",
            ["path"],
            registry=self.registry,
        )

    def observe(self, path: str, status: int | str, duration: float) -> None:
        """Record one completed or failed request."""
        self.requests.labels(path=path, status=str(status)).inc()
        self.duration.labels(path=path).observe(duration)
