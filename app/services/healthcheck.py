import math

from fastapi import HTTPException, status

from app.database.latency import LatencyRecord
from app.schemas.healthcheck import HealthCheckResponse, Metrics
from app.utils.env import get_segments_api_url


class HealthCheckService:
    def __init__(self, latency_record: LatencyRecord | None = None) -> None:
        """@brief Initialize healthcheck service dependencies.

        @param latency_record Optional latency repository implementation.
        """
        self._latency_record = latency_record

    @staticmethod
    def _compute_p95(latencies: list[float]) -> float:
        """@brief Compute P95 latency using the nearest-rank method.

        @return P95 latency. Returns 0.0 when the list is empty.
        """
        if not latencies:
            return 0.0

        ordered = sorted(latencies)
        rank = max(1, math.ceil(0.95 * len(ordered)))
        return float(ordered[rank - 1])

    @classmethod
    def _metrics_from_latencies(cls, latencies: list[float]) -> Metrics:
        if not latencies:
            return Metrics(avg=0.0, p95=0.0, count=0)

        return Metrics(
            avg=float(sum(latencies) / len(latencies)),
            p95=cls._compute_p95(latencies),
            count=len(latencies),
        )

    def healthcheck(self) -> HealthCheckResponse:
        """@brief Build the healthcheck response from Redis latency samples.

        @return HealthCheckResponse with per-route latency metrics.
        @throws HTTPException HTTP 503 when Redis cannot be read.
        """
        try:
            record = self._latency_record or LatencyRecord()
            dashboard = record.get_latencies("dashboard")
            segments = record.get_latencies("segments")
        except Exception as exc:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Telemetry backend unavailable for healthcheck.",
            ) from exc

        return HealthCheckResponse(
            status="UP",
            segments_api_url=get_segments_api_url(),
            dashboard_latency_ms=self._metrics_from_latencies(dashboard),
            segments_latency_ms=self._metrics_from_latencies(segments),
        )
