from pydantic import BaseModel


class Metrics(BaseModel):
    avg: float
    p95: float
    count: int


class HealthCheckResponse(BaseModel):
    status: str
    segments_api_url: str
    dashboard_latency_ms: Metrics
    segments_latency_ms: Metrics
