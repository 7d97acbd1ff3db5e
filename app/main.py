from fastapi import FastAPI

from app.api.healthcheck import router as healthcheck_router
from app.api.segments import router as segments_router
from app.middleware.latency import track_request_latency
from app.views.dashboard import router as dashboard_router

app = FastAPI(title="Watch Time Dashboard")
app.middleware("http")(track_request_latency)
app.include_router(dashboard_router)
app.include_router(segments_router)
app.include_router(healthcheck_router)
