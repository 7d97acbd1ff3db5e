from math import isfinite
from typing import Literal, get_args

from redis import Redis

from app.utils.env import get_latency_history_limit, get_redis_url

RouteName = Literal["dashboard", "segments"]
ROUTE_NAMES: tuple[RouteName, ...] = get_args(RouteName)

_KEY_PREFIX = "watch_dashboard:latency"


class LatencyRecord:
    def __init__(
        self,
        redis_client: Redis | None = None,
        history_limit: int | None = None,
    ) -> None:
        """@brief Bind the record to Redis and a per-route history size.

        @param redis_client Optional pre-configured Redis client. Falls back to
        a client built from `get_redis_url()`.
        @param history_limit Samples kept per route. Falls back to
        `get_latency_history_limit()`.
        @throws ValueError If `history_limit` is less than 1.
        """
        limit = get_latency_history_limit() if history_limit is None else history_limit
        if limit < 1:
            raise ValueError("LATENCY_HISTORY_LIMIT must be greater than or equal to 1.")

        self._history_limit = limit
        self._redis = redis_client or Redis.from_url(get_redis_url(), decode_responses=True)

    @staticmethod
    def key(route: RouteName) -> str:
        """@brief Return the Redis list holding samples of `route`.

        @throws ValueError If the route is not tracked.
        """
        if route not in ROUTE_NAMES:
            raise ValueError(f"route must be one of {', '.join(ROUTE_NAMES)}.")
        return f"{_KEY_PREFIX}:{route}"

    def push_latency(self, route: RouteName, latency_ms: float) -> None:
        """@brief Append one sample and keep only the newest entries.

        @param route Tracked route name.
        @param latency_ms Request latency in milliseconds.
        @throws ValueError If the route is unknown or the latency is not finite.
        """
        key = self.key(route)
        sample = float(latency_ms)
        if not isfinite(sample):
            raise ValueError("latency_ms must be a finite number.")

        with self._redis.pipeline() as pipeline:
            pipeline.rpush(key, sample)
            pipeline.ltrim(key, -self._history_limit, -1)
            pipeline.execute()

    def get_latencies(self, route: RouteName) -> list[float]:
        """@brief Read the stored samples of a route, dropping unreadable ones.

        @param route Tracked route name.
        @return Finite latencies in milliseconds, oldest first.
        """
        samples: list[float] = []
        for raw in self._redis.lrange(self.key(route), 0, -1):
            try:
                sample = float(raw)
            except (TypeError, ValueError):
                continue
            if isfinite(sample):
                samples.append(sample)
        return samples
