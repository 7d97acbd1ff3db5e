import logging

import httpx
from pydantic import ValidationError

from app.core.errors import BusinessFailure, HttpFailure, TransportFailure
from app.core.time_converter import format_utc
from app.schemas.request_parameters import RequestParameters
from app.schemas.watch_segment import SegmentsEnvelope, SegmentsQuery, WatchSegment
from app.utils.env import get_segments_api_url

_LOGGER = logging.getLogger(__name__)


class SegmentFetcher:
    def __init__(
        self, api_url: str | None = None, client: httpx.Client | None = None
    ) -> None:
        """@brief Initialize the aggregation service client.

        @param api_url Endpoint receiving segment queries. Falls back to
        `get_segments_api_url()`.
        @param client Optional pre-configured `httpx.Client`. When omitted, a
        client is created for each fetch and closed afterwards.
        """
        self._api_url = api_url or get_segments_api_url()
        self._client = client

    @staticmethod
    def build_query(request: RequestParameters) -> SegmentsQuery:
        """@brief Build the JSON body for a resolved request.

        @param request Resolved request parameters.
        @return Query body with canonical UTC bounds.
        @throws ValueError If the request window is unresolved.
        """
        if request.window is None:
            raise ValueError("Cannot fetch segments for an unresolved time window.")

        return SegmentsQuery(
            identifier=request.identifier,
            start_time=format_utc(request.window.start),
            end_time=format_utc(request.window.end),
            interval=request.interval.value,
        )

    def _post(self, client: httpx.Client, query: SegmentsQuery) -> httpx.Response:
        try:
            return client.post(self._api_url, json=query.model_dump())
        except httpx.HTTPError as exc:
            raise TransportFailure(
                f"Failed to reach the aggregation service: {exc}"
            ) from exc

    def fetch(self, request: RequestParameters) -> list[WatchSegment]:
        """@brief Fetch watch segments for one resolved request.

        @description Issues exactly one POST. Nothing is retried, cached or
        deduplicated, and no timeout beyond the network stack's is applied.

        @param request Resolved request parameters.
        @return Segments in the order returned by the service (possibly empty).
        @throws ValueError If the request window is unresolved.
        @throws TransportFailure On network errors or an unreadable envelope.
        @throws HttpFailure On a non-2xx status.
        @throws BusinessFailure On a 2xx envelope with a non-zero code.
        """
        query = self.build_query(request)
        _LOGGER.info("Requesting watch segments from %s: %s", self._api_url, query.model_dump())

        if self._client is not None:
            response = self._post(self._client, query)
        else:
            with httpx.Client(timeout=None) as client:
                response = self._post(client, query)

        if not response.is_success:
            _LOGGER.error(
                "Aggregation service answered %s: %s", response.status_code, response.text
            )
            raise HttpFailure(response.status_code, response.text)

        try:
            envelope = SegmentsEnvelope.model_validate_json(response.content)
        except ValidationError as exc:
            raise TransportFailure(
                "Aggregation service returned an unreadable response."
            ) from exc

        if envelope.code != 0:
            _LOGGER.error("Aggregation service business error %s: %s", envelope.code, envelope.msg)
            raise BusinessFailure(envelope.msg)

        segments = list(envelope.data.segments) if envelope.data else []
        _LOGGER.info("Received %d watch segments", len(segments))
        return segments
