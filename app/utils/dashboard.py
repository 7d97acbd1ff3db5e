from fastapi import Depends

from app.core.catalog import parse_catalog
from app.schemas.catalog import IdentifierCatalog
from app.services.dashboard import DashboardService
from app.services.segment_fetcher import SegmentFetcher
from app.utils.env import get_default_video_identifier, get_video_identifiers


def get_identifier_catalog() -> IdentifierCatalog:
    """@brief Read the identifier catalog from the environment.

    @return Catalog parsed from `VIDEO_IDENTIFIERS`, falling back to
    `DEFAULT_VIDEO_IDENTIFIER`.
    """
    return parse_catalog(get_video_identifiers(), get_default_video_identifier())


def get_segment_fetcher() -> SegmentFetcher:
    """@brief Resolve the aggregation service client.

    @return `SegmentFetcher` pointed at `SEGMENTS_API_URL`.
    """
    return SegmentFetcher()


def get_dashboard_service(
    catalog: IdentifierCatalog = Depends(get_identifier_catalog),
    fetcher: SegmentFetcher = Depends(get_segment_fetcher),
) -> DashboardService:
    """@brief Build the dashboard loader for one request.

    @param catalog Catalog read for this request.
    @param fetcher Aggregation service client.
    @return Ready-to-use `DashboardService`.
    """
    return DashboardService(catalog=catalog, fetcher=fetcher)
