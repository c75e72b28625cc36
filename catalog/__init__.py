"""
Read-side catalog core: the record store client contract, the hour/location
catalog queries, similar-school ranking and the location/thumbnail helpers.
"""

from catalog.errors import (
    DuplicateIdError,
    NotFoundError,
    StoreError,
    StoreUnavailableError,
    UnauthorizedError,
)
from catalog.location import build_location_route, format_location
from catalog.query import filter_by_hours, schools_by_location
from catalog.similarity import match_score, similar_schools
from catalog.store_client import HttpRecordStoreClient, RecordStoreClient, SqlRecordStoreClient
from catalog.thumbnails import school_thumbnail

__all__ = [
    "DuplicateIdError",
    "HttpRecordStoreClient",
    "NotFoundError",
    "RecordStoreClient",
    "SqlRecordStoreClient",
    "StoreError",
    "StoreUnavailableError",
    "UnauthorizedError",
    "build_location_route",
    "filter_by_hours",
    "format_location",
    "match_score",
    "school_thumbnail",
    "schools_by_location",
    "similar_schools",
]
