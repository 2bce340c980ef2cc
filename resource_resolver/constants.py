from __future__ import annotations

from enum import Enum


class OriginKind(Enum):
    """Where a resource may be found."""

    FILE_SYSTEM = "file_system"
    BUNDLED_RESOURCE = "bundled_resource"
    REMOTE_URL = "remote_url"


DEFAULT_SEARCH_ORDER = (OriginKind.FILE_SYSTEM, OriginKind.BUNDLED_RESOURCE)

SEARCH_ORDER_ENV = "RESOURCE_SEARCH_ORDER"

XML_SCHEMA_NS = "http://www.w3.org/2001/XMLSchema"

DEFAULT_ENCODING = "utf-8"
