"""Locate resources across origins and resolve XML schema imports."""

from .constants import DEFAULT_SEARCH_ORDER, OriginKind
from .exceptions import (
    ConfigurationError,
    ResourceResolutionError,
    SchemaLoadError,
    SchemaValidationError,
)
from .locator import ResourceHandle, ResourceLocator, parse_search_order
from .schema import (
    BaseDirectoryStrategy,
    ImportReference,
    ResolvedSchemaRecord,
    SchemaResourceResolver,
)

__all__ = [
    "DEFAULT_SEARCH_ORDER",
    "OriginKind",
    "ConfigurationError",
    "ResourceResolutionError",
    "SchemaLoadError",
    "SchemaValidationError",
    "ResourceHandle",
    "ResourceLocator",
    "parse_search_order",
    "BaseDirectoryStrategy",
    "ImportReference",
    "ResolvedSchemaRecord",
    "SchemaResourceResolver",
]
